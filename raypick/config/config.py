"""Base Config class"""

import logging

import numpy as np
import yaml

from raypick.utils.yaml import NumpyToNativeDumper

from .utils import as_float_array, null

logger = logging.getLogger('raypick.config')


def _same(old, new):
    if isinstance(old, np.ndarray) or isinstance(new, np.ndarray):
        return np.array_equal(old, new)
    return old == new


class Config(object):

    _dirty = False

    def __init__(self, cfg):
        self._cfg = cfg

    @property
    def dirty(self):
        return self._dirty

    def get(self, key, default=null):
        args = key.split(':')
        args, item = args[:-1], args[-1]
        temp = self._cfg
        for arg in args:
            temp = temp.get(arg, {})
            # intermediate block may be None:
            temp = {} if temp is None else temp
        try:
            res = temp[item]
        except KeyError:
            if default is not null:
                logger.info(
                    '%s not specified, defaulting to %s', key, default
                    )
                res = temp.get(item, default)
            else:
                raise RuntimeError(
                    '%s must be specified in configuration file' % key
                    )
        return res

    def get_array(self, key, shape, default=null):
        """Like `get`, but the value is cast to a float array of `shape`"""
        res = self.get(key, default=default)
        if res is None:
            return None
        return as_float_array(res, key, shape)

    def set(self, key, val):
        args = key.split(':')
        args, item = args[:-1], args[-1]
        temp = self._cfg
        for arg in args:
            if temp.get(arg) is None:
                temp[arg] = {}
            temp = temp[arg]
        if not _same(temp.get(item, null), val):
            temp[item] = val
            self._dirty = True

    def dump(self, filename):
        with open(filename, 'w') as f:
            yaml.dump(self._cfg, f, Dumper=NumpyToNativeDumper)
        self._dirty = False

