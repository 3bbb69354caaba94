import os
from pathlib import Path

import numpy as np
import yaml


class NumPyIncludeLoader(yaml.SafeLoader):
    """
    A yaml.Loader implemenation that allows !include <numpy_file_path>. This
    allows the loading of npy files (e.g. camera matrices) into the YAML
    document. Paths are relative to the YAML file, or to the current
    directory when reading from a stream without a name.
    """

    def __init__(self, stream):
        name = getattr(stream, 'name', None)
        if isinstance(name, str):
            self._basedir = Path(name).parent
        else:
            self._basedir = Path(os.getcwd())

        super(NumPyIncludeLoader, self).__init__(stream)

    def include(self, node):
        file_path = self._basedir / self.construct_scalar(node)

        a = np.load(file_path)

        return a


NumPyIncludeLoader.add_constructor('!include', NumPyIncludeLoader.include)
