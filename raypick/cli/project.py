import argparse
import logging
import os

import numpy as np
import yaml

from raypick.utils.yaml import NumpyToNativeDumper


descr = 'Project a pointer position to a world space ray'
example = """
examples:
    raypick project picking.yml 0.25 -0.5
    raypick project picking.yml 400 300 --pixels
"""


def add_pointer_arguments(p):
    """Arguments shared by the commands that start from a pointer"""
    p.add_argument(
        'yml', type=str,
        help='YAML configuration file'
        )
    p.add_argument(
        'x', type=float,
        help='pointer x, in NDC unless --pixels is given'
        )
    p.add_argument(
        'y', type=float,
        help='pointer y, in NDC unless --pixels is given'
        )
    p.add_argument(
        '--pixels', action='store_true',
        help='x and y are pixels in the configured viewport, origin top-left'
        )
    p.add_argument(
        '-s', '--section', type=int, default=0,
        help='index of the configuration section (YAML document) to use'
        )
    p.add_argument(
        '-q', '--quiet', action='store_true',
        help="only report errors in terminal"
        )


def configure_parser(sub_parsers):
    p = sub_parsers.add_parser(
        'project',
        description=descr,
        help=descr,
        epilog=example,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        )
    add_pointer_arguments(p)
    p.add_argument(
        '--ray-scale', type=float, default=None,
        help='length of the ray; overrides "ray_scale" in the configuration'
        )
    p.set_defaults(func=execute)


def configure_logging(args):
    """Log to the console; returns the handler to remove when done"""
    log_level = logging.DEBUG if args.debug else logging.INFO
    if args.quiet:
        log_level = logging.ERROR
    logger = logging.getLogger('raypick')
    logger.setLevel(log_level)
    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(
        logging.Formatter('%(asctime)s - %(message)s', '%y-%m-%d %H:%M:%S')
        )
    logger.addHandler(ch)
    return ch


def release_logging(ch):
    logger = logging.getLogger('raypick')
    ch.flush()
    ch.close()
    logger.removeHandler(ch)


def load_config(args, parser):
    from raypick import config

    if not os.path.exists(args.yml):
        parser.error('configuration file "%s" not found' % args.yml)

    cfgs = config.open(args.yml)
    try:
        return cfgs[args.section]
    except IndexError:
        parser.error(
            'section %d requested, "%s" has %d'
            % (args.section, args.yml, len(cfgs))
            )


def project_pointer(cfg, args):
    """Return the pointer in NDC and its ray"""
    logger = logging.getLogger('raypick')

    if args.pixels:
        ndc = np.r_[cfg.viewport.to_ndc(args.x, args.y)]
        logger.info('pixel (%g, %g) -> NDC (%g, %g)',
                    args.x, args.y, ndc[0], ndc[1])
    else:
        ndc = np.r_[args.x, args.y]

    ray_scale = getattr(args, 'ray_scale', None)
    if ray_scale is None:
        ray_scale = cfg.ray_scale

    functions = cfg.picking
    logger.debug('using %s', functions)
    ray = functions.project_mouse_to_world_space(
        ndc, cfg.camera.camera, ray_scale
        )
    if not np.all(np.isfinite(ray.direction)):
        logger.warning('degenerate ray, check the camera matrices')
    return ndc, ray


def dump(results):
    print(
        yaml.dump(results, Dumper=NumpyToNativeDumper, sort_keys=False),
        end=''
    )


def execute(args, parser):
    ch = configure_logging(args)
    logger = logging.getLogger('raypick')
    logger.info('=== begin project ===')
    try:
        cfg = load_config(args, parser)
        ndc, ray = project_pointer(cfg, args)
        dump({'ndc': ndc, 'ray': ray})
    finally:
        logger.info('=== end project ===')
        release_logging(ch)
