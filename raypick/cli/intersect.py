import argparse
import logging

from raypick.cli.project import (
    add_pointer_arguments, configure_logging, dump, load_config,
    project_pointer, release_logging
)


descr = 'Test a pointer ray against the configured primitive'
example = """
examples:
    raypick intersect picking.yml 0.25 -0.5
    raypick intersect picking.yml 400 300 --pixels
"""


def configure_parser(sub_parsers):
    p = sub_parsers.add_parser(
        'intersect',
        description=descr,
        help=descr,
        epilog=example,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        )
    add_pointer_arguments(p)
    p.set_defaults(func=execute)


def intersect_pointer(cfg, args):
    """Project the pointer and test it; returns a dict of results"""
    logger = logging.getLogger('raypick')

    ndc, ray = project_pointer(cfg, args)
    kind = cfg.primitive.type
    result = cfg.primitive.intersect(
        ray.start, ray.direction, cfg.picking
        )

    res = {'primitive': kind, 'ndc': ndc, 'ray': ray}
    if result is None:
        logger.info('no %s hit', kind)
        res['hit'] = False
        return res

    if kind == 'aabb':
        # the box test only gives the entry time
        time = result
        point = ray.start + time*ray.direction
    else:
        time, point = result
    logger.info('%s hit at t = %g', kind, time)
    res.update(hit=True, time=time, point=point)
    return res


def execute(args, parser):
    ch = configure_logging(args)
    logger = logging.getLogger('raypick')
    logger.info('=== begin intersect ===')
    try:
        cfg = load_config(args, parser)
        dump(intersect_pointer(cfg, args))
    finally:
        logger.info('=== end intersect ===')
        release_logging(ch)
