"""Entry point for raypick command line interface"""

import argparse
import sys

# Absolute imports, so this also runs as a script
import raypick
from raypick.cli import intersect
from raypick.cli import project


def main(argv=None):
    argv = sys.argv[1:] if argv is None else list(argv)
    if len(argv) == 0:
        argv.append('-h')

    p = argparse.ArgumentParser(
        description='Pointer picking against planes, triangles, quads '
                    'and axis aligned boxes'
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help='verbose reporting',
    )
    p.add_argument(
        "--version",
        action="version",
        version='%(prog)s ' + raypick.__version__,
    )
    sub_parsers = p.add_subparsers(
        metavar='command',
        dest='cmd',
    )

    project.configure_parser(sub_parsers)
    intersect.configure_parser(sub_parsers)

    args = p.parse_args(argv)
    if args.cmd is None:
        p.print_help()
        return 1

    return args.func(args, p)


if __name__ == '__main__':
    sys.exit(main())
