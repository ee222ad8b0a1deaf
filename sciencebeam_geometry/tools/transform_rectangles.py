import argparse
import logging
from functools import reduce
from typing import Iterable, List, Optional

from sciencebeam_geometry.utils.drectangle import DRectangle
from sciencebeam_geometry.utils.drectangle_io import (
    FILE_FORMATS,
    FileFormats,
    parse_drectangle,
    read_drectangles_file,
    write_drectangles_file
)


LOGGER = logging.getLogger(__name__)


def get_args_parser():
    parser = argparse.ArgumentParser(
        description='Scale, translate, clip or combine rectangles'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--input-file',
        type=str,
        required=True,
        help='Path to the input file (one "[(left, top) (right, bottom)]" per line)'
    )
    parser.add_argument(
        '--input-format',
        choices=FILE_FORMATS,
        default=FileFormats.TEXT,
        help='Format of the input file'
    )
    parser.add_argument(
        '--output-file',
        type=str,
        required=True,
        help='Path to the output file'
    )
    parser.add_argument(
        '--output-format',
        choices=FILE_FORMATS,
        default=FileFormats.TEXT,
        help='Format of the output file'
    )
    parser.add_argument(
        '--scale',
        type=float,
        help='Scale every rectangle around its center'
    )
    parser.add_argument(
        '--translate-x',
        type=float,
        default=0.0,
        help='Move every rectangle horizontally'
    )
    parser.add_argument(
        '--translate-y',
        type=float,
        default=0.0,
        help='Move every rectangle vertically'
    )
    parser.add_argument(
        '--clip-to',
        type=parse_drectangle,
        help='Intersect every rectangle with the given rectangle, e.g. "[(0, 0) (100, 100)]"'
    )
    parser.add_argument(
        '--union',
        action='store_true',
        help='Output a single rectangle containing all of the rectangles'
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = get_args_parser()
    return parser.parse_args(argv)


def transform_drectangles(
    drectangles: Iterable[DRectangle],
    scale: Optional[float] = None,
    translate_x: float = 0.0,
    translate_y: float = 0.0,
    clip_to: Optional[DRectangle] = None,
    union: bool = False
) -> List[DRectangle]:
    result = []
    for drectangle in drectangles:
        if scale is not None:
            drectangle = drectangle * scale
        if translate_x or translate_y:
            drectangle = drectangle.move_by(translate_x, translate_y)
        if clip_to is not None:
            drectangle = drectangle.intersection(clip_to)
        result.append(drectangle)
    if union:
        return [reduce(DRectangle.include, result, DRectangle())]
    return result


def run(args: argparse.Namespace):
    drectangles = read_drectangles_file(args.input_file, args.input_format)
    LOGGER.info('loaded %d rectangles from %r', len(drectangles), args.input_file)
    drectangles = transform_drectangles(
        drectangles,
        scale=args.scale,
        translate_x=args.translate_x,
        translate_y=args.translate_y,
        clip_to=args.clip_to,
        union=args.union
    )
    write_drectangles_file(args.output_file, drectangles, args.output_format)
    LOGGER.info('saved %d rectangles to %r', len(drectangles), args.output_file)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    if args.debug:
        for name in ['__main__', 'sciencebeam_geometry']:
            logging.getLogger(name).setLevel(logging.DEBUG)
    LOGGER.debug('args: %s', args)
    run(args)


if __name__ == '__main__':
    logging.basicConfig(level='INFO')
    main()
