import argparse
import logging
import sys

from sgf2gif.config import RenderConfig, BOARD_SIZE, STONE_DIAMETER, FRAME_DELAY
from sgf2gif.errors import Sgf2GifError, ArgumentCountError
from sgf2gif.services.converter import convert
from sgf2gif.utils.renderer.theme import THEMES, get_theme
from sgf2gif.utils.logger import logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sgf2gif',
        usage='%(prog)s input_sgf_file output_gif_file [options]',
        description='Render every move of an SGF game record as a frame of an animated GIF',
    )
    parser.add_argument('paths', nargs='*', help=argparse.SUPPRESS)
    parser.add_argument('--board-size', type=int, default=BOARD_SIZE, help='Board size in lines (default: 19)')
    parser.add_argument('--stone-diameter', type=int, default=STONE_DIAMETER, help='Stone diameter in pixels (default: 40)')
    parser.add_argument('--delay', type=int, default=FRAME_DELAY, help='Delay between frames in 1/100 s (default: 100)')
    parser.add_argument('--theme', choices=sorted(THEMES), default='classic', help='Palette preset')
    parser.add_argument('--auto-size', action='store_true', help='Take the board size from the SZ property when present')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log every drawn move')
    return parser


def parse_args(argv, parser=None):
    parser = parser or build_parser()
    args = parser.parse_args(argv)
    if len(args.paths) != 2:
        raise ArgumentCountError("bad number of arguments")
    args.input_path, args.output_path = args.paths
    return args


def main(argv=None) -> int:
    parser = build_parser()
    try:
        args = parse_args(sys.argv[1:] if argv is None else argv, parser)
    except ArgumentCountError as e:
        logger.error(str(e), layer="CLI")
        parser.print_usage(sys.stderr)
        return 2

    if args.verbose:
        logger.set_console_level(logging.DEBUG)

    try:
        config = RenderConfig(
            board_size=args.board_size,
            stone_diameter=args.stone_diameter,
            delay=args.delay,
            theme=get_theme(args.theme),
        )
    except ValueError as e:
        logger.error(str(e), layer="CLI")
        parser.print_usage(sys.stderr)
        return 2

    try:
        animation = convert(args.input_path, args.output_path, config, auto_size=args.auto_size)
    except Sgf2GifError as e:
        logger.error(f"{type(e).__name__}: {e}", layer="CLI")
        return 1

    logger.info(f"Wrote {len(animation)} frame(s) to {args.output_path}", layer="CLI")
    return 0


if __name__ == '__main__':
    sys.exit(main())
