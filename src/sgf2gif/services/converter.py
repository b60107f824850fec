import dataclasses

from sgf2gif.config import RenderConfig, DEFAULT_CONFIG
from sgf2gif.core.game_record import (
    load_collection, first_game, extract_moves, check_bounds, board_size_of
)
from sgf2gif.services.animation import Animation, assemble_animation, encode_animation, save
from sgf2gif.utils.renderer.renderer import FrameRasterizer
from sgf2gif.utils.logger import logger


class SgfToGifConverter:
    """SGFの読み込みからGIFの書き出しまでを順に実行するクラス

    どの段階で失敗しても例外をそのまま送出し、出力ファイルには触れない。
    """

    def __init__(self, config: RenderConfig = DEFAULT_CONFIG, auto_size: bool = False):
        self.base_config = config
        self.config = config
        self.auto_size = auto_size

    def sgf_to_animation(self, path) -> Animation:
        collection = load_collection(path)
        game = first_game(collection)

        config = self._resolve_config(game)
        moves = check_bounds(extract_moves(game), config.board_size)
        logger.info(f"Loaded {len(moves)} move(s) from {path}", layer="PIPELINE")

        frames = FrameRasterizer(config).rasterize_all(moves)
        self.config = config
        return assemble_animation(frames, config)

    def convert(self, input_path, output_path) -> Animation:
        animation = self.sgf_to_animation(input_path)
        data = encode_animation(animation, self.config)
        save(output_path, data)
        return animation

    def _resolve_config(self, game) -> RenderConfig:
        if not self.auto_size:
            return self.base_config
        size = board_size_of(game)
        if size is None or size == self.base_config.board_size:
            return self.base_config
        logger.info(f"Using board size {size} from the record", layer="PIPELINE")
        return dataclasses.replace(self.base_config, board_size=size)


def convert(input_path, output_path, config: RenderConfig = DEFAULT_CONFIG, auto_size: bool = False) -> Animation:
    return SgfToGifConverter(config, auto_size=auto_size).convert(input_path, output_path)
