import dataclasses
from typing import List, Optional

from PIL import Image

from sgf2gif.config import RenderConfig, DEFAULT_CONFIG, BACKGROUND
from sgf2gif.core.move import Move
from sgf2gif.utils.renderer.base import RenderContext
from sgf2gif.utils.renderer.layers import GridLayer, StoneLayer
from sgf2gif.utils.logger import logger

class FrameRasterizer:
    """直前のフレームを複製して一手ずつ石を描き足すクラス"""

    def __init__(self, config: RenderConfig = DEFAULT_CONFIG):
        self.config = config
        self.ctx = RenderContext.from_config(config)
        self.grid_layer = GridLayer()
        self.stone_layer = StoneLayer()

    def new_board(self) -> Image.Image:
        """石の無い碁盤 (背景と罫線) を描画する"""
        side = self.config.side
        img = Image.new("P", (side, side), BACKGROUND)
        img.putpalette(self.config.theme.palette())
        self.grid_layer.draw(img, self.ctx)
        return img

    def rasterize(self, move: Move, previous: Optional[Image.Image] = None) -> Image.Image:
        """previous (無ければ空の碁盤) に move の石を加えた新しいフレームを返す

        previous 自体は変更しない。
        """
        img = self.new_board() if previous is None else previous.copy()
        logger.debug(f"Drawing {move}", layer="RENDER")
        self.stone_layer.draw(img, dataclasses.replace(self.ctx, move=move))
        return img

    def rasterize_all(self, moves: List[Move]) -> List[Image.Image]:
        frames = []
        frame = None
        for move in moves:
            frame = self.rasterize(move, frame)
            frames.append(frame)
        return frames
