from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from PIL import Image

from sgf2gif.config import RenderConfig
from sgf2gif.core.coordinate_transformer import CoordinateTransformer
from sgf2gif.core.move import Move

@dataclass(frozen=True)
class RenderContext:
    """描画に必要な全情報を保持するコンテキスト"""
    config: RenderConfig
    transformer: CoordinateTransformer

    # Optional Data
    move: Optional[Move] = None  # 描画対象の一手 (StoneLayer用)

    @classmethod
    def from_config(cls, config: RenderConfig) -> 'RenderContext':
        return cls(config=config, transformer=CoordinateTransformer(config))

    @property
    def side(self) -> int:
        return self.config.side

class RenderLayer(ABC):
    """描画レイヤーの基底クラス"""

    @abstractmethod
    def draw(self, img: Image.Image, ctx: RenderContext):
        """
        img: パレットモード ("P") の PIL Image。その場で書き換える
        ctx: RenderContext containing the render settings
        """
        pass
