from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sgf2gif.config import BLACK, WHITE
from sgf2gif.core.point import Point


class Color(Enum):
    BLACK = 'B'
    WHITE = 'W'

    @property
    def key(self) -> str:
        return "black" if self == Color.BLACK else "white"

    @property
    def palette_index(self) -> int:
        return BLACK if self == Color.BLACK else WHITE

    @classmethod
    def from_ident(cls, ident: str) -> Optional['Color']:
        """SGFのプロパティ名 (B/W) から色を得る。着手以外はNone"""
        if ident == 'B': return cls.BLACK
        if ident == 'W': return cls.WHITE
        return None


@dataclass(frozen=True)
class Move:
    """一手分の着手 (抽出後は不変)"""
    color: Color
    point: Point

    @property
    def x(self) -> int:
        return self.point.x

    @property
    def y(self) -> int:
        return self.point.y

    def __str__(self):
        return f"{self.color.key} {self.point.to_sgf()} ({self.x}, {self.y})"
