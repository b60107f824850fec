from typing import Tuple, Union

from sgf2gif.core.point import Point
from sgf2gif.errors import MalformedCoordinateError


class CoordinateTransformer:
    # SGFの座標は 'a' からのオフセット
    BASE = ord('a')

    def __init__(self, config):
        self.grid_size = config.stone_diameter
        self.margin = config.stone_diameter // 2

    @staticmethod
    def sgf_to_indices_static(token: Union[str, bytes]) -> Point:
        """SGF形式 (ddなど) を Point(x, y) に変換 (static)

        範囲チェックは行わない。盤外の値もそのまま返す。
        """
        if isinstance(token, (bytes, bytearray)):
            token = token.decode('latin-1')
        if len(token) != 2:
            raise MalformedCoordinateError(f"malformed move value: {token!r}")
        x = ord(token[0]) - CoordinateTransformer.BASE
        y = ord(token[1]) - CoordinateTransformer.BASE
        return Point(x, y)

    @staticmethod
    def indices_to_sgf_static(x: int, y: int) -> str:
        """Point(x, y) を SGF形式 (ddなど) に変換 (static)"""
        return chr(CoordinateTransformer.BASE + x) + chr(CoordinateTransformer.BASE + y)

    def indices_to_pixel(self, x: int, y: int) -> Tuple[int, int]:
        """(x, y) インデックスを画像上の交点ピクセル座標に変換"""
        return self.margin + x * self.grid_size, self.margin + y * self.grid_size
