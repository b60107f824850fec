from typing import NamedTuple

class Point(NamedTuple):
    """盤上の交点 (0始まりのグリッド座標。ピクセル座標ではない)"""
    x: int
    y: int

    def is_valid(self, size: int) -> bool:
        """盤面内に収まっているか判定"""
        return 0 <= self.x < size and 0 <= self.y < size

    @classmethod
    def from_sgf(cls, token) -> 'Point':
        """SGF座標文字列（dd等）からPointを生成"""
        from sgf2gif.core.coordinate_transformer import CoordinateTransformer
        return CoordinateTransformer.sgf_to_indices_static(token)

    def to_sgf(self) -> str:
        """SGF座標文字列に変換"""
        from sgf2gif.core.coordinate_transformer import CoordinateTransformer
        return CoordinateTransformer.indices_to_sgf_static(self.x, self.y)
