from dataclasses import dataclass
from typing import Tuple, List

@dataclass(frozen=True)
class RenderTheme:
    """パレットの色を定義するデータクラス"""
    name: str
    board_color: Tuple[int, int, int]
    black_color: Tuple[int, int, int] = (0, 0, 0)
    white_color: Tuple[int, int, int] = (255, 255, 255)

    def palette(self) -> List[int]:
        """背景・黒・白の順に並べたフラットなRGBリスト (GIFのグローバルパレット)"""
        flat = []
        for rgb in (self.board_color, self.black_color, self.white_color):
            flat.extend(rgb)
        return flat

# プリセットテーマ
CLASSIC_THEME = RenderTheme(
    name="classic",
    board_color=(0xE6, 0xBF, 0x83),  # wood
)

MODERN_DARK_THEME = RenderTheme(
    name="dark",
    board_color=(40, 44, 52),
    black_color=(10, 10, 10),
    white_color=(200, 200, 200),
)

THEMES = {
    "classic": CLASSIC_THEME,
    "dark": MODERN_DARK_THEME,
}

def get_theme(name: str = None) -> RenderTheme:
    """名前からテーマを取得する。未知の名前はValueError"""
    if not name:
        return CLASSIC_THEME
    try:
        return THEMES[name]
    except KeyError:
        raise ValueError(f"unknown theme: {name} (available: {', '.join(THEMES)})") from None
