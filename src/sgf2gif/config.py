import os
from dataclasses import dataclass, field

from sgf2gif.utils.renderer.theme import RenderTheme, CLASSIC_THEME

# Palette indices (shared by every frame)
BACKGROUND = 0
BLACK = 1
WHITE = 2

# Rendering Defaults
BOARD_SIZE = 19
STONE_DIAMETER = 40  # pixels
FRAME_DELAY = 100    # delay between frames in 10ms units

# Logging
LOG_FILE_ENV = "SGF2GIF_LOG_FILE"


@dataclass(frozen=True)
class RenderConfig:
    """描画パラメータを保持する不変の設定値"""
    board_size: int = BOARD_SIZE
    stone_diameter: int = STONE_DIAMETER
    delay: int = FRAME_DELAY
    theme: RenderTheme = field(default=CLASSIC_THEME)

    def __post_init__(self):
        if self.board_size < 1:
            raise ValueError(f"board_size must be positive: {self.board_size}")
        if self.stone_diameter < 2:
            raise ValueError(f"stone_diameter must be at least 2: {self.stone_diameter}")
        if self.delay < 0:
            raise ValueError(f"delay must not be negative: {self.delay}")

    @property
    def side(self) -> int:
        """side of the board in pixels"""
        return self.board_size * self.stone_diameter + 2

    @property
    def radius(self) -> int:
        return self.stone_diameter // 2


DEFAULT_CONFIG = RenderConfig()


def log_file_path():
    """環境変数で指定されたログファイルのパスを返す (未指定ならNone)"""
    path = os.environ.get(LOG_FILE_ENV, "").strip()
    return path or None
