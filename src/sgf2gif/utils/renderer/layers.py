import math

from PIL import Image, ImageDraw

from sgf2gif.config import BACKGROUND, BLACK
from sgf2gif.utils.renderer.base import RenderLayer, RenderContext

class GridLayer(RenderLayer):
    """背景と罫線を描画するレイヤー (最初のフレームのみ)"""
    def draw(self, img: Image.Image, ctx: RenderContext):
        side = ctx.side
        sz = ctx.config.board_size
        half = ctx.config.stone_diameter // 2

        draw = ImageDraw.Draw(img)
        draw.rectangle([(0, 0), (side - 1, side - 1)], fill=BACKGROUND)

        # Lines
        for i in range(sz):
            pos, _ = ctx.transformer.indices_to_pixel(i, 0)
            draw.line([(pos, half), (pos, side - half - 1)], fill=BLACK)
            draw.line([(half, pos), (side - half - 1, pos)], fill=BLACK)

class StoneLayer(RenderLayer):
    """一手分の石 (塗りつぶした円) を描画するレイヤー"""
    def draw(self, img: Image.Image, ctx: RenderContext):
        move = ctx.move
        cx, cy = ctx.transformer.indices_to_pixel(move.x, move.y)
        rad = ctx.config.radius
        color = move.color.palette_index
        side = ctx.side

        # 距離を整数に切り捨てて半径以下なら円の内側。
        # 外接矩形の外側は必ず半径+1以上離れるので、走査は矩形内で足りる
        pixels = img.load()
        for i in range(max(0, cx - rad), min(side, cx + rad + 1)):
            for j in range(max(0, cy - rad), min(side, cy + rad + 1)):
                if dist(i, j, cx, cy) <= rad:
                    pixels[i, j] = color

def dist(x1: int, y1: int, x2: int, y2: int) -> int:
    """二点間のユークリッド距離 (整数に切り捨て)"""
    return int(math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2))
