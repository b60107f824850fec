import io
from dataclasses import dataclass
from typing import List, Tuple

from PIL import Image

from sgf2gif.config import RenderConfig, DEFAULT_CONFIG
from sgf2gif.errors import EncodeError, WriteError
from sgf2gif.utils.renderer.renderer import FrameRasterizer
from sgf2gif.utils.logger import logger


@dataclass(frozen=True)
class Animation:
    """フレーム列と表示時間・ループ回数の組"""
    frames: Tuple[Image.Image, ...]
    delays: Tuple[int, ...]
    loop_count: int

    def __len__(self):
        return len(self.frames)


def assemble_animation(frames: List[Image.Image], config: RenderConfig = DEFAULT_CONFIG) -> Animation:
    """フレーム列からアニメーションを組み立てる

    ループ回数はフレーム数と同じにする。既存の出力との互換のための意図的な仕様。
    """
    return Animation(
        frames=tuple(frames),
        delays=tuple(config.delay for _ in frames),
        loop_count=len(frames),
    )


def encode_animation(animation: Animation, config: RenderConfig = DEFAULT_CONFIG) -> bytes:
    """アニメーションをGIFのバイト列にエンコードする

    フレームが無い場合は空の碁盤の静止画を出力する (GIFは0枚の画像を持てない)。
    """
    buf = io.BytesIO()
    try:
        if not animation.frames:
            board = FrameRasterizer(config).new_board()
            board.save(buf, format="GIF", optimize=False)
        else:
            first, *rest = animation.frames
            # Pillow は同一の連続フレームを一枚に統合するため、GIF内の画像数は
            # len(animation) より少なくなりうる。loop は Animation のフレーム数のまま
            first.save(
                buf,
                format="GIF",
                save_all=True,
                append_images=rest,
                # GIFの遅延は1/100秒単位、Pillowはミリ秒で受け取る
                duration=[d * 10 for d in animation.delays],
                loop=animation.loop_count,
                optimize=False,
            )
    except (OSError, ValueError) as e:
        raise EncodeError(f"cannot encode GIF: {e}") from e
    data = buf.getvalue()
    logger.debug(f"Encoded {len(animation)} frame(s) into {len(data)} bytes", layer="ENCODE")
    return data


def save(path, data: bytes) -> None:
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise WriteError(f"cannot write {path}: {e}") from e
    logger.info(f"Saved {path}", layer="ENCODE")
