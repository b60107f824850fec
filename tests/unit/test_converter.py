import os
import shutil
import sys
import tempfile
import unittest

from PIL import Image

# srcディレクトリをパスに追加
SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "src"))
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from sgf2gif.config import RenderConfig, BLACK, WHITE
from sgf2gif.errors import ParseError, NoGamesError, MoveOutOfBoundsError
from sgf2gif.services.converter import SgfToGifConverter, convert

WOOD = (0xE6, 0xBF, 0x83)


class TestConvert(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.mkdtemp()
        self.out = os.path.join(self.tmp, "out.gif")

    def tearDown(self):
        shutil.rmtree(self.tmp)

    def write_sgf(self, content: bytes, name="game.sgf"):
        path = os.path.join(self.tmp, name)
        with open(path, "wb") as f:
            f.write(content)
        return path

    def test_single_black_move(self):
        path = self.write_sgf(b"(;GM[1]FF[4]SZ[19];B[dd])")
        animation = convert(path, self.out)

        self.assertEqual(len(animation), 1)
        self.assertEqual(animation.loop_count, 1)
        frame = animation.frames[0]
        self.assertEqual(frame.getpixel((140, 140)), BLACK)
        self.assertEqual(frame.getpixel((120, 140)), BLACK)
        self.assertEqual(frame.getpixel((140, 160)), BLACK)

        with Image.open(self.out) as im:
            self.assertEqual(im.n_frames, 1)
            self.assertEqual(im.size, (762, 762))
            self.assertEqual(im.info.get("loop"), 1)
            self.assertEqual(im.info.get("duration"), 1000)
            rgb = im.convert("RGB")
            self.assertEqual(rgb.getpixel((140, 140)), (0, 0, 0))
            self.assertEqual(rgb.getpixel((155, 155)), WOOD)
            self.assertEqual(rgb.getpixel((20, 500)), (0, 0, 0))

    def test_frames_follow_moves(self):
        path = self.write_sgf(b"(;SZ[19];B[pd];W[dp];B[pp])")
        animation = convert(path, self.out, RenderConfig(stone_diameter=10))
        self.assertEqual(len(animation), 3)
        self.assertEqual(animation.loop_count, 3)
        # dp = (3, 15) -> 中心 (35, 155)
        self.assertNotEqual(animation.frames[0].getpixel((35, 155)), WHITE)
        self.assertEqual(animation.frames[1].getpixel((35, 155)), WHITE)
        self.assertEqual(animation.frames[2].getpixel((35, 155)), WHITE)
        with Image.open(self.out) as im:
            self.assertEqual(im.n_frames, 3)

    def test_record_without_moves(self):
        path = self.write_sgf(b"(;GM[1]SZ[19]PB[Black]PW[White])")
        animation = convert(path, self.out)
        self.assertEqual(len(animation), 0)
        self.assertEqual(animation.loop_count, 0)
        self.assertTrue(os.path.exists(self.out))

    def test_parse_error_leaves_output_untouched(self):
        path = self.write_sgf(b"(;B[dd];W[pp]")
        with self.assertRaises(ParseError):
            convert(path, self.out)
        self.assertFalse(os.path.exists(self.out))

        with open(self.out, "wb") as f:
            f.write(b"previous")
        with self.assertRaises(ParseError):
            convert(path, self.out)
        with open(self.out, "rb") as f:
            self.assertEqual(f.read(), b"previous")

    def test_no_games(self):
        path = self.write_sgf(b"not an sgf file")
        with self.assertRaises(NoGamesError):
            convert(path, self.out)
        self.assertFalse(os.path.exists(self.out))

    def test_out_of_bounds_move(self):
        path = self.write_sgf(b"(;B[dd];W[tt])")
        with self.assertRaises(MoveOutOfBoundsError):
            convert(path, self.out)
        self.assertFalse(os.path.exists(self.out))

    def test_auto_size(self):
        path = self.write_sgf(b"(;SZ[9];B[ee];W[ii])")
        converter = SgfToGifConverter(RenderConfig(stone_diameter=10), auto_size=True)
        animation = converter.convert(path, self.out)
        self.assertEqual(animation.frames[0].size, (92, 92))
        self.assertEqual(converter.config.board_size, 9)

    def test_fixed_size_ignores_sz(self):
        path = self.write_sgf(b"(;SZ[9];B[ee])")
        animation = convert(path, self.out, RenderConfig(stone_diameter=10))
        self.assertEqual(animation.frames[0].size, (192, 192))


if __name__ == "__main__":
    unittest.main()
