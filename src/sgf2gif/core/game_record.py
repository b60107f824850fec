from typing import List, Optional

from sgfmill import sgf_grammar

from sgf2gif.core.coordinate_transformer import CoordinateTransformer
from sgf2gif.core.move import Color, Move
from sgf2gif.errors import (
    ParseError, NoGamesError, MalformedMoveError, MoveOutOfBoundsError
)
from sgf2gif.utils.logger import logger

# sgfmill はゲームが一つも無い場合も ValueError を投げるので、メッセージで区別する
_NO_GAMES_MESSAGE = "no SGF data found"


def load_collection(path) -> List[sgf_grammar.Coarse_game_tree]:
    """SGFファイルを読み込み、ゲームツリーのリストを返す"""
    try:
        with open(path, "rb") as f:
            content = f.read()
    except OSError as e:
        raise ParseError(f"cannot read {path}: {e}") from e
    return parse_collection(content)


def parse_collection(content: bytes) -> List[sgf_grammar.Coarse_game_tree]:
    try:
        collection = sgf_grammar.parse_sgf_collection(content)
    except ValueError as e:
        if str(e) == _NO_GAMES_MESSAGE:
            return []
        raise ParseError(f"malformed SGF: {e}") from e
    logger.debug(f"Parsed {len(collection)} game tree(s)", layer="RECORD")
    return collection


def first_game(collection) -> sgf_grammar.Coarse_game_tree:
    n = len(collection)
    if n == 0:
        raise NoGamesError("no games in the file")
    if n > 1:
        logger.warning(f"found {n} games: using the first, ignoring the rest", layer="RECORD")
    return collection[0]


def extract_moves(game_tree) -> List[Move]:
    """ノード順、ノード内ではプロパティ順に着手 (B/W) を取り出す

    分岐 (children) は辿らない。B/W 以外のプロパティは無視する。
    """
    moves = []
    for node in game_tree.sequence:
        for ident, values in node.items():
            color = Color.from_ident(ident)
            if color is None:
                continue
            if len(values) != 1:
                raise MalformedMoveError(f"malformed move: {ident}{values!r}")
            point = CoordinateTransformer.sgf_to_indices_static(values[0])
            moves.append(Move(color, point))
    return moves


def check_bounds(moves: List[Move], board_size: int) -> List[Move]:
    """盤外の着手を拒否する"""
    for i, move in enumerate(moves, start=1):
        if not move.point.is_valid(board_size):
            raise MoveOutOfBoundsError(
                f"move {i} ({move}) is outside the {board_size}x{board_size} board"
            )
    return moves


def board_size_of(game_tree) -> Optional[int]:
    """ルートノードの SZ プロパティから碁盤サイズを取得する (無ければNone)"""
    if not game_tree.sequence:
        return None
    values = game_tree.sequence[0].get("SZ")
    if not values or len(values) != 1:
        return None
    try:
        size = int(values[0].decode('latin-1').strip())
    except ValueError:
        # 長方形 (19:13 等) は扱わない
        return None
    return size if size > 0 else None
