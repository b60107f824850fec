"""Exceptions raised by the SGF to GIF pipeline. Every one of them aborts the run."""


class Sgf2GifError(Exception):
    """Base class for all conversion failures."""

    pass


class ArgumentCountError(Sgf2GifError):
    """Raised when the command line does not name exactly one input and one output."""

    pass


class ParseError(Sgf2GifError):
    """Raised when the game record cannot be read or is not valid SGF."""

    pass


class NoGamesError(Sgf2GifError):
    """Raised when the record holds no game tree at all."""

    pass


class MalformedMoveError(Sgf2GifError):
    """Raised when a B or W property does not carry exactly one value."""

    pass


class MalformedCoordinateError(Sgf2GifError):
    """Raised when a point value is not exactly two characters long."""

    pass


class MoveOutOfBoundsError(Sgf2GifError):
    """Raised when a decoded move lies outside the board."""

    pass


class EncodeError(Sgf2GifError):
    """Raised when the frames cannot be encoded as a GIF."""

    pass


class WriteError(EncodeError):
    """Raised when the encoded GIF cannot be written to its destination."""

    pass
