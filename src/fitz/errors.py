from typing import Optional


class FitzError(Exception):
    code = 1
    message = "Error"

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail


class UsageError(FitzError, ValueError):
    code = 1
    message = "Usage: fitz tilefile [p1type p2type [height width | filename]]"


class TileFileNotFound(FitzError, OSError):
    code = 2
    message = "Can't access tile file"


class TileFileError(FitzError, ValueError):
    code = 3
    message = "Invalid tile file contents"


class PlayerTypeError(FitzError, ValueError):
    code = 4
    message = "Invalid player type"


class DimensionError(FitzError, ValueError):
    code = 5
    message = "Invalid dimensions"


class SaveFileNotFound(FitzError, OSError):
    code = 6
    message = "Can't access save file"


class SaveFileError(FitzError, ValueError):
    code = 7
    message = "Invalid save file contents"


class EndOfInput(FitzError, EOFError):
    code = 10
    message = "End of input"


class SearchExhausted(RuntimeError):
    """An automated player found no legal move although one was required."""
