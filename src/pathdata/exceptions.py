"""Exception hierarchy for Pathdata."""


class PathDataError(Exception):
    """Base exception for all Pathdata errors."""

    pass


class SegmentError(PathDataError):
    """Errors related to segment values."""

    pass


class SegmentDecodeError(SegmentError):
    """A serialized segment could not be turned into a Segment."""

    def __init__(self, index: int | None, reason: str) -> None:
        self.index = index
        self.reason = reason
        where = f" at index {index}" if index is not None else ""
        super().__init__(f"Invalid segment{where}: {reason}")


class NonFiniteValueError(SegmentError):
    """A NaN or infinite coordinate was encoded with rejection enabled."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Cannot encode non-finite number: {value!r}")


class InputError(PathDataError):
    """Errors related to reading segment sources."""

    pass


class DocumentLoadError(InputError):
    """Error loading a JSON segment document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load segments from '{path}': {reason}")


class FontLoadError(InputError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(InputError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")
