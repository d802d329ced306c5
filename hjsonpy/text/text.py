from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Absolute character offset into a source string."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def from_int(value: int) -> "TextSize":
        return TextSize(value)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        """Zero-width range at `offset`, used for positions between tokens."""
        return TextRange(offset.value, offset.value)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


@dataclass(frozen=True, slots=True)
class LineColumn:
    """1-based line/column pair, derived from an offset for diagnostics only."""

    line: int
    column: int


def line_column(source: str, offset: TextSize) -> LineColumn:
    """Count line breaks up to `offset`.

    `\\r\\n` counts as a single line break; a lone `\\r` does too.
    """
    end = min(offset.value, len(source))
    prefix = source[:end]
    line_breaks = prefix.count("\n") + prefix.count("\r") - prefix.count("\r\n")
    last_break = max(prefix.rfind("\n"), prefix.rfind("\r"))
    return LineColumn(line=line_breaks + 1, column=end - last_break)


def excerpt(source: str, offset: TextSize, width: int = 20) -> str:
    """Short single-line snippet of `source` starting at `offset`."""
    start = min(offset.value, len(source))
    snippet = source[start : start + width]
    for stop in ("\n", "\r"):
        index = snippet.find(stop)
        if index != -1:
            snippet = snippet[:index]
    return snippet


def slice_text_range(source: str, range: TextRange) -> str:
    return source[range.start.value : range.end.value]
