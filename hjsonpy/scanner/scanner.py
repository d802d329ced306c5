"""Position-tracked lookahead scanner."""

from hjsonpy.diagnostics import SCANNER_NO_MATCH, SCANNER_UNEXPECTED_CHARACTER
from hjsonpy.errors import ScanError
from hjsonpy.scanner.tokens import SKIPPABLE, TokenSpec
from hjsonpy.text import TextRange, TextSize, slice_text_range


class Scanner:
    """Matches token specs against raw text at an absolute offset.

    The scanner has no knowledge of the grammar; the parser pulls tokens on
    demand by asking `has_next` for each spec it is willing to accept.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._last_start = 0

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> TextSize:
        return TextSize.from_int(self._position)

    @property
    def has_more(self) -> bool:
        return self._position < len(self._source)

    @property
    def is_eof(self) -> bool:
        return not self.has_more

    @property
    def current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    @property
    def last_range(self) -> TextRange:
        """Range of the most recently consumed token."""
        return TextRange(self._last_start, self._position)

    @property
    def last_text(self) -> str:
        return slice_text_range(self._source, self.last_range)

    @property
    def current_range(self) -> TextRange:
        return TextRange.empty(self.position)

    def has_next(self, spec: TokenSpec) -> bool:
        return spec.pattern.match(self._source, self._position) is not None

    def next(self, spec: TokenSpec) -> str:
        match = spec.pattern.match(self._source, self._position)
        if match is None:
            raise ScanError.from_spec(
                SCANNER_NO_MATCH,
                f"Error scanning for {spec.kind.name}",
                range=self.current_range,
                source=self._source,
            )
        self._last_start = self._position
        self._position = match.end()
        return match.group(0)

    def peek_ahead(self, spec: TokenSpec) -> bool:
        """Test `spec` after skipping whitespace, newlines and comments, without consuming."""
        skipped = SKIPPABLE.match(self._source, self._position)
        start = skipped.end() if skipped is not None else self._position
        return spec.pattern.match(self._source, start) is not None

    def unexpected_character(self) -> ScanError:
        return ScanError.from_spec(
            SCANNER_UNEXPECTED_CHARACTER,
            f"Unexpected character {self.current_char!r}",
            range=self.current_range,
            source=self._source,
        )
