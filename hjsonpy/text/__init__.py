"""Text offsets, ranges and position helpers."""

from hjsonpy.text.text import (
    LineColumn,
    TextRange,
    TextSize,
    excerpt,
    line_column,
    slice_text_range,
)

__all__ = [
    "LineColumn",
    "TextRange",
    "TextSize",
    "excerpt",
    "line_column",
    "slice_text_range",
]
