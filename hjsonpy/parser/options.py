"""Parser configuration options."""

from dataclasses import dataclass
from typing import Final

DEFAULT_IDENTITY: Final[str] = "hjson"

# Renderers and value equality recurse once per nesting level.
DEFAULT_MAX_DEPTH: Final[int] = 256


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Settings for a single parse.

    `identity` names the produced document. `max_depth` bounds container
    nesting; `None` leaves it unbounded, in which case very deep documents
    parse but may not render.
    """

    identity: str = DEFAULT_IDENTITY
    max_depth: int | None = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError("max_depth must be >= 1")
