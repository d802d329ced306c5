"""Serializers (compact JSON, pretty JSON, relaxed HJson) and the format runner."""

from hjsonpy.format.options import FormatOptions, OutputStyle
from hjsonpy.format.render import (
    render,
    to_formatted_json_string,
    to_hjson_string,
    to_json_string,
)
from hjsonpy.format.runner import FormatRunResult, run_format

__all__ = [
    "FormatOptions",
    "FormatRunResult",
    "OutputStyle",
    "render",
    "run_format",
    "to_formatted_json_string",
    "to_hjson_string",
    "to_json_string",
]
