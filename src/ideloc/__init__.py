from __future__ import annotations

from .convention import PathConvention, current_convention
from .errors import SpanParseError
from .paths import (
    EMPTY_PATH_URI,
    NO_FILE_PATH,
    NormalizedFilePath,
    file_path_to_uri,
    from_normalized_file_path,
    from_uri,
    normalise,
    normalized_file_path_to_uri,
    to_normalized_file_path,
    uri_to_file_path_or_empty,
)
from .spans import (
    NO_RANGE,
    Location,
    Position,
    Range,
    SourceLoc,
    SourceSpan,
    show_position,
    span_to_range,
)
from .srcspan import find_src_span, parse_src_span, read_src_span
from .uri import (
    NormalizedUri,
    Uri,
    from_normalized_uri,
    path_to_uri,
    to_normalized_uri,
    uri_to_file_path,
)

__all__ = [
    "EMPTY_PATH_URI",
    "Location",
    "NO_FILE_PATH",
    "NO_RANGE",
    "NormalizedFilePath",
    "NormalizedUri",
    "PathConvention",
    "Position",
    "Range",
    "SourceLoc",
    "SourceSpan",
    "SpanParseError",
    "Uri",
    "current_convention",
    "file_path_to_uri",
    "find_src_span",
    "from_normalized_file_path",
    "from_normalized_uri",
    "from_uri",
    "normalise",
    "normalized_file_path_to_uri",
    "parse_src_span",
    "path_to_uri",
    "read_src_span",
    "show_position",
    "span_to_range",
    "to_normalized_file_path",
    "to_normalized_uri",
    "uri_to_file_path",
    "uri_to_file_path_or_empty",
]
