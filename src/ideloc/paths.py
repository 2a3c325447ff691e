from __future__ import annotations

from dataclasses import dataclass, field

from .convention import PathConvention, resolve_convention
from .uri import (
    NormalizedUri,
    Uri,
    from_normalized_uri,
    path_to_uri,
    to_normalized_uri,
    uri_to_file_path,
)


# File name used for diagnostics that belong to no real file.
NO_FILE_PATH = "<unknown>"

# URI of the empty path. No non-empty path maps to it.
EMPTY_PATH_URI: NormalizedUri = to_normalized_uri(Uri("file://"))


@dataclass(frozen=True, slots=True, order=True)
class NormalizedFilePath:
    """A file path with normalized separators.

    The hash of the path and its URI are cached next to it: both are needed
    on nearly every request, and normalizing again each time is not cheap.
    Build values with :func:`to_normalized_file_path`.
    """

    path: str
    path_hash: int = field(compare=False)
    uri: NormalizedUri = field(compare=False)

    def __hash__(self) -> int:
        return self.path_hash

    def __repr__(self) -> str:
        return f"NormalizedFilePath({self.path!r})"

    def __reduce__(self):
        # str hashes are salted per process, so only path and URI travel.
        return (_restore, (self.path, self.uri.text))


def _restore(path: str, uri_text: str) -> NormalizedFilePath:
    return NormalizedFilePath(path, hash(path), to_normalized_uri(Uri(uri_text)))


_EMPTY = NormalizedFilePath("", hash(""), EMPTY_PATH_URI)


def normalise(path: str, *, convention: PathConvention | str | None = None) -> str:
    """Lexically normalize `path` (separators, ``.`` and ``..``).

    The filesystem is never consulted. The empty path stays empty instead
    of becoming ``.``.
    """
    if path == "":
        return ""
    return resolve_convention(convention).pathmod.normpath(path)


def to_normalized_file_path(
    raw: str, *, convention: PathConvention | str | None = None
) -> NormalizedFilePath:
    if raw == "":
        return _EMPTY
    conv = resolve_convention(convention)
    nfp = conv.pathmod.normpath(raw)
    return NormalizedFilePath(nfp, hash(nfp), path_to_uri(nfp, convention=conv))


def from_normalized_file_path(nfp: NormalizedFilePath) -> str:
    return nfp.path


def normalized_file_path_to_uri(nfp: NormalizedFilePath) -> NormalizedUri:
    return nfp.uri


def file_path_to_uri(raw: str, *, convention: PathConvention | str | None = None) -> Uri:
    """Normalize `raw` and return its file URI."""
    return from_normalized_uri(to_normalized_file_path(raw, convention=convention).uri)


def uri_to_file_path_or_empty(
    uri: Uri | NormalizedUri, *, convention: PathConvention | str | None = None
) -> str | None:
    """:func:`ideloc.uri.uri_to_file_path` that also understands the empty path."""
    if uri.text == EMPTY_PATH_URI.text:
        return ""
    return uri_to_file_path(uri, convention=convention)


def from_uri(
    nuri: NormalizedUri, *, convention: PathConvention | str | None = None
) -> NormalizedFilePath:
    path = uri_to_file_path_or_empty(nuri, convention=convention)
    if path is None:
        path = NO_FILE_PATH
    return to_normalized_file_path(path, convention=convention)
