from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from urllib.parse import quote, unquote, urlsplit

from .convention import PathConvention, resolve_convention


logger = logging.getLogger(__name__)

FILE_SCHEME = "file"

# Characters a URI path may carry literally on top of the unreserved set,
# which quote() never escapes. "?" and "#" stay escaped so that a file name
# cannot open a query or fragment.
_PATH_SAFE = "/:@!$&'()*+,;="

_WINDOWS_SEPS = re.compile(r"[\\/]")


@dataclass(frozen=True, slots=True)
class Uri:
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class NormalizedUri:
    """A URI in canonical escaped form, paired with its precomputed hash.

    Build these with :func:`to_normalized_uri`; two URIs that differ only in
    how they percent-escape characters normalize to the same value.
    """

    text: str
    uri_hash: int = field(compare=False, repr=False)

    def __hash__(self) -> int:
        return self.uri_hash

    def __str__(self) -> str:
        return self.text


def _escape(s: str, safe: str) -> str:
    # surrogateescape maps names decoded by os.fsdecode back to their bytes,
    # which _unescape restores. Other lone surrogates cannot be mapped back.
    try:
        return quote(s, safe=safe, errors="surrogateescape")
    except UnicodeEncodeError:
        return quote(s, safe=safe, errors="surrogatepass")


def _unescape(s: str) -> str:
    return unquote(s, errors="surrogateescape")


def to_normalized_uri(uri: Uri) -> NormalizedUri:
    decoded = _unescape(uri.text)
    return NormalizedUri(
        text=_escape(decoded, _PATH_SAFE),
        uri_hash=hash(_escape(decoded, "/")),
    )


def from_normalized_uri(nuri: NormalizedUri) -> Uri:
    return Uri(nuri.text)


def path_to_uri(path: str, *, convention: PathConvention | str | None = None) -> NormalizedUri:
    """Build the file URI of an already normalized path.

    No normalization happens here; callers holding a raw path should go
    through :func:`ideloc.paths.to_normalized_file_path` instead.
    """
    conv = resolve_convention(convention)
    return to_normalized_uri(Uri(f"{FILE_SCHEME}://{_adjust_to_uri_path(path, conv)}"))


def _adjust_to_uri_path(path: str, conv: PathConvention) -> str:
    if conv is PathConvention.WINDOWS:
        drive, rest = conv.pathmod.splitdrive(path)
        # splitdrive leaves the separator after the drive in `rest`
        if rest[:1] in ("\\", "/"):
            drive += "/"
        segments = [s for s in _WINDOWS_SEPS.split(rest) if s]
        escaped = drive + "/".join(_escape(s, ":\\/") for s in segments)
        return "/" + escaped

    rest = path.lstrip("/")
    drive = path[: len(path) - len(rest)]
    segments = [s for s in rest.split("/") if s]
    return drive + "/".join(_escape(s, "/") for s in segments)


def uri_to_file_path(
    uri: Uri | NormalizedUri, *, convention: PathConvention | str | None = None
) -> str | None:
    """Decode a ``file:`` URI back into a path; ``None`` for other schemes.

    An authority component becomes a UNC prefix (``\\\\host\\...``) under the
    Windows convention and a ``//host`` prefix under POSIX.
    """
    conv = resolve_convention(convention)
    try:
        parts = urlsplit(uri.text)
    except ValueError as e:
        logger.debug("cannot split uri %r: %s", uri.text, e)
        return None
    if parts.scheme.lower() != FILE_SCHEME:
        logger.debug("not a file uri: %r", uri.text)
        return None

    path = _unescape(parts.path)
    if conv is PathConvention.WINDOWS:
        path = path[1:] if path.startswith("/") else path
        if parts.netloc:
            path = f"//{_unescape(parts.netloc)}/{path}"
        return path.replace("/", "\\")
    if parts.netloc:
        return f"//{_unescape(parts.netloc)}{path}"
    return path
