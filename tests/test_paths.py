from __future__ import annotations

import pickle

import pytest

from ideloc import (
    EMPTY_PATH_URI,
    NO_FILE_PATH,
    NormalizedFilePath,
    PathConvention,
    Uri,
    file_path_to_uri,
    from_normalized_file_path,
    from_uri,
    normalise,
    normalized_file_path_to_uri,
    to_normalized_file_path,
    to_normalized_uri,
    uri_to_file_path_or_empty,
)


POSIX = PathConvention.POSIX
WINDOWS = PathConvention.WINDOWS


def test_empty_path_is_kept_empty() -> None:
    for conv in (POSIX, WINDOWS):
        nfp = to_normalized_file_path("", convention=conv)
        assert from_normalized_file_path(nfp) == ""
        assert nfp.path_hash == hash("")
        assert normalized_file_path_to_uri(nfp) == EMPTY_PATH_URI
    assert normalise("") == ""
    assert EMPTY_PATH_URI.text == "file://"


def test_empty_path_uri_decodes_to_empty_path() -> None:
    assert uri_to_file_path_or_empty(EMPTY_PATH_URI) == ""
    assert uri_to_file_path_or_empty(Uri("file://")) == ""


def test_posix_normalization() -> None:
    nfp = to_normalized_file_path("/home//me/./src/../lib/A.hs", convention=POSIX)
    assert nfp.path == "/home/me/lib/A.hs"
    assert nfp.uri.text == "file:///home/me/lib/A.hs"
    assert normalise("src/", convention=POSIX) == "src"
    assert normalise(".", convention=POSIX) == "."


def test_windows_normalization() -> None:
    nfp = to_normalized_file_path("C:/Users/me/./src/../A.hs", convention=WINDOWS)
    assert nfp.path == "C:\\Users\\me\\A.hs"
    assert nfp.uri.text == "file:///C:/Users/me/A.hs"
    assert normalise("a/b", convention="windows") == "a\\b"


def test_equality_and_hash_follow_normalized_path() -> None:
    a = to_normalized_file_path("/a/b/../c", convention=POSIX)
    b = to_normalized_file_path("/a//c", convention=POSIX)
    c = to_normalized_file_path("/a/d", convention=POSIX)
    assert a == b
    assert hash(a) == hash(b) == hash("/a/c")
    assert a != c
    assert {a: 1}[b] == 1
    assert sorted([c, a]) == [a, c]


def test_repr() -> None:
    assert repr(to_normalized_file_path("/x/y", convention=POSIX)) == "NormalizedFilePath('/x/y')"


def test_is_immutable() -> None:
    nfp = to_normalized_file_path("/x", convention=POSIX)
    with pytest.raises(AttributeError):
        nfp.path = "/y"  # type: ignore[misc]


def test_pickle_keeps_path_and_uri() -> None:
    nfp = to_normalized_file_path("C:\\work\\My File.hs", convention=WINDOWS)
    out = pickle.loads(pickle.dumps(nfp))
    assert isinstance(out, NormalizedFilePath)
    assert out == nfp
    assert hash(out) == hash(nfp)
    assert out.uri == nfp.uri
    assert out.uri.text == "file:///C:/work/My%20File.hs"


def test_file_path_to_uri_normalizes_first() -> None:
    uri = file_path_to_uri("/a/./b/../c.hs", convention=POSIX)
    assert uri == Uri("file:///a/c.hs")
    assert file_path_to_uri("", convention=POSIX) == Uri("file://")


def test_from_uri_roundtrip() -> None:
    nfp = to_normalized_file_path("/srv/proj/Main.hs", convention=POSIX)
    assert from_uri(nfp.uri, convention=POSIX) == nfp

    win = to_normalized_file_path("D:\\proj\\Main.hs", convention=WINDOWS)
    assert from_uri(win.uri, convention=WINDOWS) == win


def test_from_uri_of_empty_path_uri() -> None:
    assert from_uri(EMPTY_PATH_URI, convention=POSIX).path == ""


def test_from_uri_non_file_falls_back_to_unknown() -> None:
    nuri = to_normalized_uri(Uri("https://example.com/Main.hs"))
    assert from_uri(nuri, convention=POSIX).path == NO_FILE_PATH


def test_pickle_keeps_undecodable_file_names() -> None:
    # what os.fsdecode yields for a non-UTF-8 name on a UTF-8 filesystem
    raw = b"/srv/\xff.hs".decode("utf-8", "surrogateescape")
    nfp = to_normalized_file_path(raw, convention=POSIX)
    out = pickle.loads(pickle.dumps(nfp))
    assert out.uri == nfp.uri
    assert out.uri.text == "file:///srv/%FF.hs"
    assert from_uri(out.uri, convention=POSIX) == nfp
