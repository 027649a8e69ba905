import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.output import put_char, put_endl, put_nbr, put_str


def _capture(action):
    read_fd, write_fd = os.pipe()
    try:
        action(write_fd)
    finally:
        os.close(write_fd)
    with os.fdopen(read_fd, "rb") as reader:
        return reader.read()


def test_put_char_str_and_int():
    assert _capture(lambda fd: put_char("A", fd)) == b"A"
    assert _capture(lambda fd: put_char(ord("z") + 256, fd)) == b"z"


def test_put_char_rejects_long_string():
    read_fd, write_fd = os.pipe()
    try:
        with pytest.raises(ValueError):
            put_char("ab", write_fd)
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_put_str_stops_at_nul():
    assert _capture(lambda fd: put_str("hello\0world", fd)) == b"hello"
    assert _capture(lambda fd: put_str(b"raw", fd)) == b"raw"


def test_put_str_none_writes_nothing():
    assert _capture(lambda fd: put_str(None, fd)) == b""


def test_put_endl():
    assert _capture(lambda fd: put_endl("line", fd)) == b"line\n"
    assert _capture(lambda fd: put_endl(None, fd)) == b"\n"


def test_put_nbr_limits():
    assert _capture(lambda fd: put_nbr(-(2**31), fd)) == str(-(2**31)).encode()
    assert _capture(lambda fd: put_nbr(0, fd)) == b"0"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_put_nbr_matches_decimal(n):
    assert _capture(lambda fd: put_nbr(n, fd)) == str(n).encode()


@given(st.text(alphabet=st.characters(blacklist_characters="\0"), max_size=50))
def test_put_str_writes_encoded_text(s):
    assert _capture(lambda fd: put_str(s, fd)).decode() == s