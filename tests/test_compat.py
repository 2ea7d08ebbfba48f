import pytest

from ttkcommon.compat import strlcat, strlcpy


@pytest.mark.parametrize("src", ["", "a", "hello", "hello world, longer text"])
@pytest.mark.parametrize("size", [1, 2, 5, 6, 32])
def test_strlcpy_invariants(src, size):
    copied, length = strlcpy(src, size)
    assert length == len(src)
    assert len(copied) <= size - 1
    assert src.startswith(copied)
    assert (length >= size) == (copied != src)


def test_strlcpy_fits():
    assert strlcpy("hello", 10) == ("hello", 5)


def test_strlcpy_truncates():
    copied, length = strlcpy("hello", 3)
    assert copied == "he"
    assert length == len("hello")


def test_strlcpy_zero_size_copies_nothing():
    copied, length = strlcpy("hello", 0)
    assert copied == ""
    assert length == len("hello")


def test_strlcpy_bytes():
    copied, length = strlcpy(b"abcdef", 4)
    assert copied == b"abcdef"[:3]
    assert length == len(b"abcdef")


def test_strlcpy_stops_at_nul():
    copied, length = strlcpy("ab\0cd", 10)
    assert copied == "ab"
    assert length == len("ab")


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("x", -1)


def test_strlcat_fits():
    result, length = strlcat("ab", "cd", 10)
    assert result == "ab" + "cd"
    assert length == len("ab") + len("cd")


def test_strlcat_truncates():
    result, length = strlcat("ab", "cdef", 4)
    assert result == "abc"
    assert length == len("ab") + len("cdef")
    assert length >= 4


@pytest.mark.parametrize("dst", ["", "x", "abc"])
@pytest.mark.parametrize("src", ["", "yz", "longer suffix"])
@pytest.mark.parametrize("size", [4, 8, 64])
def test_strlcat_invariants(dst, src, size):
    result, length = strlcat(dst, src, size)
    assert length == len(dst) + len(src)
    assert result.startswith(dst)
    assert len(result) <= size - 1
    assert (dst + src).startswith(result)
    assert (length >= size) == (result != dst + src)


def test_strlcat_full_destination_unchanged():
    result, length = strlcat("abcdef", "xyz", 3)
    assert result == "abcdef"
    assert length == 3 + len("xyz")


def test_strlcat_zero_size():
    result, length = strlcat("ab", "cd", 0)
    assert result == "ab"
    assert length == len("cd")


def test_strlcat_bytes():
    result, length = strlcat(b"ab", b"cd", 10)
    assert result == b"abcd"
    assert length == len(b"abcd")


def test_strlcat_mixed_types():
    with pytest.raises(TypeError):
        strlcat("ab", b"cd", 10)


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("ab", "cd", -5)


def test_strlcpy_then_strlcat_matches_concatenation():
    buffer, _ = strlcpy("first", 32)
    buffer, length = strlcat(buffer, "second", 32)
    assert buffer == "first" + "second"
    assert length == len(buffer)