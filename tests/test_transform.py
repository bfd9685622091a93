import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.libft.transform import (
    strjoin,
    striteri,
    strlcat,
    strlcpy,
    strmapi,
    strtrim,
    substr,
)


def test_strjoin_both_missing_gives_none():
    assert strjoin(None, None) is None


@pytest.mark.parametrize("first, second", [("ab", None), (None, "ab")])
def test_strjoin_one_missing_counts_as_empty(first, second):
    assert strjoin(first, second) == "ab"


@given(st.text(), st.text())
def test_strjoin_keeps_both_parts(first, second):
    joined = strjoin(first, second)
    assert joined.startswith(first)
    assert joined.endswith(second)
    assert len(joined) == len(first) + len(second)


def test_strlcat_small_size_leaves_dst():
    assert strlcat("hello", "world", 3) == ("hello", 3 + len("world"))


@given(st.text(max_size=20), st.text(max_size=20))
def test_strlcat_large_buffer_appends_everything(dst, src):
    size = len(dst) + len(src) + 1
    result, total = strlcat(dst, src, size)
    assert result == dst + src
    assert total == len(dst) + len(src)


@given(st.text(max_size=20), st.text(max_size=20), st.integers(0, 50))
def test_strlcat_result_fits_buffer(dst, src, size):
    result, total = strlcat(dst, src, size)
    if size > len(dst):
        assert len(result) <= size - 1
        assert (dst + src).startswith(result)
        assert result.startswith(dst)
        assert total == len(dst) + len(src)
    else:
        assert result == dst
        assert total == size + len(src)


def test_strlcat_negative_size_raises():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)


def test_strlcpy_zero_size_copies_nothing():
    assert strlcpy("lorem ipsum", 0) == ("", len("lorem ipsum"))


@given(st.text(max_size=40), st.integers(1, 60))
def test_strlcpy_copies_prefix(src, size):
    copied, length = strlcpy(src, size)
    assert length == len(src)
    assert src.startswith(copied)
    assert len(copied) == min(len(src), size - 1)


def test_strlcpy_negative_size_raises():
    with pytest.raises(ValueError):
        strlcpy("abc", -2)


def test_strmapi_passes_indices_and_characters():
    calls = []

    def record(index, char):
        calls.append((index, char))
        return char

    assert strmapi("push", record) == "push"
    assert calls == list(enumerate("push"))


@given(st.text())
def test_strmapi_upper_matches_str_upper_per_char(text):
    result = strmapi(text, lambda _index, char: char.swapcase())
    assert strmapi(result, lambda _index, char: char.swapcase()) == "".join(
        c.swapcase().swapcase() for c in text
    )


def test_striteri_replaces_in_place():
    chars = list("abc")
    striteri(chars, lambda index, char: char.upper() if index % 2 == 0 else None)
    assert chars == ["A", "b", "C"]


def test_striteri_sees_every_character_in_order():
    chars = list("swap")
    seen = []
    striteri(chars, lambda index, char: seen.append((index, char)))
    assert seen == list(enumerate("swap"))
    assert chars == list("swap")


def test_strtrim_removes_set_from_both_ends():
    assert strtrim("  xxhelloxx ", " x") == "hello"


def test_strtrim_everything_in_set_gives_empty():
    assert strtrim("abcabc", "cba") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  keep  ", "") == "  keep  "


@given(st.text(alphabet="ab -", max_size=30), st.text(alphabet="ab -", max_size=3))
def test_strtrim_ends_are_outside_set(text, charset):
    result = strtrim(text, charset)
    assert result in text
    if result:
        assert result[0] not in charset
        assert result[-1] not in charset


def test_substr_length_larger_than_rest():
    assert substr("hola", 0, 2**64 - 1) == "hola"


def test_substr_start_past_end():
    assert substr("hola", 10, 3) == ""


def test_substr_middle():
    assert substr("lorem ipsum", 6, 5) == "ipsum"


@pytest.mark.parametrize("start, length", [(-1, 2), (1, -2)])
def test_substr_negative_raises(start, length):
    with pytest.raises(ValueError):
        substr("hola", start, length)


@given(st.text(max_size=30), st.integers(0, 40), st.integers(0, 40))
def test_substr_is_contiguous_piece(text, start, length):
    result = substr(text, start, length)
    assert len(result) <= length
    if start < len(text):
        assert text[start:].startswith(result)
    else:
        assert result == ""