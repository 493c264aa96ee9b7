import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.ft.strings import (
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)

plain_text = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=255))


@given(plain_text)
def test_strlen_matches_len_without_nul(text):
    assert strlen(text) == len(text)


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == 3


def test_strchr_finds_first():
    text = "hola manolo"
    index = strchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[:index]


def test_strchr_nul_gives_terminator_index():
    assert strchr("hola ", "\0") == len("hola ")
    assert strchr("hola ", 0) == len("hola ")


def test_strchr_missing():
    assert strchr("hola", "z") is None


def test_strchr_int_is_cut_to_low_byte():
    assert strchr("hola", ord("l") + 256) == strchr("hola", "l")


def test_strrchr_finds_last():
    text = "Hola mundo loco!"
    index = strrchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1:]


def test_strrchr_nul_and_missing():
    assert strrchr("Hola mundo loco!", "\0") == len("Hola mundo loco!")
    assert strrchr("Hola", "z") is None


def test_strchr_rejects_long_strings():
    with pytest.raises(ValueError):
        strchr("hola", "ho")


@given(plain_text)
def test_strdup_copies(text):
    assert strdup(text) == text


def test_strdup_stops_at_nul():
    assert strdup("Hola 42\0rest") == "Hola 42"


def test_strncmp_orders():
    assert strncmp("hola", "holo", 4) < 0
    assert strncmp("holo", "hola", 4) > 0


def test_strncmp_limit():
    assert strncmp("hola", "holo", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("hol", "hola", 4) < 0
    assert strncmp("hola", "hola\0x", 10) == 0


@given(plain_text, plain_text)
def test_strncmp_antisymmetric(a, b):
    n = max(len(a), len(b))
    assert strncmp(a, b, n) == -strncmp(b, a, n)
    assert (strncmp(a, b, n) == 0) == (a == b)


def test_strnstr_found_within_length():
    haystack = "hola mundo loco"
    index = strnstr(haystack, "mundo", 10)
    assert haystack[index:].startswith("mundo")
    assert index + len("mundo") <= 10


def test_strnstr_needle_past_length():
    assert strnstr("hola mundo loco", "mundo", 9) is None


def test_strnstr_empty_needle():
    assert strnstr("hola", "", 0) == 0


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("hola", "h", -1)


def test_strlcpy_truncates():
    assert strlcpy("Hola mundo", 10) == ("Hola mund", 10)


def test_strlcpy_size_zero_copies_nothing():
    assert strlcpy("Hola", 0) == ("", len("Hola"))


@given(plain_text, st.integers(min_value=1, max_value=300))
def test_strlcpy_invariants(src, size):
    copied, total = strlcpy(src, size)
    assert total == len(src)
    assert len(copied) <= size - 1
    assert src.startswith(copied)


def test_strlcat_truncates():
    assert strlcat("Hola", " mundo", 10) == ("Hola mund", 10)


def test_strlcat_full_buffer_leaves_dst():
    result, total = strlcat("Hola", " mundo", 3)
    assert result == "Hola"
    assert total == 3 + len(" mundo")


@given(plain_text, plain_text)
def test_strlcat_with_room_concatenates(dst, src):
    size = len(dst) + len(src) + 1
    assert strlcat(dst, src, size) == (dst + src, len(dst) + len(src))


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)