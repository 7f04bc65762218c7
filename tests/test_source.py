import hypothesis.strategies as st
import pytest
from hypothesis import given

from _reglex.tokenizer.source import Source, as_source, utf8_offsets

from .generators.source_contents import multilingual_text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", [0]),
        ("abc", [0, 1, 2, 3]),
        ("☃", [0, 3]),
        ("a€b", [0, 1, 4, 5]),
        ("é𝄞", [0, 2, 6]),
    ],
)
def test_utf8_offsets(text, expected):
    assert utf8_offsets(text).tolist() == expected


@given(multilingual_text)
def test_byte_offsets_match_encoding(text):
    source = Source(text)
    assert source.byte_length == len(text.encode("utf-8"))
    for i in range(len(text) + 1):
        byte_offset = source.byte_offset(i)
        assert byte_offset == len(text[:i].encode("utf-8"))
        assert source.char_index(byte_offset) == i


@given(multilingual_text, st.data())
def test_slice(text, data):
    source = Source(text)
    i = data.draw(st.integers(min_value=0, max_value=len(text)))
    j = data.draw(st.integers(min_value=i, max_value=len(text)))
    assert source.slice(source.byte_offset(i), source.byte_offset(j)) == text[i:j]


def test_snowman_is_three_bytes():
    source = Source("a☃b")
    assert source.byte_length == 5
    assert source.slice(1, 4) == "☃"
    assert source.char_index(4) == 2


@pytest.mark.parametrize("offset", [2, 3])
def test_offset_inside_character(offset):
    source = Source("a☃b")
    with pytest.raises(ValueError, match="character boundary"):
        source.char_index(offset)


@pytest.mark.parametrize("text", ["abc", "a☃b"])
@pytest.mark.parametrize("offset", [-1, 6])
def test_offset_out_of_range(text, offset):
    with pytest.raises(ValueError, match="out of range"):
        Source(text).char_index(offset)


def test_bytes_are_decoded_as_utf8():
    source = Source("a☃b".encode("utf-8"))
    assert source.text == "a☃b"
    assert source == Source("a☃b")


def test_sources_are_hashable():
    assert len({Source("abc"), Source("abc"), Source("☃")}) == 2


def test_as_source():
    source = Source("abc")
    assert as_source(source) is source
    assert as_source("abc") == source
    assert as_source(b"abc") == source
