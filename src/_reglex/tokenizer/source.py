from dataclasses import dataclass, field

import numpy as np


def utf8_offsets(text):
    """
    Compute the utf-8 byte offset of every character in text.

    >>> utf8_offsets("a☃b").tolist()
    [0, 1, 4, 5]

    :param text: Any string that can be encoded as utf-8.
    :returns: Array of len(text) + 1 increasing byte offsets, where
        element i is the byte offset of text[i] and the last element is
        the encoded length of text.
    """
    codepoints = np.frombuffer(text.encode("utf-32-le"), dtype="<u4")
    widths = np.ones(len(codepoints), dtype=np.int64)
    widths += codepoints >= 0x80
    widths += codepoints >= 0x800
    widths += codepoints >= 0x10000

    offsets = np.zeros(len(codepoints) + 1, dtype=np.int64)
    np.cumsum(widths, out=offsets[1:])
    return offsets


@dataclass(frozen=True)
class Source:
    """
    An immutable text buffer addressed by utf-8 byte offsets.

    The byte offset of each character is computed once when the source
    is created, so converting between byte offsets and positions in the
    text does not re-encode the text. For ascii text byte offsets and
    character positions coincide and no table is stored.
    """

    text: str
    _offsets: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if isinstance(self.text, (bytes, bytearray)):
            object.__setattr__(self, "text", bytes(self.text).decode("utf-8"))
        if self.text.isascii():
            offsets = None
        else:
            offsets = utf8_offsets(self.text)
        object.__setattr__(self, "_offsets", offsets)

    @property
    def byte_length(self):
        if self._offsets is None:
            return len(self.text)
        return int(self._offsets[-1])

    def char_index(self, byte_offset):
        """
        :param byte_offset: A byte offset into the utf-8 encoding of the text.
        :returns: The index in text of the character starting at byte_offset,
            or len(text) when byte_offset is the end of the text.
        :raises ValueError: If byte_offset is out of range or splits a
            multi-byte character.
        """
        if not 0 <= byte_offset <= self.byte_length:
            raise ValueError(
                f"Byte offset {byte_offset} out of range for source "
                f"of {self.byte_length} bytes"
            )
        if self._offsets is None:
            return byte_offset
        index = int(np.searchsorted(self._offsets, byte_offset))
        if self._offsets[index] != byte_offset:
            raise ValueError(f"Byte offset {byte_offset} is not a character boundary")
        return index

    def byte_offset(self, char_index):
        """
        :param char_index: An index into text, len(text) included.
        :returns: The byte offset of that character in the utf-8 encoding.
        """
        if not 0 <= char_index <= len(self.text):
            raise IndexError(f"Character index {char_index} out of range")
        if self._offsets is None:
            return char_index
        return int(self._offsets[char_index])

    def slice(self, start, end):
        """
        :returns: The text between the byte offsets start and end.
        """
        return self.text[self.char_index(start) : self.char_index(end)]


def as_source(source):
    """
    :param source: Either a Source, a string or utf-8 encoded bytes.
    :returns: The given source as a Source.
    """
    if isinstance(source, Source):
        return source
    return Source(source)
