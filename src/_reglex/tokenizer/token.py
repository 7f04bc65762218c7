from dataclasses import dataclass, field

from _reglex.tokenizer.source import Source


@dataclass(frozen=True)
class Token:
    """
    A token in a source. start and end are utf-8 byte offsets into the
    source, and the text of the token is not copied out of the source
    but sliced from it when requested.
    """

    token_type: str
    start: int
    end: int
    source: Source = field(repr=False)

    def get_value(self):
        """
        :returns: The text of the token, e.g. "1234" for a token of
            type "number" or "+" for the literal token type "+".
        """
        return self.source.slice(self.start, self.end)

    @property
    def value(self):
        return self.get_value()

    def __len__(self):
        return self.end - self.start
