class ConfigurationError(Exception):
    """
    Raised when constructing a Tokenizer from patterns that can not be
    compiled: the ignore pattern, an override, or the composite pattern
    assembled from them.
    """

    pass


class ReglexSyntaxError(Exception):
    """
    A tokenizer will throw a ReglexSyntaxError if neither the ignore
    pattern nor any token type matches at the current position while
    input remains.
    """

    def __init__(self, offset, remaining):
        """
        :param offset: The byte offset where matching failed.
        :param remaining: The unmatched text from offset to the end of
            the source.
        """
        self.offset = offset
        self.remaining = remaining
        super().__init__(f"Unexpected input at byte {offset}: {remaining!r}")
