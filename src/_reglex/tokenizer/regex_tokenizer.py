import logging

from _reglex.tokenizer.errors import ReglexSyntaxError
from _reglex.tokenizer.matcher import CompiledMatcher, Ignored
from _reglex.tokenizer.source import as_source
from _reglex.tokenizer.token import Token

logger = logging.getLogger(__name__)


class Tokenizer:
    def __init__(self, ignore, overrides=None, token_types=(), flags=0):
        """
        >>> tokenizer = Tokenizer("[ ]+", {"number": "[0-9]+"}, ["number", "+"])
        >>> [t.value for t in tokenizer.tokenize("1 + 2")]
        ['1', '+', '2']

        :param ignore: Pattern for text that separates tokens but is not
            itself a token, such as whitespace and comments.
        :param overrides: Mapping from token type name to pattern. Token
            types without an entry match their own name literally.
        :param token_types: Token type names. When more than one token type
            matches at a position the one listed first wins, so keywords
            should be listed before identifiers.
        :param flags: Flags from the re module, e.g. re.IGNORECASE.
        :raises ConfigurationError: If any of the patterns are invalid.
        """
        self._token_types = tuple(token_types)
        self._matcher = CompiledMatcher(
            ignore, overrides or {}, self._token_types, flags
        )

    @property
    def token_types(self):
        return self._token_types

    @property
    def pattern(self):
        return self._matcher.pattern

    def iter_segments(self, source, offset=0):
        """
        Scan source from offset, yielding an Ignored for each span skipped
        by the ignore pattern and a Token for each token, in order. The
        yielded spans cover the source from offset to the end without
        gaps.

        :param source: A Source, string or utf-8 encoded bytes.
        :param offset: Byte offset to start scanning at.
        :raises ReglexSyntaxError: At the first position where nothing
            matches.
        """
        source = as_source(source)
        while True:
            result = self._matcher.match_at(source, offset)
            if result is None:
                if offset == source.byte_length:
                    return
                remaining = source.slice(offset, source.byte_length)
                logger.debug("No token type matches at byte %d", offset)
                raise ReglexSyntaxError(offset, remaining)

            if isinstance(result, Ignored):
                yield result
            else:
                yield Token(
                    self._token_types[result.token_type_index],
                    result.start,
                    result.end,
                    source,
                )
            offset = result.end

    def iter_tokens(self, source, offset=0):
        """
        Like iter_segments, but only yields the tokens.
        """
        for segment in self.iter_segments(source, offset):
            if isinstance(segment, Token):
                yield segment

    def next(self, source, offset=0):
        """
        A string source is converted to a Source on every call, so callers
        stepping through a text with next should create the Source once and
        pass it instead, see Source.

        :returns: The first token at or after offset, skipping ignored text,
            or None if only ignored text remains.
        :raises ReglexSyntaxError: If unmatched text is found before the
            next token.
        """
        return next(self.iter_tokens(source, offset), None)

    def tokenize(self, source, offset=0):
        """
        :returns: List of all tokens from offset to the end of source.
        :raises ReglexSyntaxError: If any part of the source can not be
            matched, in which case no tokens are returned.
        """
        return list(self.iter_tokens(source, offset))
