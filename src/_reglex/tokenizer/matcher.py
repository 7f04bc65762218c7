"""
The pattern compiler combines the ignore pattern and the pattern of each
token type into one alternation, tried at the scan position:

    (?:(ignore)|(pattern1)|(pattern2)|...)

The alternatives are tried left to right and the first one that matches
wins, so earlier token types take precedence over later ones, and the
ignore pattern takes precedence over all of them.
"""

import logging
import re
import warnings
from dataclasses import dataclass

from _reglex.tokenizer.errors import ConfigurationError
from _reglex.tokenizer.token_type import TokenTypeSpec

logger = logging.getLogger(__name__)

# A backslash escape, capturing a digit that makes it a numbered group
# reference, or a conditional on a numbered group.
_NUMBERED_REFERENCE = re.compile(
    r"\\(?:([1-7](?![0-7]{2})|[89])|.)|(\(\?\(\d)", re.DOTALL
)


@dataclass(frozen=True)
class Ignored:
    """
    A span matched by the ignore pattern, in byte offsets.
    """

    start: int
    end: int

    @property
    def length(self):
        return self.end - self.start


@dataclass(frozen=True)
class Matched:
    """
    A span matched by the token type at token_type_index, in byte offsets.
    """

    token_type_index: int
    start: int
    end: int


def build_pattern_string(ignore, overrides, token_types):
    """
    >>> build_pattern_string("[ ]+", {"number": "[0-9]+"}, ["number", "+"])
    '(?:([ ]+)|([0-9]+)|(\\\\+))'

    :param ignore: Pattern for text to skip.
    :param overrides: Mapping from token type name to pattern.
    :param token_types: Token type names in order of precedence.
    :returns: The composite pattern as a string.
    """
    specs = TokenTypeSpec.from_overrides(overrides, token_types)
    alternatives = [ignore] + [spec.regex for spec in specs]
    return "(?:" + "|".join(f"({alt})" for alt in alternatives) + ")"


def has_numbered_reference(pattern):
    """
    Numbered group references can not be used in a fragment, as the groups
    are renumbered when the fragment becomes part of the composite pattern.

    >>> has_numbered_reference(r"([a-z])\\1")
    True
    >>> has_numbered_reference(r"(?P<c>[a-z])(?P=c)")
    False
    """
    return any(
        m.group(1) or m.group(2) for m in _NUMBERED_REFERENCE.finditer(pattern)
    )


def compile_fragment(description, pattern, flags=0):
    """
    Compile a single alternative of the composite pattern.

    :param description: Used in error messages, e.g. "token type 'number'".
    :raises ConfigurationError: If the pattern is invalid, matches the
        empty string or refers to a group by number.
    """
    try:
        compiled = re.compile(pattern, flags)
    except re.error as err:
        raise ConfigurationError(
            f"Invalid pattern {pattern!r} for {description}: {err}"
        ) from err
    if compiled.match("") is not None:
        raise ConfigurationError(
            f"Pattern {pattern!r} for {description} matches the empty string"
        )
    if has_numbered_reference(pattern):
        raise ConfigurationError(
            f"Pattern {pattern!r} for {description} refers to a group by number, "
            "use a named group and (?P=name) instead"
        )
    return compiled


class CompiledMatcher:
    """
    The composite pattern for an ignore pattern and an ordered list of
    token types. A CompiledMatcher does not change after construction and
    holds no state between calls to match_at, so it can be shared between
    any number of scans.
    """

    def __init__(self, ignore, overrides, token_types, flags=0):
        """
        :param ignore: Pattern for text to skip, such as whitespace.
        :param overrides: Mapping from token type name to pattern, token
            types without an override match their name literally.
        :param token_types: Token type names in order of precedence.
        :param flags: Flags from the re module applied to all patterns.
        :raises ConfigurationError: If any pattern is invalid.
        """
        token_types = tuple(token_types)
        duplicates = sorted({t for t in token_types if token_types.count(t) > 1})
        if duplicates:
            raise ConfigurationError(f"Duplicate token types {duplicates}")

        unused = [name for name in overrides if name not in token_types]
        if unused:
            warnings.warn(
                f"Patterns given for undeclared token types {unused} are ignored",
                stacklevel=3,
            )

        fragments = [compile_fragment("the ignore pattern", ignore, flags)]
        for spec in TokenTypeSpec.from_overrides(overrides, token_types):
            fragments.append(
                compile_fragment(f"token type {spec.name!r}", spec.regex, flags)
            )

        # Group number of the group wrapping each alternative, accounting
        # for groups inside the fragments themselves.
        self._alternative_groups = []
        group = 1
        for fragment in fragments:
            self._alternative_groups.append(group)
            group += 1 + fragment.groups

        self._pattern_string = build_pattern_string(ignore, overrides, token_types)
        try:
            self._regex = re.compile(self._pattern_string, flags)
        except re.error as err:
            raise ConfigurationError(
                f"Could not combine patterns into {self._pattern_string!r}: {err}"
            ) from err
        logger.debug(
            "Compiled %d token types into %r", len(token_types), self._pattern_string
        )

    @property
    def pattern(self):
        return self._pattern_string

    def alternative_index(self, match):
        """
        :param match: A match of the composite pattern.
        :returns: The position of the alternative that matched, where 0 is
            the ignore pattern and k is the k-th token type.
        """
        for index, group in enumerate(self._alternative_groups):
            if match.start(group) != -1:
                return index
        raise ValueError(f"No alternative participated in {match}")

    def match_at(self, source, offset):
        """
        Match the composite pattern against the text from offset on, so
        that ^ and \\b in the patterns see offset as the start of the text.
        The match must start at offset, nothing further ahead is searched.

        Alternatives are tried in order and the first one that matches is
        used even when it matches no text, e.g. a lookahead. Such a match
        is reported as None, later alternatives are not tried.

        :param source: A Source.
        :param offset: Byte offset to match at.
        :returns: Ignored or Matched for the span, or None if no
            alternative matches at offset.
        """
        position = source.char_index(offset)
        match = self._regex.match(source.text[position:])
        if match is None or match.end() == 0:
            return None

        end = source.byte_offset(position + match.end())
        index = self.alternative_index(match)
        if index == 0:
            return Ignored(offset, end)
        return Matched(index - 1, offset, end)
