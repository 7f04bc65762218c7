import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TokenTypeSpec:
    """
    A named token type with an optional pattern. Without a pattern the
    token type matches its own name literally, so the token type "+"
    matches the text "+" rather than being read as a quantifier.
    """

    name: str
    pattern: Optional[str] = None

    @property
    def regex(self):
        if self.pattern is None:
            return re.escape(self.name)
        return self.pattern

    @classmethod
    def from_overrides(cls, overrides, token_types):
        """
        :param overrides: Mapping from token type name to pattern.
        :param token_types: Token type names in order of precedence.
        :returns: Tuple of TokenTypeSpec in the order of token_types.
        """
        return tuple(cls(name, overrides.get(name)) for name in token_types)
