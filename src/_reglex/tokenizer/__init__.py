"""
In this module, a tokenizer turns a source text into a sequence of tokens
using regular expressions. Each token type is a name with a pattern,
where a token type without a pattern matches its name literally. A
separate ignore pattern describes the text between tokens, such as
whitespace and comments.

Tokenization is done by matching one composite pattern exactly at the
current position, see _reglex.tokenizer.matcher. There is no error
recovery: the first position where neither the ignore pattern nor any
token type matches raises a ReglexSyntaxError.

Positions are utf-8 byte offsets into the source, and tokens refer to
the source they came from rather than holding a copy of their text,
see Source and Token.
"""

from .errors import ConfigurationError, ReglexSyntaxError
from .matcher import CompiledMatcher, Ignored, Matched
from .regex_tokenizer import Tokenizer
from .source import Source
from .token import Token
from .token_type import TokenTypeSpec

__all__ = [
    "CompiledMatcher",
    "ConfigurationError",
    "Ignored",
    "Matched",
    "ReglexSyntaxError",
    "Source",
    "Token",
    "TokenTypeSpec",
    "Tokenizer",
]
