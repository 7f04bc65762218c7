import reglex.version
from _reglex.tokenizer import (
    ConfigurationError,
    Ignored,
    ReglexSyntaxError,
    Source,
    Token,
    Tokenizer,
    TokenTypeSpec,
)

__version__ = reglex.version.version

__all__ = [
    "ConfigurationError",
    "Ignored",
    "ReglexSyntaxError",
    "Source",
    "Token",
    "TokenTypeSpec",
    "Tokenizer",
]
