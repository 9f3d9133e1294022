"""Split command lines into tokens the way a shell would."""

__version__ = "1.0"

from .reader import read_first_line
from .tokenizer import (
    IncompleteEscape,
    State,
    TokenizeError,
    Tokenizer,
    UnmatchedQuote,
    tokenize,
)

__all__ = [
    "IncompleteEscape",
    "State",
    "TokenizeError",
    "Tokenizer",
    "UnmatchedQuote",
    "read_first_line",
    "tokenize",
]
