"""Shell-like lexer for splitting a command line into tokens."""

from enum import Enum, auto

SPACE = " "
QUOTE = '"'
BACKSLASH = "\\"


class TokenizeError(ValueError):
    """Base exception for malformed input lines."""

    message = "malformed line"

    def __init__(self, line: str):
        super().__init__(self.message)
        self.line = line


class UnmatchedQuote(TokenizeError):
    """Raised when the line ends inside a quoted region."""

    message = "Unmatched quote"


class IncompleteEscape(TokenizeError):
    """Raised when the line ends right after a backslash."""

    message = "incomplete escape sequence"


class State(Enum):
    """Scanner states."""

    NORMAL = auto()
    IN_QUOTES = auto()
    ESCAPED = auto()
    ESCAPED_IN_QUOTES = auto()


class Tokenizer:
    """State machine that consumes one line a character at a time."""

    def __init__(self, line: str):
        self.line = line
        self.state = State.NORMAL
        self.tokens: list[str] = []
        self._chars: list[str] = []
        # A token has started, even if nothing was collected yet ("" in quotes)
        self._pending = False

    def _append(self, char: str) -> None:
        self._chars.append(char)
        self._pending = True

    def _flush(self) -> None:
        if self._pending:
            self.tokens.append("".join(self._chars))
            self._chars = []
            self._pending = False

    def feed(self, char: str) -> None:
        """Advance the machine by one character."""
        state = self.state

        if state is State.NORMAL:
            if char == SPACE:
                self._flush()
            elif char == QUOTE:
                self._pending = True
                self.state = State.IN_QUOTES
            elif char == BACKSLASH:
                self.state = State.ESCAPED
            else:
                self._append(char)

        elif state is State.IN_QUOTES:
            if char == QUOTE:
                self.state = State.NORMAL
            elif char == BACKSLASH:
                self.state = State.ESCAPED_IN_QUOTES
            else:
                self._append(char)

        elif state is State.ESCAPED:
            self._append(char)
            self.state = State.NORMAL

        else:
            self._append(char)
            self.state = State.IN_QUOTES

    def finish(self) -> list[str]:
        """
        Close the scan and return the collected tokens.

        Raises:
            UnmatchedQuote: If the line ended inside quotes
            IncompleteEscape: If the line ended on a backslash
        """
        if self.state is State.IN_QUOTES:
            raise UnmatchedQuote(self.line)
        if self.state in (State.ESCAPED, State.ESCAPED_IN_QUOTES):
            raise IncompleteEscape(self.line)

        self._flush()
        return self.tokens

    def run(self) -> list[str]:
        """Scan the whole line and return its tokens."""
        for char in self.line:
            self.feed(char)
        return self.finish()


def tokenize(line: str) -> list[str]:
    """
    Split a line into tokens, handling double quotes and escapes.

    Rules:
    - Spaces separate tokens; runs of spaces count as one separator
    - Double quotes (") group characters, spaces included, and are removed
    - Quoted and unquoted text with no space between them form one token
    - An empty quoted region ("") is an empty token
    - Backslash (\\) escapes the next character and is removed

    Args:
        line: The line to split, without its trailing newline

    Returns:
        List of parsed tokens

    Raises:
        UnmatchedQuote: If a quote is unterminated
        IncompleteEscape: If the line ends with an unescaped backslash
    """
    return Tokenizer(line).run()
