"""
Shell lexer for splitting one input line into argument words.

The lexer is a small state machine with three states:

- BARE: outside any quotes. Whitespace separates words, a backslash makes
  the next character literal, quotes switch state.
- SINGLE_QUOTED: every character is literal until the closing quote.
- DOUBLE_QUOTED: characters are literal except the closing quote and the
  escapes ``\\\\`` and ``\\"``. Any other backslash sequence is kept as-is.

Quote characters are consumed; adjacent quoted and unquoted fragments join
into one word. A line that ends inside quotes raises UnmatchedQuoteError.
"""

from enum import Enum
from typing import List, Optional, Tuple

from .exceptions import UnmatchedQuoteError


class LexState(Enum):
    """Quoting state of the lexer"""
    BARE = "bare"
    SINGLE_QUOTED = "single_quoted"
    DOUBLE_QUOTED = "double_quoted"


# Characters a backslash may escape inside double quotes
DOUBLE_QUOTE_ESCAPABLE = ('\\', '"')


class Token:
    """One fully-unescaped word and the offset where it began"""

    def __init__(self, value: str, position: int = 0):
        self.value = value
        self.position = position

    def __repr__(self):
        return f"Token({self.value!r}, pos={self.position})"

    def __eq__(self, other):
        if not isinstance(other, Token):
            return False
        return self.value == other.value and self.position == other.position


class ShellLexer:
    """
    Tokenize a single command line.

    Example:
        >>> [t.value for t in ShellLexer("echo 'a  b' c\\\\ d").tokenize()]
        ['echo', 'a  b', 'c d']
    """

    def __init__(self, line: str):
        self.line = line
        self.state = LexState.BARE
        self.escape = False
        self._buffer: List[str] = []
        self._in_word = False
        self._word_start = 0
        self._quote_start = 0
        self._tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """
        Run the state machine over the whole line.

        Returns:
            List of tokens in order; empty for a blank line

        Raises:
            UnmatchedQuoteError: If the line ends inside quotes
        """
        for pos, char in enumerate(self.line):
            if self.state is LexState.BARE:
                self._bare(char, pos)
            elif self.state is LexState.SINGLE_QUOTED:
                self._single_quoted(char)
            else:
                self._double_quoted(char)

        if self.state is not LexState.BARE:
            quote_char = "'" if self.state is LexState.SINGLE_QUOTED else '"'
            raise UnmatchedQuoteError(self.line, quote_char=quote_char,
                                      position=self._quote_start)

        # A trailing backslash outside quotes is dropped
        self.escape = False
        self._end_word()
        return self._tokens

    def _bare(self, char: str, pos: int):
        if self.escape:
            self.escape = False
            self._start_word(pos - 1)
            self._buffer.append(char)
            return

        if char.isspace():
            self._end_word()
            return

        if char == '\\':
            self.escape = True
            return

        self._start_word(pos)
        if char == "'":
            self.state = LexState.SINGLE_QUOTED
            self._quote_start = pos
        elif char == '"':
            self.state = LexState.DOUBLE_QUOTED
            self._quote_start = pos
        else:
            self._buffer.append(char)

    def _single_quoted(self, char: str):
        if char == "'":
            self.state = LexState.BARE
        else:
            self._buffer.append(char)

    def _double_quoted(self, char: str):
        if self.escape:
            self.escape = False
            if char not in DOUBLE_QUOTE_ESCAPABLE:
                self._buffer.append('\\')
            self._buffer.append(char)
            return

        if char == '\\':
            self.escape = True
        elif char == '"':
            self.state = LexState.BARE
        else:
            self._buffer.append(char)

    def _start_word(self, pos: int):
        if not self._in_word:
            self._in_word = True
            self._word_start = pos

    def _end_word(self):
        if self._in_word:
            self._tokens.append(Token(''.join(self._buffer), self._word_start))
        self._buffer = []
        self._in_word = False


def tokenize(line: str) -> List[str]:
    """Return the words of a line as plain strings"""
    return [token.value for token in ShellLexer(line).tokenize()]


def split_command(line: str) -> Tuple[Optional[str], List[str]]:
    """
    Split a line into command name and argument vector.

    Returns:
        (command, args); (None, []) for a line with no words

    Examples:
        >>> split_command('echo a"b"c')
        ('echo', ['abc'])
        >>> split_command('   ')
        (None, [])
    """
    words = tokenize(line)
    if not words:
        return None, []
    return words[0], words[1:]
