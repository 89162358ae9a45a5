"""
A TokenStream is a cursor over a fixed sequence of tokens, as used by
hand-written recursive descent parsers. The lexer produces all tokens up
front, the parser then repeatedly peeks at and consumes from the stream.

The cursor position starts before the first token, and "the next token"
always refers to the token right after the position. Lookahead past the
end of the sequence reports END_OF_STREAM rather than failing.
"""

import warnings

from _tokenstream.errors import TokenSyntaxError
from _tokenstream.token_names import END_OF_STREAM, decimal_name, resolve_name

# Position of a stream where nothing has been consumed yet.
BEFORE_FIRST = -1


class TokenStream:
    """
    Cursor over a sequence of tokens with lookahead.

    >>> from _tokenstream.token import Token
    >>> stream = TokenStream([Token("(", 1, 1), Token("x", 2, 1)])
    >>> stream.peek_next()
    1
    >>> stream.match_next(1)
    '('
    >>> stream.is_next_sequence([2])
    True
    >>> stream.advance()
    Token(value='x', kind=2, line=1)
    >>> stream.has_pending()
    False

    """

    def __init__(self, tokens, token_name=None):
        """
        :param tokens: iterable of tokens, fixed for the lifetime
            of the stream.
        :param token_name: Function giving the display name of a
            token kind, used for error messages. Defaults to the
            decimal representation of the kind.
        """
        self.tokens = tuple(tokens)
        self.token_name = token_name if token_name is not None else decimal_name
        self._position = BEFORE_FIRST

        if any(token.kind == END_OF_STREAM for token in self.tokens):
            warnings.warn(
                f"Token stream contains tokens of kind {END_OF_STREAM}, "
                "which can not be told apart from end of stream in lookahead.",
                stacklevel=2,
            )

    @property
    def position(self):
        return self._position

    def _token_at(self, index):
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return None

    def peek_next(self):
        """
        :returns: The kind of the next token, or END_OF_STREAM if
            there is none. Does not move the stream.
        """
        token = self._token_at(self._position + 1)
        if token is None:
            return END_OF_STREAM
        return token.kind

    def advance(self):
        """
        Moves the stream one token forward. The position is moved
        even when the stream is exhausted.

        :returns: The token moved to, or None if there are no more tokens.
        """
        self._position += 1
        return self._token_at(self._position)

    def match_next(self, expected_kind):
        """
        Consumes the next token if it is of the expected kind.

        :param expected_kind: The kind the next token must have.
        :returns: The value of the consumed token.
        :raises TokenSyntaxError: If the next token has a different kind
            or the stream is exhausted. Nothing is consumed in that case.
        """
        token = self._token_at(self._position + 1)
        if token is not None and token.kind == expected_kind:
            self._position += 1
            return token.value

        expected_name = resolve_name(self.token_name, expected_kind)
        if token is None:
            last = self.tokens[-1] if self.tokens else None
            raise TokenSyntaxError(
                expected_name, "end of stream", last.line if last else 0
            )
        raise TokenSyntaxError(
            expected_name, resolve_name(self.token_name, token.kind), token.line
        )

    def skip_while(self, token_kind, max_count=0):
        """
        Skips tokens while the next token is of the given kind.

        :param token_kind: The kind of tokens to skip.
        :param max_count: If greater than 0, at most this many
            tokens are skipped.
        :returns: Number of tokens skipped.
        """
        skipped = 0
        while self.has_pending() and self.is_next(token_kind):
            self._position += 1
            skipped += 1
            if max_count > 0 and skipped >= max_count:
                break
        return skipped

    def skip_while_any(self, token_kinds):
        """
        Skips tokens while the next token is of one of the given kinds.
        """
        while self.has_pending() and self.is_next_any(token_kinds):
            self._position += 1

    def is_next(self, token_kind):
        return self.peek_next() == token_kind

    def is_next_any(self, token_kinds):
        return self.peek_next() in token_kinds

    def is_next_sequence(self, token_kinds):
        """
        Checks whether the following tokens have exactly the given kinds,
        in order. The stream is left where it was.

        :param token_kinds: Sequence of token kinds.
        :returns: False if any kind differs or the stream runs out
            before all kinds are matched.
        """
        saved = self._position
        try:
            for kind in token_kinds:
                token = self.advance()
                if token is None or token.kind != kind:
                    return False
            return True
        finally:
            self._position = saved

    def get_all(self):
        return self.tokens

    def has_pending(self):
        """
        :returns: Whether there is at least one more token to consume.
        """
        if not self.tokens:
            return False
        return self._position < len(self.tokens) - 1

    def reset(self):
        """
        Moves the stream back to before the first token.
        """
        self._position = BEFORE_FIRST
