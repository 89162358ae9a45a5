from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """
    A lexed token, as produced by some external lexer.

    :param value: The matched lexeme.
    :param kind: Integer id of the token category, e.g. a member of an
        IntEnum of token kinds. 0 is reserved for end of stream.
    :param line: 1-based line of the source where the lexeme was found.
    """

    value: str
    kind: int
    line: int

    def __str__(self):
        return f"[\n kind: {int(self.kind)}\n value: {self.value}\n line: {self.line}\n]"
