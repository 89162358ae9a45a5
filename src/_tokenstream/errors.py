class TokenSyntaxError(Exception):
    """
    Raised by TokenStream.match_next if the next token is not of the
    expected kind, or if there is no next token.
    """

    def __init__(self, expected_name, actual_name, line):
        self.expected_name = expected_name
        self.actual_name = actual_name
        self.line = line
        super().__init__(
            f'Syntax error: expected token with name "{expected_name}" '
            f'instead of "{actual_name}" at line {line}.'
        )
