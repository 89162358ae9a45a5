"""
Resolution of token kinds to display names. The stream itself holds no name
table, names are only needed for error messages, so the resolver is supplied
by whoever constructs the stream (typically the lexer or grammar).
"""

import warnings

# Kind reported by lookahead when there is no next token.
END_OF_STREAM = 0


def names_from_enum(enum_cls):
    """
    :param enum_cls: An Enum (usually IntEnum) whose values are token kinds.
    :returns: A function mapping a kind to the name of the enum member.
        Raises ValueError for kinds not in the enum.

    >>> from enum import IntEnum
    >>> class Kind(IntEnum):
    ...     PLUS = 1
    >>> names_from_enum(Kind)(1)
    'PLUS'

    """

    def token_name(kind):
        return enum_cls(kind).name

    return token_name


def resolve_name(token_name, kind):
    """
    Look up the display name of kind, falling back to its decimal
    representation (with a warning) if token_name does not know it.
    """
    try:
        return token_name(kind)
    except (LookupError, ValueError) as err:
        warnings.warn(
            f"No display name for token kind {int(kind)}: {err}",
            stacklevel=3,
        )
        return decimal_name(kind)


def decimal_name(kind):
    return str(int(kind))
