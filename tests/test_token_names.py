from enum import IntEnum

import pytest

from _tokenstream.token_names import (
    END_OF_STREAM,
    decimal_name,
    names_from_enum,
    resolve_name,
)


class Kind(IntEnum):
    BRACKET_BEGIN = 1
    NAME = 2


def test_end_of_stream_is_zero():
    assert END_OF_STREAM == 0


def test_names_from_enum():
    token_name = names_from_enum(Kind)
    assert token_name(1) == "BRACKET_BEGIN"
    assert token_name(Kind.NAME) == "NAME"


def test_names_from_enum_unknown_kind():
    with pytest.raises(ValueError):
        names_from_enum(Kind)(9)


def test_resolve_name():
    assert resolve_name(names_from_enum(Kind), 2) == "NAME"
    assert resolve_name(str, 9) == "9"


@pytest.mark.parametrize(
    "token_name", [names_from_enum(Kind), {1: "BRACKET_BEGIN"}.__getitem__]
)
def test_resolve_name_falls_back_with_warning(token_name):
    with pytest.warns(UserWarning, match="kind 9"):
        assert resolve_name(token_name, 9) == "9"


def test_decimal_name():
    assert decimal_name(Kind.NAME) == "2"
    assert decimal_name(9) == "9"
