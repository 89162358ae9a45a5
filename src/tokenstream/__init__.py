import tokenstream.version
from _tokenstream.errors import TokenSyntaxError
from _tokenstream.token import Token
from _tokenstream.token_names import END_OF_STREAM, names_from_enum
from _tokenstream.token_stream import TokenStream

__author__ = """Equinor"""
__email__ = "fg_sib-scout@equinor.com"

__version__ = tokenstream.version.version

__all__ = [
    "END_OF_STREAM",
    "Token",
    "TokenStream",
    "TokenSyntaxError",
    "names_from_enum",
]
