"""
Encrypted value tokens.

Format:
    EJ[<schema>:<encrypter public key>:<nonce>:<box>]

The encrypter public key is 44 base64 characters (32 bytes), the nonce is
32 base64 characters (24 bytes) and the box is the base64 ciphertext.
The box is not validated here; bad base64 surfaces when it is decoded.
"""

import re
from typing import NamedTuple

from ejson_core.errors import InvalidTokenFormat

TOKEN_PREFIX = "EJ["
SCHEMA_VERSION = 1

_TOKEN_RE = re.compile(
    r"EJ\[([0-9]):([A-Za-z0-9+=/]{44}):([A-Za-z0-9+=/]{32}):(.+)\]"
)


class EncryptedToken(NamedTuple):
    """Decoded fields of an encrypted value."""
    schema_version: int
    encrypter_public: str
    nonce: str
    box: str


def is_encrypted(value) -> bool:
    """Cheap check used by the document walker before full parsing."""
    return isinstance(value, str) and value.startswith(TOKEN_PREFIX)


def parse_token(value: str) -> EncryptedToken:
    """
    Parse an EJ[...] literal into its fields.

    The schema digit is returned as-is; checking it against a supported
    version is left to the caller.

    Args:
        value: Token literal, with no surrounding whitespace.

    Returns:
        EncryptedToken with the four captured fields.

    Raises:
        InvalidTokenFormat: If the literal does not match the grammar.
    """
    match = _TOKEN_RE.fullmatch(value)
    if match is None:
        raise InvalidTokenFormat(value)

    return EncryptedToken(
        schema_version=int(match.group(1)),
        encrypter_public=match.group(2),
        nonce=match.group(3),
        box=match.group(4),
    )


def format_token(
    encrypter_public: str,
    nonce: str,
    box: str,
    schema_version: int = SCHEMA_VERSION,
) -> str:
    """Render token fields back into an EJ[...] literal."""
    return f"EJ[{schema_version}:{encrypter_public}:{nonce}:{box}]"
