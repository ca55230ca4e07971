"""
Text encoding utilities.

Token fields travel as standard base64 and private keys as hex. These
helpers decode them to raw bytes and check sizes before anything reaches
the box primitive.
"""

import base64
import binascii

from ejson_core.errors import DecodingError

KEY_SIZE = 32    # Curve25519 keys
NONCE_SIZE = 24  # XSalsa20 nonce


def to_base64(data: bytes) -> str:
    """Encode bytes to a standard base64 string."""
    return base64.b64encode(data).decode("ascii")


def from_base64(data: str, field: str = "value", size: int | None = None) -> bytes:
    """
    Decode a standard base64 string.

    Args:
        data: Base64 text
        field: Name used in error messages
        size: Exact decoded length required, if any

    Returns:
        Decoded bytes

    Raises:
        DecodingError: On invalid characters, bad padding or wrong length
    """
    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodingError(f"Invalid base64 in {field}: {e}") from e
    _check_size(raw, field, size)
    return raw


def to_hex(data: bytes) -> str:
    """Encode bytes to lowercase hex."""
    return data.hex()


def from_hex(data: str, field: str = "value", size: int | None = None) -> bytes:
    """Decode hex text, optionally requiring an exact length."""
    try:
        raw = bytes.fromhex(data)
    except ValueError as e:
        raise DecodingError(f"Invalid hex in {field}: {e}") from e
    _check_size(raw, field, size)
    return raw


def _check_size(raw: bytes, field: str, size: int | None) -> None:
    if size is not None and len(raw) != size:
        raise DecodingError(f"{field} must be {size} bytes, got {len(raw)}")
