"""
Public-key authenticated encryption for EJSON values.

Wraps the NaCl box primitive (Curve25519 + XSalsa20-Poly1305). Keys and
nonces arrive as text and are decoded here; results go back out as text.
"""

from nacl.exceptions import CryptoError
from nacl.public import Box, PrivateKey, PublicKey

from ejson_core.encoding import (
    KEY_SIZE,
    NONCE_SIZE,
    from_base64,
    from_hex,
    to_base64,
)
from ejson_core.errors import DecodingError, DecryptionFailed


def _box(public_key: str, private_key: str) -> Box:
    public = from_base64(public_key, "public key", KEY_SIZE)
    private = from_hex(private_key.strip(), "private key", KEY_SIZE)
    try:
        return Box(PrivateKey(private), PublicKey(public))
    except CryptoError as e:
        # Low-order public keys fail key agreement
        raise DecryptionFailed(f"Key agreement failed: {e}") from e


def open_box(
    ciphertext: str,
    nonce: str,
    sender_public_key: str,
    recipient_private_key: str,
) -> str:
    """
    Decrypt a base64 box into UTF-8 text.

    Args:
        ciphertext: Base64 box (MAC + encrypted message)
        nonce: Base64 24-byte nonce used when sealing
        sender_public_key: Base64 32-byte public key of the sealer
        recipient_private_key: Hex 32-byte private key of the recipient

    Returns:
        Decrypted plaintext

    Raises:
        DecodingError: If any input fails to decode or has the wrong size
        DecryptionFailed: If authentication fails (wrong key, tampered data,
            wrong nonce)
    """
    raw_nonce = from_base64(nonce, "nonce", NONCE_SIZE)
    raw_box = from_base64(ciphertext, "ciphertext")
    box = _box(sender_public_key, recipient_private_key)

    try:
        plaintext = box.decrypt(raw_box, raw_nonce)
    except CryptoError as e:
        raise DecryptionFailed(f"Decryption failed: {e}") from e

    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodingError(f"Decrypted value is not valid UTF-8: {e}") from e


def seal_box(
    plaintext: str,
    nonce: str,
    recipient_public_key: str,
    sender_private_key: str,
) -> str:
    """
    Encrypt UTF-8 text into a base64 box.

    Counterpart of open_box(); the recipient opens it with its private key
    and the sender's public key.
    """
    raw_nonce = from_base64(nonce, "nonce", NONCE_SIZE)
    box = _box(recipient_public_key, sender_private_key)
    sealed = box.encrypt(plaintext.encode("utf-8"), raw_nonce)
    return to_base64(sealed.ciphertext)
