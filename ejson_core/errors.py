"""
Exception classes for EJSON Core.

Every failure raised while decrypting a document derives from EJSONError,
so callers can catch one type at their boundary and still tell a malformed
token apart from a wrong key.
"""


class EJSONError(Exception):
    """Base exception for EJSON operations."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.message = message
        self.path = path
        # Raw keys from the root; unambiguous when a key contains a dot
        self.key_path: tuple = ()

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} (at {self.path})"
        return self.message


class InvalidTokenFormat(EJSONError):
    """A value prefixed with EJ[ does not match the token grammar."""

    def __init__(self, value: str, path: str | None = None):
        super().__init__(f"Invalid EJSON: {value}", path)
        self.value = value


class DecodingError(EJSONError):
    """Base64/hex decoding failed or decoded length is wrong."""
    pass


class DecryptionFailed(EJSONError):
    """Authenticated decryption rejected the ciphertext."""
    pass


class MissingPublicKey(EJSONError):
    """Document has no _public_key at its root."""
    pass


class KeyResolutionFailed(EJSONError):
    """The private key for a document's public key could not be obtained."""

    def __init__(self, message: str, public_key: str | None = None):
        super().__init__(message)
        self.public_key = public_key


class InvalidDocument(EJSONError):
    """Document is not valid JSON or its root is not an object."""
    pass
