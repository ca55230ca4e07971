"""
EJSON Core - decrypt secrets embedded in JSON documents.

Values are encrypted with NaCl public-key boxes and stored inline as
EJ[...] tokens, so a config file can live in version control while only
holders of the private key can read the secrets.
"""

from ejson_core.errors import (
    EJSONError,
    InvalidTokenFormat,
    DecodingError,
    DecryptionFailed,
    MissingPublicKey,
    KeyResolutionFailed,
    InvalidDocument,
)
from ejson_core.tokens import (
    EncryptedToken,
    parse_token,
    format_token,
    is_encrypted,
)
from ejson_core.boxes import (
    open_box,
    seal_box,
)
from ejson_core.keys import (
    KeyResolver,
    StaticKeyResolver,
    MappingKeyResolver,
    KeysDirResolver,
    ChainedKeyResolver,
    resolver_from_settings,
    generate_keypair,
)
from ejson_core.document import (
    decrypt_document,
    decrypt_document_async,
    process_ejson,
    process_ejson_async,
    encrypt_value,
)
from ejson_core.config import Settings, get_settings
from ejson_core.loader import (
    document_path,
    load_ejson,
    load_ejson_async,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "EJSONError",
    "InvalidTokenFormat",
    "DecodingError",
    "DecryptionFailed",
    "MissingPublicKey",
    "KeyResolutionFailed",
    "InvalidDocument",
    # Tokens
    "EncryptedToken",
    "parse_token",
    "format_token",
    "is_encrypted",
    # Boxes
    "open_box",
    "seal_box",
    # Key resolution
    "KeyResolver",
    "StaticKeyResolver",
    "MappingKeyResolver",
    "KeysDirResolver",
    "ChainedKeyResolver",
    "resolver_from_settings",
    "generate_keypair",
    # Documents
    "decrypt_document",
    "decrypt_document_async",
    "process_ejson",
    "process_ejson_async",
    "encrypt_value",
    # Configuration and loading
    "Settings",
    "get_settings",
    "document_path",
    "load_ejson",
    "load_ejson_async",
]
