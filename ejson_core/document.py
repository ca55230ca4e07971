"""
EJSON document decryption.

A document is a JSON object whose root names a `_public_key`. Any string
value in a nested object may be an EJ[...] token; decryption replaces each
one with its plaintext. Keys starting with an underscore are never
decrypted and instead seed a default for the same key without the
underscore.

Usage:
    from ejson_core import process_ejson, MappingKeyResolver

    config = process_ejson(text, MappingKeyResolver({public: private}))
    config["DATABASE"]["PASSWORD"]
"""

from __future__ import annotations

import copy
import inspect
import json
from typing import Any, Mapping

from nacl.public import PrivateKey
from nacl.utils import random as nacl_random

from ejson_core.boxes import open_box, seal_box
from ejson_core.encoding import KEY_SIZE, NONCE_SIZE, from_hex, to_base64, to_hex
from ejson_core.errors import (
    EJSONError,
    InvalidDocument,
    KeyResolutionFailed,
    MissingPublicKey,
)
from ejson_core.keys import ResolverLike
from ejson_core.tokens import format_token, is_encrypted, parse_token

PUBLIC_KEY_FIELD = "_public_key"


def decrypt_document(document: Mapping[str, Any], resolver: ResolverLike) -> dict:
    """
    Decrypt every encrypted value in a parsed document.

    The resolver is called once with the document's public key, before
    any value is touched. The input is not modified; a decrypted copy is
    returned. The first failure aborts the whole operation.

    Args:
        document: Parsed JSON object with a `_public_key` field
        resolver: KeyResolver or callable returning the hex private key

    Returns:
        Decrypted copy of the document

    Raises:
        MissingPublicKey: If `_public_key` is absent
        KeyResolutionFailed: If the resolver fails
        InvalidTokenFormat, DecodingError, DecryptionFailed: For a bad value,
            with `path` set to its dotted key path and `key_path` to the
            tuple of keys
    """
    public_key = _public_key(document)
    try:
        private_key = resolver(public_key)
    except KeyResolutionFailed:
        raise
    except Exception as e:
        raise KeyResolutionFailed(f"Key resolution failed: {e}", public_key) from e

    if inspect.isawaitable(private_key):
        if inspect.iscoroutine(private_key):
            private_key.close()
        raise KeyResolutionFailed(
            "Resolver returned an awaitable; use decrypt_document_async()",
            public_key,
        )
    return _decrypt_tree(document, _checked_key(private_key, public_key))


async def decrypt_document_async(
    document: Mapping[str, Any],
    resolver: ResolverLike,
) -> dict:
    """Same as decrypt_document(), awaiting the resolver if it is async."""
    public_key = _public_key(document)
    try:
        private_key = resolver(public_key)
        if inspect.isawaitable(private_key):
            private_key = await private_key
    except KeyResolutionFailed:
        raise
    except Exception as e:
        raise KeyResolutionFailed(f"Key resolution failed: {e}", public_key) from e

    return _decrypt_tree(document, _checked_key(private_key, public_key))


def process_ejson(content: str | bytes | Mapping[str, Any], resolver: ResolverLike) -> dict:
    """Parse EJSON text (or take an already-parsed object) and decrypt it."""
    return decrypt_document(_parse(content), resolver)


async def process_ejson_async(
    content: str | bytes | Mapping[str, Any],
    resolver: ResolverLike,
) -> dict:
    """Async version of process_ejson()."""
    return await decrypt_document_async(_parse(content), resolver)


def encrypt_value(plaintext: str, public_key: str) -> str:
    """
    Encrypt a value for the holder of public_key.

    Uses a fresh ephemeral keypair and random nonce, so the same plaintext
    never produces the same token twice.

    Args:
        plaintext: Value to encrypt
        public_key: Hex public key of the recipient (a document's `_public_key`)

    Returns:
        EJ[1:...] token
    """
    recipient = from_hex(public_key.strip(), "public key", KEY_SIZE)
    ephemeral = PrivateKey.generate()
    nonce = to_base64(nacl_random(NONCE_SIZE))
    box = seal_box(plaintext, nonce, to_base64(recipient), to_hex(bytes(ephemeral)))
    return format_token(to_base64(bytes(ephemeral.public_key)), nonce, box)


def _parse(content) -> Mapping[str, Any]:
    if isinstance(content, (str, bytes, bytearray)):
        try:
            content = json.loads(content)
        except ValueError as e:
            raise InvalidDocument(f"Invalid JSON: {e}") from e
    if not isinstance(content, Mapping):
        raise InvalidDocument(
            f"EJSON root must be an object, got {type(content).__name__}"
        )
    return content


def _public_key(document) -> str:
    if not isinstance(document, Mapping):
        raise InvalidDocument(
            f"EJSON root must be an object, got {type(document).__name__}"
        )
    public_key = document.get(PUBLIC_KEY_FIELD)
    if not isinstance(public_key, str):
        raise MissingPublicKey(f"Missing {PUBLIC_KEY_FIELD} in EJSON document")
    return public_key


def _checked_key(private_key, public_key: str) -> str:
    if not isinstance(private_key, str) or not private_key.strip():
        raise KeyResolutionFailed(
            f"Resolver returned no private key for {public_key}", public_key
        )
    return private_key.strip()


def _decrypt_tree(document: Mapping[str, Any], private_key: str) -> dict:
    tree = copy.deepcopy(dict(document))
    _walk(tree, private_key, ())
    return tree


def _walk(node: dict, private_key: str, path: tuple) -> None:
    # Snapshot keys: defaults added below are not visited again
    for key in list(node):
        value = node[key]
        if isinstance(key, str) and key.startswith("_"):
            name = key[1:]
            if name not in node:
                node[name] = copy.deepcopy(value)
        elif is_encrypted(value):
            node[key] = _decrypt_value(value, private_key, path + (key,))
        elif isinstance(value, dict):
            _walk(value, private_key, path + (key,))


def _decrypt_value(value: str, private_key: str, path: tuple) -> str:
    try:
        token = parse_token(value)
        return open_box(token.box, token.nonce, token.encrypter_public, private_key)
    except EJSONError as e:
        e.key_path = path
        e.path = ".".join(str(p) for p in path)
        raise
