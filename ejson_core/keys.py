"""
Private key resolution.

A document names its public key; a resolver turns that into the hex
private key needed to open its values. Resolvers here cover the usual
sources (a fixed key, a dict, a keys directory) and can be chained.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Callable, Mapping, Tuple, Union

from nacl.public import PrivateKey

from ejson_core.config import Settings
from ejson_core.encoding import to_hex
from ejson_core.errors import KeyResolutionFailed

logger = logging.getLogger(__name__)


class KeyResolver(ABC):
    """Maps a document public key to its hex private key."""

    @abstractmethod
    def resolve(self, public_key: str) -> str:
        """Return the hex private key for public_key.

        Raises:
            KeyResolutionFailed: If no key is available
        """
        pass

    def __call__(self, public_key: str) -> str:
        return self.resolve(public_key)


class StaticKeyResolver(KeyResolver):
    """Returns the same private key for every document."""

    def __init__(self, private_key: str | None):
        self._private_key = private_key

    def resolve(self, public_key: str) -> str:
        if not self._private_key:
            raise KeyResolutionFailed("No private key configured", public_key)
        return self._private_key.strip()


class MappingKeyResolver(KeyResolver):
    """Looks keys up in an in-memory mapping of public -> private."""

    def __init__(self, keys: Mapping[str, str]):
        self._keys = dict(keys)

    def resolve(self, public_key: str) -> str:
        try:
            return self._keys[public_key].strip()
        except KeyError:
            raise KeyResolutionFailed(
                f"Private key not found for public key: {public_key}", public_key
            ) from None


class KeysDirResolver(KeyResolver):
    """
    Reads private keys from a directory with one file per public key.

    Example:
        /opt/ejson/keys/af33e849c33d...  ->  "ddbd617e7826..."
    """

    def __init__(self, keys_dir: str):
        self.keys_dir = keys_dir

    def resolve(self, public_key: str) -> str:
        if not public_key or os.sep in public_key or public_key in (".", ".."):
            raise KeyResolutionFailed(f"Invalid public key: {public_key!r}", public_key)
        if os.altsep and os.altsep in public_key:
            raise KeyResolutionFailed(f"Invalid public key: {public_key!r}", public_key)

        path = os.path.join(self.keys_dir, public_key)
        logger.debug(f"Reading private key from {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read().strip()
        except OSError as e:
            raise KeyResolutionFailed(
                f"Cannot read private key for {public_key} from {self.keys_dir}: {e}",
                public_key,
            ) from e


class ChainedKeyResolver(KeyResolver):
    """Tries each resolver in order; the first that succeeds wins."""

    def __init__(self, *resolvers: KeyResolver):
        self.resolvers = list(resolvers)

    def resolve(self, public_key: str) -> str:
        for resolver in self.resolvers:
            try:
                return resolver.resolve(public_key)
            except KeyResolutionFailed as e:
                logger.debug(f"{type(resolver).__name__} could not resolve key: {e}")
        raise KeyResolutionFailed(
            f"No resolver could provide a private key for {public_key}", public_key
        )


def resolver_from_settings(settings: Settings) -> KeyResolver:
    """
    Build the default resolver: the configured private key, if any,
    then the keys directory.
    """
    resolvers: list[KeyResolver] = []
    if settings.private_key:
        resolvers.append(StaticKeyResolver(settings.private_key))
    resolvers.append(KeysDirResolver(settings.keys_dir))
    return ChainedKeyResolver(*resolvers)


def generate_keypair() -> Tuple[str, str]:
    """
    Generate a new Curve25519 keypair.

    Returns:
        Tuple of (public_key_hex, private_key_hex)
    """
    private = PrivateKey.generate()
    return to_hex(bytes(private.public_key)), to_hex(bytes(private))


# Anything accepted where a resolver is expected
ResolverLike = Union[KeyResolver, Callable[[str], object]]
