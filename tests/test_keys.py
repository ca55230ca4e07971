"""Tests for ejson_core key resolvers."""

import pytest

from ejson_core.config import Settings
from ejson_core.errors import KeyResolutionFailed
from ejson_core.keys import (
    ChainedKeyResolver,
    KeysDirResolver,
    MappingKeyResolver,
    StaticKeyResolver,
    generate_keypair,
    resolver_from_settings,
)

from vectors import PRIVATE_KEY, PUBLIC_KEY


class TestStaticKeyResolver:

    def test_returns_configured_key(self):
        assert StaticKeyResolver(f"{PRIVATE_KEY}\n").resolve(PUBLIC_KEY) == PRIVATE_KEY

    def test_no_key_configured(self):
        with pytest.raises(KeyResolutionFailed, match="No private key configured"):
            StaticKeyResolver(None).resolve(PUBLIC_KEY)

    def test_callable(self):
        """Resolvers can be used wherever a plain callable is expected."""
        assert StaticKeyResolver(PRIVATE_KEY)(PUBLIC_KEY) == PRIVATE_KEY


class TestMappingKeyResolver:

    def test_lookup(self, keys):
        assert MappingKeyResolver(keys).resolve(PUBLIC_KEY) == PRIVATE_KEY

    def test_unknown_public_key(self, keys):
        with pytest.raises(KeyResolutionFailed) as exc_info:
            MappingKeyResolver(keys).resolve("0" * 64)
        assert exc_info.value.public_key == "0" * 64


class TestKeysDirResolver:

    def test_reads_and_strips_key_file(self, tmp_path):
        """Key file content is trimmed of surrounding whitespace."""
        (tmp_path / PUBLIC_KEY).write_text(f"  {PRIVATE_KEY}\n")
        assert KeysDirResolver(str(tmp_path)).resolve(PUBLIC_KEY) == PRIVATE_KEY

    def test_missing_key_file(self, tmp_path):
        with pytest.raises(KeyResolutionFailed, match="Cannot read private key") as exc_info:
            KeysDirResolver(str(tmp_path)).resolve(PUBLIC_KEY)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    @pytest.mark.parametrize("public_key", ["", ".", "..", "../etc/passwd", "a/b"])
    def test_rejects_path_like_public_keys(self, tmp_path, public_key):
        with pytest.raises(KeyResolutionFailed, match="Invalid public key"):
            KeysDirResolver(str(tmp_path)).resolve(public_key)


class TestChainedKeyResolver:

    def test_first_success_wins(self, keys):
        resolver = ChainedKeyResolver(
            StaticKeyResolver(None),
            MappingKeyResolver(keys),
            StaticKeyResolver("ff" * 32),
        )
        assert resolver.resolve(PUBLIC_KEY) == PRIVATE_KEY

    def test_all_fail(self):
        resolver = ChainedKeyResolver(StaticKeyResolver(None), MappingKeyResolver({}))
        with pytest.raises(KeyResolutionFailed, match="No resolver could provide"):
            resolver.resolve(PUBLIC_KEY)

    def test_other_errors_propagate(self):
        """Only KeyResolutionFailed moves on to the next resolver."""

        class Broken(StaticKeyResolver):
            def resolve(self, public_key):
                raise RuntimeError("boom")

        resolver = ChainedKeyResolver(Broken(None), StaticKeyResolver(PRIVATE_KEY))
        with pytest.raises(RuntimeError, match="boom"):
            resolver.resolve(PUBLIC_KEY)


class TestResolverFromSettings:

    def test_private_key_takes_precedence(self, tmp_path):
        (tmp_path / PUBLIC_KEY).write_text("ab" * 32)
        settings = Settings(private_key=PRIVATE_KEY, keys_dir=str(tmp_path))
        assert resolver_from_settings(settings).resolve(PUBLIC_KEY) == PRIVATE_KEY

    def test_falls_back_to_keys_dir(self, tmp_path):
        (tmp_path / PUBLIC_KEY).write_text(PRIVATE_KEY)
        settings = Settings(keys_dir=str(tmp_path))
        assert resolver_from_settings(settings).resolve(PUBLIC_KEY) == PRIVATE_KEY

    def test_nothing_available(self, tmp_path):
        settings = Settings(keys_dir=str(tmp_path))
        with pytest.raises(KeyResolutionFailed):
            resolver_from_settings(settings).resolve(PUBLIC_KEY)


class TestGenerateKeypair:

    def test_hex_keys(self):
        public_key, private_key = generate_keypair()
        assert len(public_key) == 64
        assert len(private_key) == 64
        bytes.fromhex(public_key)
        bytes.fromhex(private_key)

    def test_unique(self):
        assert generate_keypair() != generate_keypair()
