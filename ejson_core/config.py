"""EJSON configuration."""

import os
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Where to find documents and keys, loaded from EJSON_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="EJSON_")

    # Explicit document path; overrides dir/prefix/suffix when set
    file_path: Optional[str] = None

    # Composed path: <file_dir>/<file_prefix><file_suffix>
    file_dir: str = "."
    file_prefix: str = "env"  # Usually the deployment environment name
    file_suffix: str = ".ejson"

    # One file per public key, content is the hex private key
    keys_dir: str = "/opt/ejson/keys/"

    # Hex private key; takes precedence over keys_dir
    private_key: Optional[str] = None

    @property
    def document_path(self) -> str:
        if self.file_path:
            return self.file_path
        return os.path.join(self.file_dir, f"{self.file_prefix}{self.file_suffix}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
