"""JWT configuration from environment variables or a YAML file."""
import os
import yaml
from functools import lru_cache
from pydantic import BaseModel, Field
from typing import Optional


class JWTConfig(BaseModel):
    """
    Secret and keys directory used to sign and verify tokens.

    Nothing is validated at load time; a missing directory or key is
    reported when a token is encoded or decoded.
    """
    secret: Optional[str] = Field(
        default=None,
        description="Shared secret for HS256 tokens"
    )
    keys_directory: Optional[str] = Field(
        default=None,
        description="Directory holding *.key and *.key.pub files"
    )

    @classmethod
    def from_env(cls) -> "JWTConfig":
        """
        Load JWT configuration from environment variables.

        Environment variables:
            JWT_SECRET: Shared secret
            JWT_KEYS_DIRECTORY: Keys directory

        Returns:
            JWTConfig instance
        """
        return cls(
            secret=os.getenv("JWT_SECRET") or None,
            keys_directory=os.getenv("JWT_KEYS_DIRECTORY") or None,
        )

    @classmethod
    def from_yaml(cls, config_path: Optional[str] = None) -> "JWTConfig":
        """
        Load JWT configuration from a YAML file.

        Environment variables take precedence over values in the file.

        Args:
            config_path: Path to the YAML file. If None, uses JWT_CONFIG_PATH
                        env var or defaults to ./config.yaml

        Returns:
            JWTConfig instance
        """
        if config_path is None:
            config_path = os.getenv("JWT_CONFIG_PATH", "config.yaml")

        config_data = {}
        if os.path.exists(config_path):
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}

        env = cls.from_env()
        secret = config_data.get("JWT_SECRET")
        keys_directory = config_data.get("JWT_KEYS_DIRECTORY")

        return cls(
            secret=env.secret or (str(secret) if secret is not None else None),
            keys_directory=env.keys_directory or keys_directory,
        )


@lru_cache()
def get_jwt_config() -> JWTConfig:
    """
    Get cached JWT configuration.

    Returns:
        JWTConfig instance
    """
    return JWTConfig.from_yaml()
