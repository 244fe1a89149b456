"""
Unit tests for JWT configuration loading.
"""
import pytest

from jwt_auth_keys.config import JWTConfig, get_jwt_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("JWT_SECRET", "JWT_KEYS_DIRECTORY", "JWT_CONFIG_PATH"):
        monkeypatch.delenv(name, raising=False)
    get_jwt_config.cache_clear()
    yield
    get_jwt_config.cache_clear()


class TestJWTConfig:
    """Tests for JWTConfig loaders."""

    def test_defaults(self):
        config = JWTConfig()
        assert config.secret is None
        assert config.keys_directory is None

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "shht")
        monkeypatch.setenv("JWT_KEYS_DIRECTORY", "/etc/keys")

        config = JWTConfig.from_env()
        assert config.secret == "shht"
        assert config.keys_directory == "/etc/keys"

    def test_from_env_treats_empty_as_unset(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "")
        assert JWTConfig.from_env().secret is None

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("JWT_SECRET: shht\nJWT_KEYS_DIRECTORY: /etc/keys\n")

        config = JWTConfig.from_yaml(str(path))
        assert config.secret == "shht"
        assert config.keys_directory == "/etc/keys"

    def test_from_yaml_missing_file(self, tmp_path):
        config = JWTConfig.from_yaml(str(tmp_path / "missing.yaml"))
        assert config == JWTConfig()

    def test_from_yaml_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert JWTConfig.from_yaml(str(path)) == JWTConfig()

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("JWT_SECRET: from-file\nJWT_KEYS_DIRECTORY: /etc/keys\n")
        monkeypatch.setenv("JWT_SECRET", "from-env")

        config = JWTConfig.from_yaml(str(path))
        assert config.secret == "from-env"
        assert config.keys_directory == "/etc/keys"

    def test_config_path_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "jwt.yaml"
        path.write_text("JWT_SECRET: shht\n")
        monkeypatch.setenv("JWT_CONFIG_PATH", str(path))

        assert JWTConfig.from_yaml().secret == "shht"

    def test_get_jwt_config_is_cached(self, tmp_path, monkeypatch):
        path = tmp_path / "jwt.yaml"
        path.write_text("JWT_SECRET: shht\n")
        monkeypatch.setenv("JWT_CONFIG_PATH", str(path))

        config = get_jwt_config()
        assert config.secret == "shht"
        assert get_jwt_config() is config
