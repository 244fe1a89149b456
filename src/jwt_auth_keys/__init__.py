"""Issue and validate JWTs signed with a shared secret or a key pair."""

from .config import JWTConfig, get_jwt_config
from .security import (
    JWTError,
    ConfigurationError,
    CodecError,
    CodecErrorKind,
    InvalidSignatureError,
    InvalidKeyError,
    MalformedTokenError,
    InvalidAlgorithmError,
    KeyStore,
    JWTCodec,
    JwtAuth,
)

__version__ = "0.1.0"

__all__ = [
    "JWTConfig",
    "get_jwt_config",
    "JWTError",
    "ConfigurationError",
    "CodecError",
    "CodecErrorKind",
    "InvalidSignatureError",
    "InvalidKeyError",
    "MalformedTokenError",
    "InvalidAlgorithmError",
    "KeyStore",
    "JWTCodec",
    "JwtAuth",
]
