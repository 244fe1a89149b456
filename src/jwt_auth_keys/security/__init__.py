"""
JWT Authentication Module with secret or key-pair signing.

Tokens are signed with RS256 when the keys directory holds a private key,
and with HS256 and the shared secret otherwise.

Example usage:
    from jwt_auth_keys.security import JwtAuth

    auth = JwtAuth().set_keys_directory("/etc/app/keys").set_secret("shht")

    # Generate a token
    token = auth.encode({"sub": "billing-service"})

    # Verify and decode a token
    try:
        payload = auth.decode(token)
    except InvalidSignatureError:
        print("Token was not signed by a trusted key")
"""

from .exceptions import (
    JWTError,
    ConfigurationError,
    CodecError,
    CodecErrorKind,
    InvalidSignatureError,
    InvalidKeyError,
    MalformedTokenError,
    InvalidAlgorithmError,
)
from .key_store import KeyStore
from .codec import JWTCodec
from .authenticator import JwtAuth

__all__ = [
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
