"""
Token authenticator that picks its keys from a keys directory.
"""
import logging
import os
from typing import TYPE_CHECKING, Any, Optional, Tuple, Union

from .codec import JWTCodec, Key
from .exceptions import CodecError, CodecErrorKind, ConfigurationError
from .key_store import KeyStore

if TYPE_CHECKING:
    from ..config.jwt_config import JWTConfig

logger = logging.getLogger(__name__)

SYMMETRIC_ALGORITHM = "HS256"
ASYMMETRIC_ALGORITHM = "RS256"

# A public key that fails with one of these simply did not sign the token.
_NEXT_KEY_ERRORS = (CodecErrorKind.SIGNATURE_MISMATCH, CodecErrorKind.INVALID_KEY)


class JwtAuth:
    """
    Issues and validates JWTs using either a shared secret or a key pair.

    When a keys directory holds a private key (``*.key``) tokens are signed
    with RS256, otherwise with HS256 and the secret. Decoding tries every
    public key (``*.key.pub``) in file name order and falls back to the
    secret when none of them verifies the token.
    """

    def __init__(
        self,
        secret: Optional[Union[str, bytes]] = None,
        keys_directory: Optional[Union[str, os.PathLike]] = None,
        codec: Optional[JWTCodec] = None,
    ):
        self.secret = secret
        self.keys_directory = keys_directory
        self.codec = codec or JWTCodec()

    @classmethod
    def from_config(cls, config: "JWTConfig") -> "JwtAuth":
        """Build an authenticator from a JWTConfig."""
        return cls(secret=config.secret, keys_directory=config.keys_directory)

    def set_secret(self, secret: Optional[Union[str, bytes]]) -> "JwtAuth":
        self.secret = secret
        return self

    def set_keys_directory(
        self, keys_directory: Optional[Union[str, os.PathLike]]
    ) -> "JwtAuth":
        self.keys_directory = keys_directory
        return self

    def encode(self, payload: Any) -> str:
        """
        Sign ``payload`` and return the token.

        Raises:
            ConfigurationError: If the keys directory is missing, holds more
                than one private key, or there is neither a private key nor
                a secret
            CodecError: If signing fails
        """
        key, algorithm = self._signing_key()

        if not key:
            raise ConfigurationError("No JWT secret or private key found.")

        return self.codec.sign(payload, key, algorithm)

    def decode(self, token: str) -> Any:
        """
        Verify ``token`` and return its payload.

        Raises:
            ConfigurationError: If the keys directory is missing
            CodecError: If the token is malformed, a public key rejects its
                algorithm, or neither a public key nor the secret verifies it
        """
        key_store = self._key_store()

        if key_store is not None:
            for position, public_key in enumerate(key_store.public_keys()):
                try:
                    return self.codec.verify(token, public_key, [ASYMMETRIC_ALGORITHM])
                except CodecError as e:
                    if e.kind not in _NEXT_KEY_ERRORS:
                        raise
                    logger.debug("Public key %d rejected token: %s", position, e.kind.value)

        logger.debug("Verifying token with secret")
        return self.codec.verify(token, self.secret, [SYMMETRIC_ALGORITHM])

    def _signing_key(self) -> Tuple[Optional[Key], str]:
        key_store = self._key_store()

        if key_store is not None:
            private_key = key_store.private_key()
            if private_key is not None:
                return private_key, ASYMMETRIC_ALGORITHM

        logger.debug("No private key, signing with secret")
        return self.secret, SYMMETRIC_ALGORITHM

    def _key_store(self) -> Optional[KeyStore]:
        if not self.keys_directory:
            return None

        key_store = KeyStore(self.keys_directory)
        key_store.ensure_exists()
        return key_store
