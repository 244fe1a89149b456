"""
Key store backed by a directory of PEM files.

Layout:
    <name>.key      private key used to sign tokens (at most one)
    <name>.key.pub  public keys trusted to verify tokens (any number)
"""
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PRIVATE_KEY_PATTERN = "*.key"
PUBLIC_KEY_PATTERN = "*.key.pub"


class KeyStore:
    """
    Reads signing and verification keys from a directory.

    Files are read on every call so the directory stays the source of truth;
    nothing is cached and nothing is ever written.
    """

    def __init__(self, directory: Union[str, os.PathLike]):
        """
        Initialize the key store.

        Args:
            directory: Directory holding the ``*.key`` and ``*.key.pub`` files
        """
        self.directory = directory
        self._path = Path(directory)

    def exists(self) -> bool:
        return self._path.exists()

    def ensure_exists(self) -> None:
        """
        Raises:
            ConfigurationError: If the directory does not exist
        """
        if not self.exists():
            raise ConfigurationError(f"Directory not found: {self.directory}")

    def private_key(self) -> Optional[bytes]:
        """
        Get the private key used to sign new tokens.

        Tokens signed with it are trusted by whoever holds the matching
        public key.

        Returns:
            The PEM contents of the single ``*.key`` file, or None if there
            is no private key

        Raises:
            ConfigurationError: If more than one private key is present
        """
        files = self._glob(PRIVATE_KEY_PATTERN)

        if len(files) > 1:
            raise ConfigurationError("Multiple private keys found.")

        if not files:
            return None

        logger.debug("Using private key %s", files[0].name)
        return files[0].read_bytes()

    def public_key_files(self) -> List[Path]:
        """Public key files, sorted by file name."""
        return self._glob(PUBLIC_KEY_PATTERN)

    def public_keys(self) -> List[bytes]:
        """
        Get the public keys tokens are verified against.

        Public keys can only verify tokens, never sign them.
        """
        return [path.read_bytes() for path in self.public_key_files()]

    def _glob(self, pattern: str) -> List[Path]:
        return sorted(
            (path for path in self._path.glob(pattern) if path.is_file()),
            key=lambda path: path.name,
        )
