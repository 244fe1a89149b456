"""
Custom exceptions for JWT authentication.
"""
from enum import Enum
from typing import Optional


class JWTError(Exception):
    """Base exception for JWT-related errors."""
    pass


class ConfigurationError(JWTError):
    """Keys directory, private key or secret is missing or ambiguous."""
    pass


class CodecErrorKind(str, Enum):
    """Why the codec refused to sign or verify a token."""

    SIGNATURE_MISMATCH = "signature_mismatch"
    INVALID_KEY = "invalid_key"
    MALFORMED_INPUT = "malformed_input"
    UNSUPPORTED_ALGORITHM = "unsupported_algorithm"


class CodecError(JWTError):
    """
    Failure reported by the JWT codec.

    Callers branch on ``kind`` rather than on the message text.
    """

    kind: CodecErrorKind = CodecErrorKind.MALFORMED_INPUT

    def __init__(self, message: str, kind: Optional[CodecErrorKind] = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class InvalidSignatureError(CodecError):
    """Token signature does not match the key."""
    kind = CodecErrorKind.SIGNATURE_MISMATCH


class InvalidKeyError(CodecError):
    """Key could not be used for the requested algorithm."""
    kind = CodecErrorKind.INVALID_KEY


class MalformedTokenError(CodecError):
    """Token is malformed or its payload cannot be decoded."""
    kind = CodecErrorKind.MALFORMED_INPUT


class InvalidAlgorithmError(CodecError):
    """Token uses an algorithm that is not allowed."""
    kind = CodecErrorKind.UNSUPPORTED_ALGORITHM


_ERRORS_BY_KIND = {
    CodecErrorKind.SIGNATURE_MISMATCH: InvalidSignatureError,
    CodecErrorKind.INVALID_KEY: InvalidKeyError,
    CodecErrorKind.MALFORMED_INPUT: MalformedTokenError,
    CodecErrorKind.UNSUPPORTED_ALGORITHM: InvalidAlgorithmError,
}


def codec_error(kind: CodecErrorKind, message: str) -> CodecError:
    """Build the CodecError subclass matching ``kind``."""
    return _ERRORS_BY_KIND[kind](message)
