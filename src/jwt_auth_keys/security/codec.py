"""
JWT codec: signing and verification of opaque payloads on top of PyJWT.
"""
import json
from typing import Any, Dict, Iterable, Union

import jwt
from jwt.api_jws import PyJWS

from .exceptions import CodecErrorKind, codec_error

Key = Union[str, bytes]


class JWTCodec:
    """
    Signs and verifies compact JWS tokens for HS256 and RS256.

    The payload is any JSON-serializable value; it is not required to be a
    claims object and no claims are validated. Every PyJWT failure is
    translated into a CodecError whose ``kind`` tells callers whether the
    key did not match or the token itself is unusable.
    """

    SUPPORTED_ALGORITHMS = ["HS256", "RS256"]

    def __init__(self):
        self._jws = PyJWS(algorithms=self.SUPPORTED_ALGORITHMS)

    def sign(self, payload: Any, key: Key, algorithm: str) -> str:
        """
        Sign ``payload`` and return the compact token.

        The header is ``{"typ":"JWT","alg":<algorithm>}`` in that order so
        tokens match those produced by other standard JWT libraries.

        Raises:
            InvalidAlgorithmError: If the algorithm is not supported
            InvalidKeyError: If the key cannot be used with the algorithm
            MalformedTokenError: If the payload is not JSON serializable
        """
        if algorithm not in self.SUPPORTED_ALGORITHMS:
            raise codec_error(
                CodecErrorKind.UNSUPPORTED_ALGORITHM,
                f"Unsupported algorithm: {algorithm}",
            )

        try:
            segment = json.dumps(payload, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise codec_error(
                CodecErrorKind.MALFORMED_INPUT, f"Payload is not JSON serializable: {e}"
            ) from e

        try:
            return self._jws.encode(
                segment, key, algorithm=algorithm, sort_headers=False
            )
        except jwt.InvalidKeyError as e:
            raise codec_error(CodecErrorKind.INVALID_KEY, f"Invalid signing key: {e}") from e
        except (ValueError, TypeError) as e:
            raise codec_error(CodecErrorKind.INVALID_KEY, f"Invalid signing key: {e}") from e

    def verify(self, token: str, key: Key, algorithms: Iterable[str]) -> Any:
        """
        Verify ``token`` with ``key`` and return the decoded payload.

        Args:
            token: Compact JWT string
            key: Secret or PEM public key
            algorithms: Algorithms the token header may declare

        Raises:
            InvalidSignatureError: If the signature does not match the key
            InvalidKeyError: If the key cannot be used with the algorithm
            InvalidAlgorithmError: If the header algorithm is not allowed
            MalformedTokenError: If the token or its payload is malformed
        """
        try:
            segment = self._jws.decode(token, key, algorithms=list(algorithms))
        except jwt.InvalidSignatureError as e:
            raise codec_error(CodecErrorKind.SIGNATURE_MISMATCH, "Invalid token signature") from e
        except jwt.InvalidAlgorithmError as e:
            raise codec_error(CodecErrorKind.UNSUPPORTED_ALGORITHM, f"Invalid algorithm: {e}") from e
        except jwt.InvalidKeyError as e:
            raise codec_error(CodecErrorKind.INVALID_KEY, f"Invalid verification key: {e}") from e
        except jwt.DecodeError as e:
            raise codec_error(CodecErrorKind.MALFORMED_INPUT, f"Token is malformed: {e}") from e
        except jwt.PyJWTError as e:
            raise codec_error(CodecErrorKind.MALFORMED_INPUT, f"Invalid token: {e}") from e
        except (ValueError, TypeError) as e:
            raise codec_error(CodecErrorKind.INVALID_KEY, f"Invalid verification key: {e}") from e

        try:
            return json.loads(segment)
        except ValueError as e:
            raise codec_error(
                CodecErrorKind.MALFORMED_INPUT, "Token payload is not valid JSON"
            ) from e

    def get_unverified_header(self, token: str) -> Dict[str, Any]:
        """
        Read the token header WITHOUT verifying the signature.

        Use only for diagnostics.

        Raises:
            MalformedTokenError: If the header cannot be decoded
        """
        try:
            return self._jws.get_unverified_header(token)
        except jwt.PyJWTError as e:
            raise codec_error(CodecErrorKind.MALFORMED_INPUT, f"Token is malformed: {e}") from e
