"""
Pytest configuration and fixtures for testing.
"""
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa


def _generate_rsa_pair():
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)

    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption()
    )

    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo
    )

    return {"private": private_pem, "public": public_pem}


@pytest.fixture(scope="session")
def rsa_keys():
    """
    Generate three RSA key pairs once per session.

    "signer" is the pair tokens are signed with; "other" and "stranger" are
    unrelated pairs used to fill the keys directory.
    """
    return {
        "signer": _generate_rsa_pair(),
        "other": _generate_rsa_pair(),
        "stranger": _generate_rsa_pair(),
    }


@pytest.fixture
def keys_dir(tmp_path):
    """
    Empty keys directory.

    Returns a helper to drop key files into it, e.g.
    ``keys_dir.add("service.key", pem)``.
    """
    directory = tmp_path / "keys"
    directory.mkdir()

    class KeysDir:
        path = directory

        def add(self, name, contents):
            (directory / name).write_bytes(contents)
            return self

        def __str__(self):
            return str(directory)

    return KeysDir()


@pytest.fixture
def single_private_dir(keys_dir, rsa_keys):
    """Keys directory with the signer's private key and its public key."""
    return (
        keys_dir
        .add("signer.key", rsa_keys["signer"]["private"])
        .add("signer.key.pub", rsa_keys["signer"]["public"])
    )


@pytest.fixture
def multiple_public_dir(keys_dir, rsa_keys):
    """Keys directory with several public keys, only one matching the signer."""
    return (
        keys_dir
        .add("a-other.key.pub", rsa_keys["other"]["public"])
        .add("m-signer.key.pub", rsa_keys["signer"]["public"])
        .add("z-stranger.key.pub", rsa_keys["stranger"]["public"])
    )
