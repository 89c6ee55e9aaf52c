"""Pytest fixtures for keyblob tests."""
import pytest
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from keyblob.core.keys import RSAPrivateKey, RSAPublicKey


@pytest.fixture(scope="session")
def rsa_private_key():
    """Generates a 2048-bit pyca/cryptography RSA key once per session."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_private_key_1024():
    """Generates a 1024-bit pyca/cryptography RSA key once per session."""
    return rsa.generate_private_key(public_exponent=65537, key_size=1024)


@pytest.fixture(scope="session")
def ec_private_key():
    """Generates a P-256 key for non-RSA inputs."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def toy_public_key():
    """Textbook key: p=61, q=53, n=3233, e=17."""
    return RSAPublicKey(n=3233, e=17)


@pytest.fixture
def toy_private_key():
    """Textbook key: p=61, q=53, n=3233, e=17, d=2753."""
    return RSAPrivateKey(n=3233, e=17, d=2753, p=61, q=53)
