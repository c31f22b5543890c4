import pytest

from tests.openssl_library import OpenSslCipherNameOracle

can_only_run_with_openssl_cipher_name = pytest.mark.skipif(
    condition=OpenSslCipherNameOracle.load() is None,
    reason="No OpenSSL library exposing OPENSSL_cipher_name() could be found",
)
