from openssl_to_rfc import TlsCipherSuitesRegistry
from tests.markers import can_only_run_with_openssl_cipher_name
from tests.openssl_library import OpenSslCipherNameOracle


@can_only_run_with_openssl_cipher_name
class TestNamesMatchOpenSsl:
    def test_tls_cipher_suites(self):
        # Given the OpenSSL library available on the system
        oracle = OpenSslCipherNameOracle.load()
        assert oracle

        checked_cipher_suites_count = 0
        for cipher_suite in TlsCipherSuitesRegistry.get_all_cipher_suites():
            # When asking OpenSSL for the OpenSSL name of each cipher suite
            openssl_name = oracle.get_openssl_name(cipher_suite.rfc_name)
            if openssl_name is None:
                # This OpenSSL library does not know about this cipher suite; usually an old one that was removed
                continue

            # Then it is the OpenSSL name returned for this cipher suite
            assert TlsCipherSuitesRegistry.to_openssl_name(cipher_suite) == openssl_name

            # And it maps back to the same cipher suite
            assert TlsCipherSuitesRegistry.from_openssl_name(openssl_name) == cipher_suite
            checked_cipher_suites_count += 1

        # And the check was done against actual cipher suites
        assert checked_cipher_suites_count > 0
