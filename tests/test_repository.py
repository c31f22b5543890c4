from openssl_to_rfc import (
    CipherSuiteProtocolEnum,
    CipherSuitesRepository,
    Sslv2CipherSuitesRegistry,
    TlsCipherSuitesRegistry,
)


class TestCipherSuitesRepository:
    def test_get_registry(self):
        assert CipherSuitesRepository.get_registry(CipherSuiteProtocolEnum.TLS) is TlsCipherSuitesRegistry
        assert CipherSuitesRepository.get_registry(CipherSuiteProtocolEnum.SSL_2_0) is Sslv2CipherSuitesRegistry

    def test_every_protocol_has_a_registry(self):
        for protocol in CipherSuiteProtocolEnum:
            registry = CipherSuitesRepository.get_registry(protocol)
            assert registry.protocol == protocol

    def test_get_all_cipher_suites(self):
        tls_cipher_suites = CipherSuitesRepository.get_all_cipher_suites(CipherSuiteProtocolEnum.TLS)
        assert tls_cipher_suites == TlsCipherSuitesRegistry.get_all_cipher_suites()

        ssl2_cipher_suites = CipherSuitesRepository.get_all_cipher_suites(CipherSuiteProtocolEnum.SSL_2_0)
        assert ssl2_cipher_suites == Sslv2CipherSuitesRegistry.get_all_cipher_suites()
        assert not set(tls_cipher_suites) & set(ssl2_cipher_suites)
