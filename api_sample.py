from openssl_to_rfc import (
    CipherSuiteAsJson,
    CipherSuiteProtocolEnum,
    CipherSuitesRepository,
    Sslv2CipherSuitesRegistry,
    TlsCipherSuitesRegistry,
)


def main() -> None:
    # Translate an OpenSSL name to the RFC name
    cipher_suite = TlsCipherSuitesRegistry.from_openssl_name("ECDHE-RSA-AES128-GCM-SHA256")
    if cipher_suite is None:
        raise RuntimeError("Should never happen")
    print(f"ECDHE-RSA-AES128-GCM-SHA256 is {cipher_suite.rfc_name}")

    # And back
    print(f"{cipher_suite.rfc_name} is {TlsCipherSuitesRegistry.to_openssl_name(cipher_suite)}")

    # Unknown names are reported as None
    assert TlsCipherSuitesRegistry.from_openssl_name("NOT-A-REAL-CIPHER") is None

    # The same OpenSSL name can refer to different cipher suites in SSL 2.0 and in TLS
    ssl2_null_md5 = Sslv2CipherSuitesRegistry.from_openssl_name("NULL-MD5")
    tls_null_md5 = TlsCipherSuitesRegistry.from_openssl_name("NULL-MD5")
    print(f"NULL-MD5 is {ssl2_null_md5!r} in SSL 2.0 and {tls_null_md5!r} in TLS")

    # List all the SSL 2.0 cipher suites as JSON
    for ssl2_cipher_suite in CipherSuitesRepository.get_all_cipher_suites(CipherSuiteProtocolEnum.SSL_2_0):
        print(CipherSuiteAsJson.model_validate(ssl2_cipher_suite).model_dump_json())


if __name__ == "__main__":
    main()
