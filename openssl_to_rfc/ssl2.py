from enum import unique
from typing import Dict

from openssl_to_rfc.registry import (
    CipherSuiteEnum,
    CipherSuiteProtocolEnum,
    CipherSuitesRegistry,
    build_name_lookups,
)


@unique
class Sslv2CipherSuiteEnum(CipherSuiteEnum):
    """The SSL 2.0 cipher suites, named after their RFC name.

    TLS_RSA_WITH_NULL_MD5 is also a TLS cipher suite; its SSL 2.0 and TLS versions are distinct members of distinct
    enumerations, even though OpenSSL calls both of them "NULL-MD5".
    """

    SSL_CK_RC4_128_WITH_MD5 = "SSL_CK_RC4_128_WITH_MD5"
    SSL_CK_RC4_128_EXPORT40_WITH_MD5 = "SSL_CK_RC4_128_EXPORT40_WITH_MD5"
    SSL_CK_RC2_128_CBC_WITH_MD5 = "SSL_CK_RC2_128_CBC_WITH_MD5"
    SSL_CK_RC2_128_CBC_EXPORT40_WITH_MD5 = "SSL_CK_RC2_128_CBC_EXPORT40_WITH_MD5"
    SSL_CK_IDEA_128_CBC_WITH_MD5 = "SSL_CK_IDEA_128_CBC_WITH_MD5"
    SSL_CK_DES_64_CBC_WITH_MD5 = "SSL_CK_DES_64_CBC_WITH_MD5"
    SSL_CK_DES_192_EDE3_CBC_WITH_MD5 = "SSL_CK_DES_192_EDE3_CBC_WITH_MD5"
    SSL_CK_RC4_64_WITH_MD5 = "SSL_CK_RC4_64_WITH_MD5"
    TLS_RSA_WITH_NULL_MD5 = "TLS_RSA_WITH_NULL_MD5"

    @property
    def openssl_name(self) -> str:
        return Sslv2CipherSuitesRegistry.to_openssl_name(self)

    @property
    def protocol(self) -> CipherSuiteProtocolEnum:
        return Sslv2CipherSuitesRegistry.protocol


_SSLV2_OPENSSL_NAME_TO_CIPHER_SUITE: Dict[str, Sslv2CipherSuiteEnum] = {
    "RC4-MD5": Sslv2CipherSuiteEnum.SSL_CK_RC4_128_WITH_MD5,
    "EXP-RC4-MD5": Sslv2CipherSuiteEnum.SSL_CK_RC4_128_EXPORT40_WITH_MD5,
    "RC2-CBC-MD5": Sslv2CipherSuiteEnum.SSL_CK_RC2_128_CBC_WITH_MD5,
    "EXP-RC2-CBC-MD5": Sslv2CipherSuiteEnum.SSL_CK_RC2_128_CBC_EXPORT40_WITH_MD5,
    "IDEA-CBC-MD5": Sslv2CipherSuiteEnum.SSL_CK_IDEA_128_CBC_WITH_MD5,
    "DES-CBC-MD5": Sslv2CipherSuiteEnum.SSL_CK_DES_64_CBC_WITH_MD5,
    "DES-CBC3-MD5": Sslv2CipherSuiteEnum.SSL_CK_DES_192_EDE3_CBC_WITH_MD5,
    "RC4-64-MD5": Sslv2CipherSuiteEnum.SSL_CK_RC4_64_WITH_MD5,
    "NULL-MD5": Sslv2CipherSuiteEnum.TLS_RSA_WITH_NULL_MD5,
}


class Sslv2CipherSuitesRegistry(CipherSuitesRegistry[Sslv2CipherSuiteEnum]):
    """Translate SSL 2.0 cipher suites between their OpenSSL names and their RFC names."""

    protocol = CipherSuiteProtocolEnum.SSL_2_0
    _name_lookups = build_name_lookups(Sslv2CipherSuiteEnum, _SSLV2_OPENSSL_NAME_TO_CIPHER_SUITE, {})
