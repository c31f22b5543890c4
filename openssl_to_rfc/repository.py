from typing import Any, Dict, Tuple, Type

from openssl_to_rfc.registry import CipherSuiteEnum, CipherSuiteProtocolEnum, CipherSuitesRegistry
from openssl_to_rfc.ssl2 import Sslv2CipherSuitesRegistry
from openssl_to_rfc.tls import TlsCipherSuitesRegistry


class CipherSuitesRepository:
    """Pick the registry to use for a protocol era.

    The registries are separate namespaces: an OpenSSL name such as "NULL-MD5" refers to a different cipher suite
    depending on the protocol, so the caller has to know which protocol the name comes from.
    """

    _REGISTRY_FOR_PROTOCOL: Dict[CipherSuiteProtocolEnum, Type[CipherSuitesRegistry[Any]]] = {
        CipherSuiteProtocolEnum.SSL_2_0: Sslv2CipherSuitesRegistry,
        CipherSuiteProtocolEnum.TLS: TlsCipherSuitesRegistry,
    }

    @classmethod
    def get_registry(cls, protocol: CipherSuiteProtocolEnum) -> Type[CipherSuitesRegistry[Any]]:
        return cls._REGISTRY_FOR_PROTOCOL[protocol]

    @classmethod
    def get_all_cipher_suites(cls, protocol: CipherSuiteProtocolEnum) -> Tuple[CipherSuiteEnum, ...]:
        return cls.get_registry(protocol).get_all_cipher_suites()
