# flake8: noqa

# Cipher suite enumerations and the registries to translate their names
from openssl_to_rfc.registry import CipherSuiteEnum, CipherSuiteProtocolEnum, CipherSuitesRegistry
from openssl_to_rfc.tls import TlsCipherSuiteEnum, TlsCipherSuitesRegistry
from openssl_to_rfc.ssl2 import Sslv2CipherSuiteEnum, Sslv2CipherSuitesRegistry
from openssl_to_rfc.repository import CipherSuitesRepository

from openssl_to_rfc.errors import CipherSuiteMappingError

# JSON output
from openssl_to_rfc.json.json_output import (
    CipherSuiteAsJson,
    CipherSuiteLookupAsJson,
    CipherSuiteLookupOutputAsJson,
)

from openssl_to_rfc.__version__ import __version__
