from typing import List, Optional

from openssl_to_rfc.__version__ import __url__, __version__
from openssl_to_rfc.json.pydantic_utils import BaseModelWithOrmMode, BaseModelWithOrmModeAndForbid, StrFromEnumValueName


class CipherSuiteAsJson(BaseModelWithOrmMode):
    """A cipher suite, with its name in both naming conventions.

    Attributes:
        rfc_name: The cipher suite's RFC name, such as "TLS_RSA_WITH_AES_128_GCM_SHA256".
        openssl_name: The cipher suite's OpenSSL name, such as "AES128-GCM-SHA256".
        protocol: The protocol era the cipher suite belongs to: "TLS" or "SSL_2_0".
    """

    rfc_name: str
    openssl_name: str
    protocol: StrFromEnumValueName


class CipherSuiteLookupAsJson(BaseModelWithOrmModeAndForbid):
    """The result of translating one cipher suite name; cipher_suite is null if the name is not known."""

    name: str
    cipher_suite: Optional[CipherSuiteAsJson]


class CipherSuiteLookupOutputAsJson(BaseModelWithOrmModeAndForbid):
    """The "root" dictionary of the JSON output when using the --json command line option."""

    lookups: List[CipherSuiteLookupAsJson]
    all_cipher_suites: Optional[List[CipherSuiteAsJson]] = None

    openssl_to_rfc_url: str = __url__
    openssl_to_rfc_version: str = __version__
