import logging
from dataclasses import dataclass
from enum import Enum, unique
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Generic, List, Mapping, Optional, Tuple, Type, TypeVar

from openssl_to_rfc.errors import CipherSuiteMappingError


_logger = logging.getLogger(__name__)


@unique
class CipherSuiteProtocolEnum(Enum):
    """The protocol era of a cipher suite; each era has its own registry and its own namespace of OpenSSL names."""

    SSL_2_0 = "SSL_2_0"
    TLS = "TLS"


class CipherSuiteEnum(Enum):
    """Base class for the enumerations of cipher suites.

    The value of each member is the cipher suite's RFC name. It is written out for every member instead of being
    derived from the member's name, as some historical RFC names do not follow the usual TLS_ convention.
    """

    @property
    def rfc_name(self) -> str:
        return self.value

    @property
    def openssl_name(self) -> str:
        # Implemented by each enumeration, using its registry's tables
        raise NotImplementedError()

    @property
    def protocol(self) -> CipherSuiteProtocolEnum:
        raise NotImplementedError()

    def __str__(self) -> str:
        return self.value


_CipherSuiteT = TypeVar("_CipherSuiteT", bound=CipherSuiteEnum)


@dataclass(frozen=True)
class CipherSuiteNameLookups(Generic[_CipherSuiteT]):
    """The read-only lookup tables of a registry; use build_name_lookups() to create them."""

    cipher_suite_cls: Type[_CipherSuiteT]
    all_cipher_suites: Tuple[_CipherSuiteT, ...]
    openssl_name_to_cipher_suite: Mapping[str, _CipherSuiteT]
    cipher_suite_to_openssl_name: Mapping[_CipherSuiteT, str]
    rfc_name_to_cipher_suite: Mapping[str, _CipherSuiteT]


def build_name_lookups(
    cipher_suite_cls: Type[_CipherSuiteT],
    openssl_name_to_cipher_suite: Dict[str, _CipherSuiteT],
    preferred_openssl_names: Dict[_CipherSuiteT, str],
) -> CipherSuiteNameLookups[_CipherSuiteT]:
    """Validate the hand-written name mappings of a cipher suite enumeration and turn them into read-only tables.

    Args:
        cipher_suite_cls: The enumeration of all the cipher suites of the registry.
        openssl_name_to_cipher_suite: Every OpenSSL name that should be recognized, and the cipher suite it refers to.
            A cipher suite can have more than one OpenSSL name when OpenSSL renamed it at some point.
        preferred_openssl_names: For the cipher suites that have more than one OpenSSL name, the name to return when
            translating the cipher suite to its OpenSSL name.

    Raises:
        CipherSuiteMappingError: If a cipher suite has no OpenSSL name, if it has several OpenSSL names but no
            preferred one, or if the mappings refer to a cipher suite from another enumeration.
    """
    openssl_names_per_cipher_suite: Dict[_CipherSuiteT, List[str]] = {}
    for openssl_name, cipher_suite in openssl_name_to_cipher_suite.items():
        if not isinstance(cipher_suite, cipher_suite_cls):
            raise CipherSuiteMappingError(
                f'OpenSSL name "{openssl_name}" is mapped to {cipher_suite!r}, which is not a'
                f" {cipher_suite_cls.__name__}"
            )
        openssl_names_per_cipher_suite.setdefault(cipher_suite, []).append(openssl_name)

    for cipher_suite in preferred_openssl_names:
        if not isinstance(cipher_suite, cipher_suite_cls):
            raise CipherSuiteMappingError(
                f"Preferred OpenSSL name given for {cipher_suite!r}, which is not a {cipher_suite_cls.__name__}"
            )

    cipher_suite_to_openssl_name: Dict[_CipherSuiteT, str] = {}
    for cipher_suite in cipher_suite_cls:
        openssl_names = openssl_names_per_cipher_suite.get(cipher_suite)
        if not openssl_names:
            raise CipherSuiteMappingError(f"{cipher_suite.rfc_name} has no OpenSSL name")

        preferred_openssl_name = preferred_openssl_names.get(cipher_suite)
        if preferred_openssl_name is not None:
            if preferred_openssl_name not in openssl_names:
                raise CipherSuiteMappingError(
                    f'Preferred OpenSSL name "{preferred_openssl_name}" for {cipher_suite.rfc_name} is not one of its'
                    f" OpenSSL names: {openssl_names}"
                )
            cipher_suite_to_openssl_name[cipher_suite] = preferred_openssl_name
        elif len(openssl_names) > 1:
            raise CipherSuiteMappingError(
                f"{cipher_suite.rfc_name} has several OpenSSL names but no preferred one: {openssl_names}"
            )
        else:
            cipher_suite_to_openssl_name[cipher_suite] = openssl_names[0]

    all_cipher_suites = tuple(cipher_suite_cls)
    _logger.debug(
        f"Loaded {len(all_cipher_suites)} cipher suites from {cipher_suite_cls.__name__} with"
        f" {len(openssl_name_to_cipher_suite)} OpenSSL names"
    )
    return CipherSuiteNameLookups(
        cipher_suite_cls=cipher_suite_cls,
        all_cipher_suites=all_cipher_suites,
        openssl_name_to_cipher_suite=MappingProxyType(dict(openssl_name_to_cipher_suite)),
        cipher_suite_to_openssl_name=MappingProxyType(cipher_suite_to_openssl_name),
        rfc_name_to_cipher_suite=MappingProxyType(
            {cipher_suite.rfc_name: cipher_suite for cipher_suite in all_cipher_suites}
        ),
    )


class CipherSuitesRegistry(Generic[_CipherSuiteT]):
    """Translate the cipher suites of one protocol era between their OpenSSL names and their RFC names.

    Subclasses only bind a protocol and the lookup tables of their enumeration. Names that are not known are reported
    by returning None; the lookups are exact and case-sensitive, and never fall back to a similar name.
    """

    protocol: ClassVar[CipherSuiteProtocolEnum]
    _name_lookups: ClassVar[CipherSuiteNameLookups[Any]]

    @classmethod
    def from_openssl_name(cls, openssl_name: str) -> Optional[_CipherSuiteT]:
        """Return the cipher suite with the supplied OpenSSL name (such as "ECDH-RSA-AES128-GCM-SHA256"), or None."""
        if not isinstance(openssl_name, str):
            return None
        return cls._name_lookups.openssl_name_to_cipher_suite.get(openssl_name)

    @classmethod
    def to_openssl_name(cls, cipher_suite: _CipherSuiteT) -> str:
        try:
            return cls._name_lookups.cipher_suite_to_openssl_name[cipher_suite]
        except KeyError:
            raise TypeError(f"{cipher_suite!r} is not a cipher suite of {cls.__name__}") from None

    @classmethod
    def from_rfc_name(cls, rfc_name: str) -> Optional[_CipherSuiteT]:
        """Return the cipher suite with the supplied RFC name (such as "TLS_RSA_WITH_NULL_MD5"), or None."""
        if not isinstance(rfc_name, str):
            return None
        return cls._name_lookups.rfc_name_to_cipher_suite.get(rfc_name)

    @classmethod
    def to_rfc_name(cls, cipher_suite: _CipherSuiteT) -> str:
        if not isinstance(cipher_suite, cls._name_lookups.cipher_suite_cls):
            raise TypeError(f"{cipher_suite!r} is not a cipher suite of {cls.__name__}")
        return cipher_suite.rfc_name

    @classmethod
    def get_all_cipher_suites(cls) -> Tuple[_CipherSuiteT, ...]:
        """Return all the cipher suites of the registry, in the order in which they are declared."""
        return cls._name_lookups.all_cipher_suites
