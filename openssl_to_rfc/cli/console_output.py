from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence, TextIO, Type

from openssl_to_rfc.registry import CipherSuiteEnum, CipherSuiteProtocolEnum, CipherSuitesRegistry


@dataclass(frozen=True)
class CipherSuiteLookupResult:
    """The result of translating one of the names supplied on the command line.

    Attributes:
        name: The name as supplied on the command line.
        cipher_suite: The cipher suite with that name, or None if the name is not known.
        translated_name: The cipher suite's name in the other naming convention, or None if the name is not known.
    """

    name: str
    cipher_suite: Optional[CipherSuiteEnum]
    translated_name: Optional[str]


def look_up_cipher_suite(registry: Type[CipherSuitesRegistry[Any]], name: str) -> CipherSuiteLookupResult:
    """Look up the supplied name as an OpenSSL name, and then as an RFC name."""
    cipher_suite = registry.from_openssl_name(name)
    if cipher_suite is not None:
        return CipherSuiteLookupResult(name=name, cipher_suite=cipher_suite, translated_name=cipher_suite.rfc_name)

    cipher_suite = registry.from_rfc_name(name)
    if cipher_suite is not None:
        return CipherSuiteLookupResult(
            name=name, cipher_suite=cipher_suite, translated_name=registry.to_openssl_name(cipher_suite)
        )

    return CipherSuiteLookupResult(name=name, cipher_suite=None, translated_name=None)


_PROTOCOL_DISPLAY_NAMES = {
    CipherSuiteProtocolEnum.SSL_2_0: "SSL 2.0",
    CipherSuiteProtocolEnum.TLS: "TLS",
}


class ConsoleOutputGenerator:

    LOOKUP_LINE_FORMAT = "     {name:<52}->  {translated_name}\n"
    CIPHER_SUITE_LINE_FORMAT = "     {rfc_name:<52}{openssl_name}\n"
    UNKNOWN_CIPHER_SUITE_TXT = "ERROR - Unknown cipher suite"

    def __init__(self, file_to: TextIO) -> None:
        self._file_to = file_to

    @classmethod
    def _format_title(cls, title: str) -> str:
        return f" {title.upper()}\n {'-' * len(title)}\n"

    def lookups_completed(
        self, protocol: CipherSuiteProtocolEnum, lookup_results: Sequence[CipherSuiteLookupResult]
    ) -> None:
        if not lookup_results:
            return

        self._file_to.write("\n")
        self._file_to.write(self._format_title(f"{_PROTOCOL_DISPLAY_NAMES[protocol]} Cipher Suite Names"))
        self._file_to.write("\n")
        for lookup_result in lookup_results:
            translated_name = lookup_result.translated_name
            self._file_to.write(
                self.LOOKUP_LINE_FORMAT.format(
                    name=lookup_result.name,
                    translated_name=translated_name if translated_name else self.UNKNOWN_CIPHER_SUITE_TXT,
                )
            )

    def all_cipher_suites_listed(
        self, protocol: CipherSuiteProtocolEnum, cipher_suites: Sequence[CipherSuiteEnum]
    ) -> None:
        self._file_to.write("\n")
        self._file_to.write(
            self._format_title(f"All {_PROTOCOL_DISPLAY_NAMES[protocol]} Cipher Suites ({len(cipher_suites)})")
        )
        self._file_to.write("\n")
        self._file_to.write(self.CIPHER_SUITE_LINE_FORMAT.format(rfc_name="RFC Name", openssl_name="OpenSSL Name"))
        for cipher_suite in cipher_suites:
            self._file_to.write(
                self.CIPHER_SUITE_LINE_FORMAT.format(
                    rfc_name=cipher_suite.rfc_name, openssl_name=cipher_suite.openssl_name
                )
            )

    def json_output_written(self, json_path_out: Path) -> None:
        self._file_to.write(f'\n     Wrote JSON output to "{json_path_out}".\n')
