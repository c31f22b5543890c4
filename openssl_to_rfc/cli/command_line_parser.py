from argparse import ArgumentParser
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from openssl_to_rfc.registry import CipherSuiteProtocolEnum


class CommandLineParsingError(Exception):

    PARSING_ERROR_FORMAT = "  Command line error: {0}\n  Use -h for help."

    def get_error_msg(self) -> str:
        return self.PARSING_ERROR_FORMAT.format(self)


@dataclass(frozen=True)
class ParsedCommandLine:
    """The result of parsing a command line used to launch openssl-to-rfc."""

    # The OpenSSL or RFC names to translate, in the order they were supplied
    cipher_suite_names: List[str]
    protocol: CipherSuiteProtocolEnum
    should_list_all_cipher_suites: bool

    # Output settings
    json_path_out: Optional[Path]
    should_print_json_to_console: bool


class CommandLineParser:
    def __init__(self, openssl_to_rfc_version: str) -> None:
        """Generate openssl-to-rfc's command line parser."""
        self._parser = ArgumentParser(
            prog="openssl-to-rfc",
            description=f"openssl-to-rfc version {openssl_to_rfc_version}: translate cipher suite names between the"
            " OpenSSL and the RFC naming conventions.",
        )
        self._parser.add_argument(
            "--sslv2",
            action="store_true",
            dest="sslv2",
            help="Translate SSL 2.0 cipher suites instead of TLS cipher suites. Some OpenSSL names, such as NULL-MD5,"
            " refer to a different cipher suite in SSL 2.0 and in TLS.",
        )
        self._parser.add_argument(
            "--list",
            action="store_true",
            dest="list",
            help="List all the cipher suites that can be translated, with their RFC and OpenSSL names.",
        )

        output_group = self._parser.add_argument_group("JSON output")
        output_group.add_argument(
            "--json_out",
            action="store",
            dest="json_out",
            help="Write the results as a JSON document to the file JSON_OUT.",
        )
        output_group.add_argument(
            "--json",
            action="store_true",
            dest="json",
            help="Print the results as a JSON document to the console, instead of the regular console output.",
        )

        self._parser.add_argument(
            dest="names",
            default=[],
            nargs="*",
            help="The OpenSSL names (such as ECDH-RSA-AES128-GCM-SHA256) or RFC names (such as"
            " TLS_ECDH_RSA_WITH_AES_128_GCM_SHA256) of the cipher suites to translate.",
        )

    def parse_command_line(self, args: Optional[List[str]] = None) -> ParsedCommandLine:
        """Parses the command line used to launch openssl-to-rfc; sys.argv is used if args is None."""
        args_command_list = self._parser.parse_args(args)

        if not args_command_list.names and not args_command_list.list:
            raise CommandLineParsingError("No cipher suite names to translate.")

        if args_command_list.json and args_command_list.json_out:
            raise CommandLineParsingError("Cannot use --json and --json_out at the same time.")

        json_path_out: Optional[Path] = None
        if args_command_list.json_out:
            json_path_out = Path(args_command_list.json_out).absolute()

        return ParsedCommandLine(
            cipher_suite_names=list(args_command_list.names),
            protocol=CipherSuiteProtocolEnum.SSL_2_0 if args_command_list.sslv2 else CipherSuiteProtocolEnum.TLS,
            should_list_all_cipher_suites=args_command_list.list,
            json_path_out=json_path_out,
            should_print_json_to_console=args_command_list.json,
        )
