from pathlib import Path

import pytest

from openssl_to_rfc import CipherSuiteProtocolEnum, __version__
from openssl_to_rfc.cli.command_line_parser import CommandLineParser, CommandLineParsingError


class TestCommandLineParser:
    def test(self):
        # Given a command line with two names to translate
        command_line = ["ECDH-RSA-AES128-GCM-SHA256", "TLS_AES_128_GCM_SHA256"]

        # When parsing it, it succeeds
        parsed_command_line = CommandLineParser(__version__).parse_command_line(command_line)

        # And the expected settings were returned
        assert parsed_command_line.cipher_suite_names == command_line
        assert parsed_command_line.protocol == CipherSuiteProtocolEnum.TLS
        assert not parsed_command_line.should_list_all_cipher_suites
        assert not parsed_command_line.json_path_out
        assert not parsed_command_line.should_print_json_to_console

    def test_sslv2(self):
        parsed_command_line = CommandLineParser(__version__).parse_command_line(["--sslv2", "NULL-MD5"])
        assert parsed_command_line.protocol == CipherSuiteProtocolEnum.SSL_2_0
        assert parsed_command_line.cipher_suite_names == ["NULL-MD5"]

    def test_list_without_names(self):
        parsed_command_line = CommandLineParser(__version__).parse_command_line(["--list"])
        assert parsed_command_line.should_list_all_cipher_suites
        assert parsed_command_line.cipher_suite_names == []

    def test_json_out(self):
        parsed_command_line = CommandLineParser(__version__).parse_command_line(
            ["--json_out", "results.json", "NULL-MD5"]
        )
        assert parsed_command_line.json_path_out == Path("results.json").absolute()
        assert not parsed_command_line.should_print_json_to_console

    def test_json(self):
        parsed_command_line = CommandLineParser(__version__).parse_command_line(["--json", "NULL-MD5"])
        assert parsed_command_line.should_print_json_to_console
        assert not parsed_command_line.json_path_out

    def test_no_names(self):
        # Given a command line with nothing to do
        # When parsing it, it fails
        with pytest.raises(CommandLineParsingError, match="No cipher suite names"):
            CommandLineParser(__version__).parse_command_line([])

    def test_json_and_json_out(self):
        with pytest.raises(CommandLineParsingError, match="at the same time"):
            CommandLineParser(__version__).parse_command_line(["--json", "--json_out", "results.json", "NULL-MD5"])

    def test_error_msg(self):
        error = CommandLineParsingError("No cipher suite names to translate.")
        assert error.get_error_msg() == "  Command line error: No cipher suite names to translate.\n  Use -h for help."

    def test_unknown_option(self):
        # Invalid options are handled by argparse itself
        with pytest.raises(SystemExit):
            CommandLineParser(__version__).parse_command_line(["--not-an-option", "NULL-MD5"])
