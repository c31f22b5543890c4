import json

import pytest

from openssl_to_rfc import CipherSuiteLookupOutputAsJson
from openssl_to_rfc.__main__ import main


class TestMain:
    def test(self, capsys):
        # Given a command line to translate a known OpenSSL name
        command_line = ["ECDH-RSA-AES128-GCM-SHA256"]

        # When running the CLI, it succeeds
        main(command_line)

        # And the RFC name was printed to the console
        console_output = capsys.readouterr().out
        assert "TLS_ECDH_RSA_WITH_AES_128_GCM_SHA256" in console_output

    def test_rfc_name(self, capsys):
        main(["TLS_RSA_WITH_AES_128_GCM_SHA256"])
        assert "AES128-GCM-SHA256" in capsys.readouterr().out

    def test_unknown_name(self, capsys):
        # Given a command line with a name that is not known
        command_line = ["ECDH-RSA-AES128-GCM-SHA256", "NOT-A-REAL-CIPHER"]

        # When running the CLI, it exits with an error code
        with pytest.raises(SystemExit) as exc_info:
            main(command_line)
        assert exc_info.value.code == 1

        # And the known name was still translated
        console_output = capsys.readouterr().out
        assert "TLS_ECDH_RSA_WITH_AES_128_GCM_SHA256" in console_output
        assert "Unknown cipher suite" in console_output

    def test_sslv2(self, capsys):
        main(["--sslv2", "NULL-MD5", "DES-CBC3-MD5"])
        console_output = capsys.readouterr().out
        assert "SSL 2.0" in console_output
        assert "SSL_CK_DES_192_EDE3_CBC_WITH_MD5" in console_output

    def test_ssl2_name_in_tls(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["DES-CBC3-MD5"])
        assert exc_info.value.code == 1

    def test_list(self, capsys):
        main(["--list"])
        console_output = capsys.readouterr().out
        assert "TLS_RSA_WITH_NULL_MD5" in console_output
        assert "TLS_FALLBACK_SCSV" in console_output

    def test_invalid_command_line(self, capsys):
        # Given a command line with no names to translate
        # When running the CLI, it exits with an error code
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

        # And the error was printed
        assert "Command line error" in capsys.readouterr().out

    def test_json_in_console(self, capsys):
        # Given a command line to translate a name and return results as JSON in the console
        command_line = ["--json", "NULL-MD5"]

        # When running the CLI, it succeeds
        main(command_line)

        # And the JSON output was printed to the console
        json_output = capsys.readouterr().out
        assert json_output

        # And the JSON output has the expected format
        parsed_output = CipherSuiteLookupOutputAsJson.model_validate_json(json_output)
        assert parsed_output.lookups[0].name == "NULL-MD5"
        assert parsed_output.lookups[0].cipher_suite
        assert parsed_output.lookups[0].cipher_suite.rfc_name == "TLS_RSA_WITH_NULL_MD5"
        assert parsed_output.lookups[0].cipher_suite.protocol == "TLS"

    def test_json_out(self, tmp_path, capsys):
        # Given a command line to list SSL 2.0 cipher suites and save the results to a JSON file
        json_path = tmp_path / "results.json"
        command_line = ["--sslv2", "--list", "--json_out", str(json_path), "RC4-MD5"]

        # When running the CLI, it succeeds
        main(command_line)

        # And the JSON file was written
        json_output = json.loads(json_path.read_text())
        assert json_output["lookups"][0]["cipher_suite"]["rfc_name"] == "SSL_CK_RC4_128_WITH_MD5"
        assert len(json_output["all_cipher_suites"]) == 9

        # And the regular console output was also printed
        console_output = capsys.readouterr().out
        assert "SSL_CK_RC4_128_WITH_MD5" in console_output
        assert "Wrote JSON output to" in console_output
