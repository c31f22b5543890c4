from io import StringIO
from pathlib import Path

from openssl_to_rfc import (
    CipherSuiteProtocolEnum,
    Sslv2CipherSuitesRegistry,
    TlsCipherSuiteEnum,
    TlsCipherSuitesRegistry,
)
from openssl_to_rfc.cli.console_output import ConsoleOutputGenerator, look_up_cipher_suite


class TestLookUpCipherSuite:
    def test_openssl_name(self):
        lookup_result = look_up_cipher_suite(TlsCipherSuitesRegistry, "ECDH-RSA-AES128-GCM-SHA256")
        assert lookup_result.name == "ECDH-RSA-AES128-GCM-SHA256"
        assert lookup_result.cipher_suite == TlsCipherSuiteEnum.TLS_ECDH_RSA_WITH_AES_128_GCM_SHA256
        assert lookup_result.translated_name == "TLS_ECDH_RSA_WITH_AES_128_GCM_SHA256"

    def test_rfc_name(self):
        lookup_result = look_up_cipher_suite(TlsCipherSuitesRegistry, "TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA")
        assert lookup_result.cipher_suite == TlsCipherSuiteEnum.TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA
        assert lookup_result.translated_name == "DHE-RSA-DES-CBC3-SHA"

    def test_tls_1_3_name(self):
        # Given a name that is both the OpenSSL name and the RFC name
        lookup_result = look_up_cipher_suite(TlsCipherSuitesRegistry, "TLS_AES_256_GCM_SHA384")

        # Then it is translated to itself
        assert lookup_result.cipher_suite == TlsCipherSuiteEnum.TLS_AES_256_GCM_SHA384
        assert lookup_result.translated_name == "TLS_AES_256_GCM_SHA384"

    def test_unknown_name(self):
        lookup_result = look_up_cipher_suite(TlsCipherSuitesRegistry, "NOT-A-REAL-CIPHER")
        assert lookup_result.name == "NOT-A-REAL-CIPHER"
        assert lookup_result.cipher_suite is None
        assert lookup_result.translated_name is None

    def test_name_from_other_protocol(self):
        lookup_result = look_up_cipher_suite(Sslv2CipherSuitesRegistry, "ECDH-RSA-AES128-GCM-SHA256")
        assert lookup_result.cipher_suite is None


class TestConsoleOutputGenerator:
    def test_lookups_completed(self):
        # Given the results of looking up a known name and an unknown name
        lookup_results = [
            look_up_cipher_suite(TlsCipherSuitesRegistry, "ECDH-RSA-AES128-GCM-SHA256"),
            look_up_cipher_suite(TlsCipherSuitesRegistry, "NOT-A-REAL-CIPHER"),
        ]

        # When generating the console output for them, it succeeds
        with StringIO() as file_out:
            console_gen = ConsoleOutputGenerator(file_to=file_out)
            console_gen.lookups_completed(CipherSuiteProtocolEnum.TLS, lookup_results)
            final_output = file_out.getvalue()

        # And the output contains the expected names
        assert "TLS CIPHER SUITE NAMES" in final_output
        assert "ECDH-RSA-AES128-GCM-SHA256" in final_output
        assert "TLS_ECDH_RSA_WITH_AES_128_GCM_SHA256" in final_output
        assert "NOT-A-REAL-CIPHER" in final_output
        assert ConsoleOutputGenerator.UNKNOWN_CIPHER_SUITE_TXT in final_output

    def test_lookups_completed_with_no_names(self):
        with StringIO() as file_out:
            console_gen = ConsoleOutputGenerator(file_to=file_out)
            console_gen.lookups_completed(CipherSuiteProtocolEnum.TLS, [])
            final_output = file_out.getvalue()

        assert not final_output

    def test_all_cipher_suites_listed(self):
        # Given all the SSL 2.0 cipher suites
        all_cipher_suites = Sslv2CipherSuitesRegistry.get_all_cipher_suites()

        # When generating the console output for them, it succeeds
        with StringIO() as file_out:
            console_gen = ConsoleOutputGenerator(file_to=file_out)
            console_gen.all_cipher_suites_listed(CipherSuiteProtocolEnum.SSL_2_0, all_cipher_suites)
            final_output = file_out.getvalue()

        # And every cipher suite was listed with both names
        assert "ALL SSL 2.0 CIPHER SUITES (9)" in final_output
        for cipher_suite in all_cipher_suites:
            assert f"{cipher_suite.rfc_name:<52}{cipher_suite.openssl_name}" in final_output

    def test_json_output_written(self):
        with StringIO() as file_out:
            console_gen = ConsoleOutputGenerator(file_to=file_out)
            console_gen.json_output_written(Path("results.json"))
            final_output = file_out.getvalue()

        assert 'Wrote JSON output to "results.json"' in final_output
