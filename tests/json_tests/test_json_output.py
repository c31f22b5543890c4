import json

from openssl_to_rfc import (
    CipherSuiteAsJson,
    CipherSuiteLookupAsJson,
    CipherSuiteLookupOutputAsJson,
    Sslv2CipherSuiteEnum,
    TlsCipherSuiteEnum,
    TlsCipherSuitesRegistry,
    __version__,
)
from openssl_to_rfc.cli.console_output import look_up_cipher_suite


class TestCipherSuiteAsJson:
    def test(self):
        # Given a TLS cipher suite
        cipher_suite = TlsCipherSuiteEnum.TLS_ECDH_RSA_WITH_AES_128_GCM_SHA256

        # When converting it to JSON, it succeeds
        cipher_suite_as_json = CipherSuiteAsJson.model_validate(cipher_suite)

        # And the expected fields were populated
        assert cipher_suite_as_json.rfc_name == "TLS_ECDH_RSA_WITH_AES_128_GCM_SHA256"
        assert cipher_suite_as_json.openssl_name == "ECDH-RSA-AES128-GCM-SHA256"
        assert cipher_suite_as_json.protocol == "TLS"

    def test_ssl2_cipher_suite(self):
        cipher_suite_as_json = CipherSuiteAsJson.model_validate(Sslv2CipherSuiteEnum.TLS_RSA_WITH_NULL_MD5)
        assert cipher_suite_as_json.rfc_name == "TLS_RSA_WITH_NULL_MD5"
        assert cipher_suite_as_json.openssl_name == "NULL-MD5"
        assert cipher_suite_as_json.protocol == "SSL_2_0"


class TestCipherSuiteLookupOutputAsJson:
    def test(self):
        # Given the results of looking up a known name and an unknown name
        lookup_results = [
            look_up_cipher_suite(TlsCipherSuitesRegistry, "ECDH-RSA-AES128-GCM-SHA256"),
            look_up_cipher_suite(TlsCipherSuitesRegistry, "NOT-A-REAL-CIPHER"),
        ]

        # When converting them to JSON, it succeeds
        json_output = CipherSuiteLookupOutputAsJson(
            lookups=[CipherSuiteLookupAsJson.model_validate(lookup_result) for lookup_result in lookup_results],
        )
        json_output_as_str = json_output.model_dump_json()
        assert json_output_as_str

        # And the unknown name has no cipher suite
        json_output_as_dict = json.loads(json_output_as_str)
        assert json_output_as_dict["lookups"][0]["name"] == "ECDH-RSA-AES128-GCM-SHA256"
        assert json_output_as_dict["lookups"][0]["cipher_suite"]["rfc_name"] == "TLS_ECDH_RSA_WITH_AES_128_GCM_SHA256"
        assert json_output_as_dict["lookups"][1]["name"] == "NOT-A-REAL-CIPHER"
        assert json_output_as_dict["lookups"][1]["cipher_suite"] is None
        assert json_output_as_dict["all_cipher_suites"] is None
        assert json_output_as_dict["openssl_to_rfc_version"] == __version__

        # And it can be parsed again
        parsed_output = CipherSuiteLookupOutputAsJson.model_validate_json(json_output_as_str)
        assert parsed_output.model_dump() == json_output.model_dump()

    def test_all_cipher_suites(self):
        # Given all the TLS cipher suites
        all_cipher_suites = TlsCipherSuitesRegistry.get_all_cipher_suites()

        # When converting them to JSON, it succeeds
        json_output = CipherSuiteLookupOutputAsJson(
            lookups=[],
            all_cipher_suites=[CipherSuiteAsJson.model_validate(cipher_suite) for cipher_suite in all_cipher_suites],
        )
        json_output_as_str = json_output.model_dump_json()

        # And the cipher suites are listed in the same order
        parsed_output = CipherSuiteLookupOutputAsJson.model_validate_json(json_output_as_str)
        assert parsed_output.all_cipher_suites
        assert [cipher_suite.rfc_name for cipher_suite in parsed_output.all_cipher_suites] == [
            cipher_suite.rfc_name for cipher_suite in all_cipher_suites
        ]
