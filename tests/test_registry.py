from enum import unique

import pytest

from openssl_to_rfc import CipherSuiteMappingError
from openssl_to_rfc.registry import CipherSuiteEnum, build_name_lookups


@unique
class _ExampleCipherSuiteEnum(CipherSuiteEnum):
    TLS_RSA_WITH_AES_128_CBC_SHA = "TLS_RSA_WITH_AES_128_CBC_SHA"
    TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA = "TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA"


@unique
class _OtherCipherSuiteEnum(CipherSuiteEnum):
    TLS_RSA_WITH_AES_128_CBC_SHA = "TLS_RSA_WITH_AES_128_CBC_SHA"


class TestBuildNameLookups:
    def test(self):
        # Given mappings with two OpenSSL names for one of the cipher suites
        openssl_name_to_cipher_suite = {
            "AES128-SHA": _ExampleCipherSuiteEnum.TLS_RSA_WITH_AES_128_CBC_SHA,
            "EDH-RSA-DES-CBC3-SHA": _ExampleCipherSuiteEnum.TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA,
            "DHE-RSA-DES-CBC3-SHA": _ExampleCipherSuiteEnum.TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA,
        }
        preferred_openssl_names = {_ExampleCipherSuiteEnum.TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA: "DHE-RSA-DES-CBC3-SHA"}

        # When building the lookup tables, it succeeds
        name_lookups = build_name_lookups(
            _ExampleCipherSuiteEnum, openssl_name_to_cipher_suite, preferred_openssl_names
        )

        # And the tables contain the expected names
        assert name_lookups.all_cipher_suites == tuple(_ExampleCipherSuiteEnum)
        assert name_lookups.openssl_name_to_cipher_suite == openssl_name_to_cipher_suite
        assert name_lookups.cipher_suite_to_openssl_name == {
            _ExampleCipherSuiteEnum.TLS_RSA_WITH_AES_128_CBC_SHA: "AES128-SHA",
            _ExampleCipherSuiteEnum.TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA: "DHE-RSA-DES-CBC3-SHA",
        }
        assert name_lookups.rfc_name_to_cipher_suite == {
            "TLS_RSA_WITH_AES_128_CBC_SHA": _ExampleCipherSuiteEnum.TLS_RSA_WITH_AES_128_CBC_SHA,
            "TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA": _ExampleCipherSuiteEnum.TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA,
        }

    def test_tables_are_copied(self):
        # Given mappings for all the cipher suites
        openssl_name_to_cipher_suite = {
            "AES128-SHA": _ExampleCipherSuiteEnum.TLS_RSA_WITH_AES_128_CBC_SHA,
            "DHE-RSA-DES-CBC3-SHA": _ExampleCipherSuiteEnum.TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA,
        }
        name_lookups = build_name_lookups(_ExampleCipherSuiteEnum, openssl_name_to_cipher_suite, {})

        # When the original mappings get modified afterwards
        openssl_name_to_cipher_suite["NEW-NAME"] = _ExampleCipherSuiteEnum.TLS_RSA_WITH_AES_128_CBC_SHA

        # Then the lookup tables are not affected
        assert "NEW-NAME" not in name_lookups.openssl_name_to_cipher_suite

    def test_cipher_suite_without_openssl_name(self):
        # Given mappings that are missing one of the cipher suites
        openssl_name_to_cipher_suite = {"AES128-SHA": _ExampleCipherSuiteEnum.TLS_RSA_WITH_AES_128_CBC_SHA}

        # When building the lookup tables, it fails
        with pytest.raises(CipherSuiteMappingError, match="has no OpenSSL name"):
            build_name_lookups(_ExampleCipherSuiteEnum, openssl_name_to_cipher_suite, {})

    def test_several_openssl_names_without_preferred_one(self):
        # Given mappings with two OpenSSL names for one of the cipher suites, but no preferred name
        openssl_name_to_cipher_suite = {
            "AES128-SHA": _ExampleCipherSuiteEnum.TLS_RSA_WITH_AES_128_CBC_SHA,
            "EDH-RSA-DES-CBC3-SHA": _ExampleCipherSuiteEnum.TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA,
            "DHE-RSA-DES-CBC3-SHA": _ExampleCipherSuiteEnum.TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA,
        }

        # When building the lookup tables, it fails
        with pytest.raises(CipherSuiteMappingError, match="no preferred one"):
            build_name_lookups(_ExampleCipherSuiteEnum, openssl_name_to_cipher_suite, {})

    def test_preferred_openssl_name_not_in_mappings(self):
        openssl_name_to_cipher_suite = {
            "AES128-SHA": _ExampleCipherSuiteEnum.TLS_RSA_WITH_AES_128_CBC_SHA,
            "DHE-RSA-DES-CBC3-SHA": _ExampleCipherSuiteEnum.TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA,
        }
        preferred_openssl_names = {_ExampleCipherSuiteEnum.TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA: "EDH-RSA-DES-CBC3-SHA"}

        with pytest.raises(CipherSuiteMappingError, match="is not one of its OpenSSL names"):
            build_name_lookups(_ExampleCipherSuiteEnum, openssl_name_to_cipher_suite, preferred_openssl_names)

    def test_cipher_suite_from_another_enum(self):
        # Given mappings that refer to a cipher suite of a different enumeration
        openssl_name_to_cipher_suite = {
            "AES128-SHA": _OtherCipherSuiteEnum.TLS_RSA_WITH_AES_128_CBC_SHA,
            "DHE-RSA-DES-CBC3-SHA": _ExampleCipherSuiteEnum.TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA,
        }

        # When building the lookup tables, it fails
        with pytest.raises(CipherSuiteMappingError, match="which is not a _ExampleCipherSuiteEnum"):
            build_name_lookups(_ExampleCipherSuiteEnum, openssl_name_to_cipher_suite, {})

    def test_preferred_name_for_cipher_suite_from_another_enum(self):
        openssl_name_to_cipher_suite = {
            "AES128-SHA": _ExampleCipherSuiteEnum.TLS_RSA_WITH_AES_128_CBC_SHA,
            "DHE-RSA-DES-CBC3-SHA": _ExampleCipherSuiteEnum.TLS_DHE_RSA_WITH_3DES_EDE_CBC_SHA,
        }
        preferred_openssl_names = {_OtherCipherSuiteEnum.TLS_RSA_WITH_AES_128_CBC_SHA: "AES128-SHA"}

        with pytest.raises(CipherSuiteMappingError, match="which is not a _ExampleCipherSuiteEnum"):
            build_name_lookups(_ExampleCipherSuiteEnum, openssl_name_to_cipher_suite, preferred_openssl_names)
