__title__ = "openssl_to_rfc"
__description__ = "Translate TLS and SSL 2.0 cipher suite names between their OpenSSL and RFC spellings."
__url__ = "https://github.com/openssl-to-rfc/openssl-to-rfc"
__version__ = "1.0.0"
__author__ = "The openssl-to-rfc authors"
__author_email__ = "openssl-to-rfc@users.noreply.github.com"
__license__ = "AGPLv3"
