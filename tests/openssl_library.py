import ctypes
import ctypes.util
import logging
from typing import Any, List, Optional


_logger = logging.getLogger(__name__)


class OpenSslCipherNameOracle:
    """Call OPENSSL_cipher_name() from the OpenSSL library available on the system, to check the name mappings.

    OPENSSL_cipher_name() was added in OpenSSL 1.1.1; it returns "(NONE)" for RFC names that the library does not
    know about.
    """

    _UNKNOWN_CIPHER_NAME = "(NONE)"

    def __init__(self, openssl_cipher_name_func: Any) -> None:
        self._openssl_cipher_name_func = openssl_cipher_name_func

    @classmethod
    def load(cls) -> Optional["OpenSslCipherNameOracle"]:
        """Return None if no OpenSSL library exposing OPENSSL_cipher_name() could be found."""
        for library_path in cls._get_candidate_library_paths():
            try:
                library = ctypes.CDLL(library_path)
                openssl_cipher_name_func = library.OPENSSL_cipher_name
            except (OSError, AttributeError) as e:
                _logger.debug(f"Could not use OpenSSL library {library_path}: {e}")
                continue

            openssl_cipher_name_func.argtypes = [ctypes.c_char_p]
            openssl_cipher_name_func.restype = ctypes.c_char_p
            return cls(openssl_cipher_name_func)

        return None

    @staticmethod
    def _get_candidate_library_paths() -> List[str]:
        candidate_paths: List[str] = []

        # First try the libssl that Python's ssl module was linked against
        try:
            import _ssl

            ssl_module_path = getattr(_ssl, "__file__", None)
            if ssl_module_path:
                candidate_paths.append(ssl_module_path)
        except ImportError:
            pass

        system_libssl_path = ctypes.util.find_library("ssl")
        if system_libssl_path:
            candidate_paths.append(system_libssl_path)
        return candidate_paths

    def get_openssl_name(self, rfc_name: str) -> Optional[str]:
        openssl_name = self._openssl_cipher_name_func(rfc_name.encode("ascii"))
        if openssl_name is None:
            return None

        decoded_openssl_name = openssl_name.decode("ascii")
        if decoded_openssl_name == self._UNKNOWN_CIPHER_NAME:
            return None
        return decoded_openssl_name
