class CipherSuiteMappingError(Exception):
    """Raised when the cipher suite name mappings of a registry are incomplete or ambiguous.

    The mappings are validated once, when the registry's module gets imported; this error means the hand-written
    tables need to be fixed.
    """
