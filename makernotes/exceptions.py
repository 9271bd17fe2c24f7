# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for makernotes

Missing or malformed tag values are reported as ``None`` by the accessors
and descriptors. The exceptions below cover programming errors and bad
input handed to the outer layers (registry, configuration, CLI).

Copyright 2025 DNAi inc.
"""


class MakernoteError(Exception):
    """
    Base exception for all makernotes errors.

    All makernotes exceptions inherit from this class, allowing
    catch-all error handling for any makernotes-related errors.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class TagValueError(MakernoteError):
    """
    Raised by the strict accessors (``require_int``, ``require_float``).

    This exception is raised when:
    - The tag has not been set in the directory
    - The stored value cannot be converted to the requested type
    """
    pass


class UnknownVendorError(MakernoteError):
    """
    Raised when no directory type is registered for a vendor identifier.
    """
    pass


class InvalidTagError(MakernoteError):
    """
    Raised when a tag id or tag assignment cannot be parsed.

    This exception is raised when:
    - Tag id is neither decimal nor hexadecimal
    - Tag id is negative
    - Assignment is missing the ``=`` separator
    - A JSON tag value uses an unsupported encoding
    """
    pass


class ConfigError(MakernoteError):
    """
    Raised when a configuration file cannot be read or holds invalid options.
    """
    pass
