"""
Ionic Bundle Errors

The encoders themselves never raise: they work on descriptors the compiler
has already validated. Errors only exist at the edges (descriptor loading,
strict mode resolution and configuration).
"""

# Error codes
E_DESCRIPTOR = "E_DESCRIPTOR"
E_UNKNOWN_MODE = "E_UNKNOWN_MODE"
E_CONFIG = "E_CONFIG"


class FormatterError(Exception):
    """Base class for ionic_bundle errors"""

    code = "E_FORMATTER"

    def __init__(self, message: str):
        super().__init__(f"{self.code}: {message}")
        self.detail = message


class DescriptorError(FormatterError):
    """A JSON descriptor is missing a required key or has the wrong shape"""
    code = E_DESCRIPTOR


class UnknownModeError(FormatterError):
    """Mode name has no numeric code and strict resolution was requested"""
    code = E_UNKNOWN_MODE


class ConfigError(FormatterError):
    """Formatter configuration could not be loaded"""
    code = E_CONFIG
