class GedtreeError(Exception):
    """Base exception for gedtree failures."""


class ConfigFileError(GedtreeError):
    """Raised when the YAML configuration file cannot be used."""


class LayoutConfigError(GedtreeError, ValueError):
    """Raised when layout spacing, node size or depth settings are unusable."""
