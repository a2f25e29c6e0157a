"""Manifest-specific error types."""


class ManifestError(Exception):
    """Raised when a package manifest cannot be loaded or validated."""
