"""CivicOS civic engagement API."""

__version__ = "1.0.0"
