"""Populate Solid pods with LDBC or synthetic social-network data.

The package builds a correlation table from LDBC person files, registers one
pod per person and merges names and "knows" edges into each WebID profile.
"""

__version__ = "0.1.0"

from .correlation import CorrelationEntry, CorrelationTable, build_correlation_table
from .errors import PopulateError, ProfileError, RegistrationError, SourceDirectoryError
from .settings import PopulateSettings

__all__ = [
    "CorrelationEntry",
    "CorrelationTable",
    "PopulateError",
    "PopulateSettings",
    "ProfileError",
    "RegistrationError",
    "SourceDirectoryError",
    "build_correlation_table",
]
