"""Single source of truth for the tubefetch version string."""

__version__ = "0.3.0"
