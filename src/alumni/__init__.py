"""Alumni fantasy core: school canonicalization, identity joins, scoring and week alignment."""

__version__ = "0.1.0"
