"""Parse, normalise, compare and deduplicate airline flight designators."""

__version__ = "0.1.0"
__all__ = ["parsing", "regex_parsing", "dedup", "compare"]