"""School name canonicalization."""

from .canonical import (
    SchoolCanonicalizer,
    canonicalize,
    default_canonicalizer,
    is_placeholder,
    same_school,
    split_colleges,
    tokenize,
)

__all__ = [
    "SchoolCanonicalizer",
    "canonicalize",
    "default_canonicalizer",
    "is_placeholder",
    "same_school",
    "split_colleges",
    "tokenize",
]
