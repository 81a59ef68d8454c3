"""Collapse free-text college names into one canonical display name.

The pipeline, applied identically to live input and to every curated alias:

1. Decode entities, strip diacritics, drop apostrophes and parenthetical
   asides (keeping state qualifiers such as ``(OH)``), expand ``&`` and split
   on non-alphanumeric runs.
2. Collapse runs of single letters (``U C L A`` -> ``ucla``).
3. Drop institutional stop words and mascot words, never emptying the name.
4. Normalize irregular tokens; a trailing ``st`` reads as "state".
5. Look the token key up in the override table, then keep stripping trailing
   venue tokens (cities, city pairs, state codes) and retry after each strip.
6. Fall back to title-casing the stripped tokens.

Ahead of step 5 the literal spelling (steps 1 and 2, stop and mascot words
kept) is checked against the curated names, so schools whose names differ only
in stop words ("Boston College" and "Boston University") stay apart.
"""

from __future__ import annotations

import html
import logging
import re
import unicodedata
from functools import lru_cache
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .aliases import (
    IRREGULAR_TOKENS,
    LOCATION_NAMES,
    MASCOT_WORDS,
    PLACEHOLDER_COLLEGES,
    SCHOOL_ALIAS_GROUPS,
    STATE_CODES,
    STATE_QUALIFIERS,
    STOP_WORDS,
    TOKEN_DISPLAY,
)


logger = logging.getLogger(__name__)

_PARENTHETICAL = re.compile(r"\(([^()]*)\)")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_APOSTROPHES = re.compile(r"['‘’`]")
_PERIOD_TOKENS = {"st", "ft", "mt"}


def _strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _keep_qualifier(match: re.Match) -> str:
    inner = re.sub(r"[^a-z]", "", match.group(1).lower())
    if inner in STATE_QUALIFIERS:
        return f" {inner} "
    return " "


def _raw_tokens(raw: str) -> List[str]:
    text = _strip_diacritics(html.unescape(raw))
    text = _APOSTROPHES.sub("", text)
    text = _PARENTHETICAL.sub(_keep_qualifier, text)
    text = text.replace("&", " and ").lower()
    return [token for token in _NON_ALNUM.split(text) if token]


def _collapse_letters(tokens: Sequence[str]) -> List[str]:
    collapsed: List[str] = []
    run: List[str] = []
    for token in tokens:
        if len(token) == 1 and token.isalpha():
            run.append(token)
            continue
        if run:
            collapsed.append("".join(run))
            run = []
        collapsed.append(token)
    if run:
        collapsed.append("".join(run))
    return collapsed


def _drop_noise(tokens: Sequence[str]) -> List[str]:
    kept = [token for token in tokens if token not in STOP_WORDS and token not in MASCOT_WORDS]
    if not kept:
        return list(tokens)
    return _collapse_letters(kept)


def _regularize(tokens: Sequence[str]) -> List[str]:
    mapped = [IRREGULAR_TOKENS.get(token, token) for token in tokens]
    if len(mapped) > 1 and mapped[-1] == "st":
        mapped[-1] = "state"
    return mapped


def tokenize(raw: str) -> List[str]:
    """Run pipeline steps 1-4 and return the resulting tokens."""

    return _regularize(_drop_noise(_collapse_letters(_raw_tokens(raw))))


def literal_key(raw: str) -> str:
    """Spelling key that keeps stop and mascot words."""

    return " ".join(_collapse_letters(_raw_tokens(raw)))


def _location_tables() -> Tuple[frozenset, frozenset]:
    singles = set(STATE_CODES)
    pairs = set()
    for name in LOCATION_NAMES:
        tokens = tokenize(name)
        if len(tokens) == 1:
            singles.add(tokens[0])
        elif len(tokens) == 2:
            pairs.add((tokens[0], tokens[1]))
    return frozenset(singles), frozenset(pairs)


_LOCATION_SINGLES, _LOCATION_PAIRS = _location_tables()


def _strip_location(tokens: Sequence[str]) -> Optional[List[str]]:
    """Remove one trailing venue token or pair; ``None`` when nothing strips."""

    if len(tokens) <= 1:
        return None
    if len(tokens) > 2 and (tokens[-2], tokens[-1]) in _LOCATION_PAIRS:
        return list(tokens[:-2])
    if tokens[-1] in _LOCATION_SINGLES:
        return list(tokens[:-1])
    return None


def _display_token(token: str) -> str:
    if token in TOKEN_DISPLAY:
        return TOKEN_DISPLAY[token]
    if token in _PERIOD_TOKENS:
        return token.capitalize() + "."
    if token.startswith("mc") and len(token) > 2:
        return "Mc" + token[2].upper() + token[3:]
    if len(token) <= 2:
        return token.upper()
    return token.capitalize()


def title_case(tokens: Iterable[str]) -> str:
    return " ".join(_display_token(token) for token in tokens)


def is_placeholder(value: object) -> bool:
    """True for empty or "Unknown"-style college values."""

    if value is None:
        return True
    return " ".join(str(value).split()).lower() in PLACEHOLDER_COLLEGES


class SchoolCanonicalizer:
    """Map any school string to its canonical display name.

    ``extra_aliases`` (variant -> display) take precedence over the curated
    groups. The override tables are fixed at construction, so results are
    memoized per instance in a bounded LRU cache.
    """

    def __init__(self, extra_aliases: Optional[Mapping[str, str]] = None, cache_size: int = 8192):
        extra_aliases = extra_aliases or {}
        self._literals = self._build_table(extra_aliases, literal_key, displays_first=True)
        self._overrides = self._build_table(extra_aliases, lambda raw: " ".join(tokenize(raw)))
        self._cached = lru_cache(maxsize=cache_size)(self._canonicalize)

    @staticmethod
    def _build_table(
        extra_aliases: Mapping[str, str],
        key_of: Callable[[str], str],
        *,
        displays_first: bool = False,
    ) -> Dict[str, str]:
        table: Dict[str, str] = {}

        def register(variant: str, display: str) -> None:
            key = key_of(variant)
            if not key:
                return
            existing = table.setdefault(key, display)
            if existing != display:
                logger.debug("Alias %r already maps to %s; ignoring %s", variant, existing, display)

        displays = list(extra_aliases.values()) + list(SCHOOL_ALIAS_GROUPS)
        for variant, display in extra_aliases.items():
            register(variant, display)
        # Canonical names must resolve to themselves.
        if displays_first:
            for display in displays:
                register(display, display)
        for display, variants in SCHOOL_ALIAS_GROUPS.items():
            for variant in variants:
                register(variant, display)
        for display in displays:
            register(display, display)
        return table

    @property
    def overrides(self) -> Mapping[str, str]:
        return dict(self._overrides)

    def canonicalize(self, raw: object) -> str:
        if raw is None:
            return ""
        text = " ".join(str(raw).split())
        if not text:
            return ""
        return self._cached(text)

    def cache_info(self):
        return self._cached.cache_info()

    def _canonicalize(self, text: str) -> str:
        hit = self._literals.get(literal_key(text))
        if hit is not None:
            return hit
        tokens = tokenize(text)
        if not tokens:
            return ""
        current: Optional[List[str]] = tokens
        last = tokens
        while current is not None:
            hit = self._overrides.get(" ".join(current))
            if hit is not None:
                return hit
            last = current
            current = _strip_location(current)
        return title_case(last)

    def same_school(self, left: object, right: object) -> bool:
        canonical = self.canonicalize(left)
        return bool(canonical) and canonical == self.canonicalize(right)

    def split_colleges(self, raw: object) -> Tuple[str, ...]:
        """Split a ``;``-delimited college field into distinct canonical names."""

        if raw is None:
            return ()
        parts: Iterable[object]
        if isinstance(raw, (list, tuple, set, frozenset)):
            parts = [piece for item in raw for piece in str(item).split(";")]
        else:
            parts = str(raw).split(";")
        seen = set()
        names: List[str] = []
        for part in parts:
            if is_placeholder(part):
                continue
            canonical = self.canonicalize(part)
            if not canonical or canonical.lower() in seen:
                continue
            seen.add(canonical.lower())
            names.append(canonical)
        return tuple(names)


_DEFAULT = SchoolCanonicalizer()


def default_canonicalizer() -> SchoolCanonicalizer:
    return _DEFAULT


def canonicalize(raw: object) -> str:
    """Canonicalize with the built-in alias table."""

    return _DEFAULT.canonicalize(raw)


def same_school(left: object, right: object) -> bool:
    return _DEFAULT.same_school(left, right)


def split_colleges(raw: object) -> Tuple[str, ...]:
    return _DEFAULT.split_colleges(raw)
