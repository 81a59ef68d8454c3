"""Persist and load alias profiles that extend the built-in tables."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from alumni.schools import SchoolCanonicalizer


@dataclass
class AliasProfile:
    school_aliases: Dict[str, str] = field(default_factory=dict)
    column_aliases: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "AliasProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        columns = data.get("column_aliases", {})
        return cls(
            school_aliases=dict(data.get("school_aliases", {})),
            column_aliases={name: list(aliases) for name, aliases in columns.items()},
        )

    def save(self, path: Path) -> None:
        payload = {
            "school_aliases": self.school_aliases,
            "column_aliases": self.column_aliases,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def canonicalizer(self) -> SchoolCanonicalizer:
        """Canonicalizer whose override table starts with this profile's school aliases."""

        return SchoolCanonicalizer(extra_aliases=self.school_aliases)
