from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RepoRef:
    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class IssueSummary:
    total_count: int
    url: str
    title: str
    label: str

    def to_dict(self) -> dict[str, Any]:
        # Key order is part of the output format.
        return {
            "total_count": self.total_count,
            "url": self.url,
            "title": self.title,
            "label": self.label,
        }
