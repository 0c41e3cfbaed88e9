from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from .types import IssueSummary


def render_json(summaries: Iterable[IssueSummary]) -> str:
    return json.dumps([s.to_dict() for s in summaries], indent=2, ensure_ascii=False) + "\n"


def write_json(path: str | Path, summaries: Iterable[IssueSummary]) -> Path:
    p = Path(path)
    p.write_text(render_json(summaries), encoding="utf-8")
    return p
