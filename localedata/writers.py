"""Writers for generated locale data tables."""

from __future__ import annotations

import json
from pathlib import Path

from .models import LocaleTable


def write_table(output_path: Path, table: LocaleTable) -> None:
    """Write a data table as UTF-8 JSON, keeping non-ASCII symbols readable."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(table.model_dump(mode="json"), ensure_ascii=False, indent=2)
    _ = output_path.write_text(content + "\n", encoding="utf-8")
