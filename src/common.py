from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

# Shown in place of a file name when the text was not read from a file.
NO_FILE_NAME = "No file chosen"


@dataclass(frozen=True)
class Paths:
    results_dir: Path = Path('results')

    def ensure(self) -> None:
        self.results_dir.mkdir(parents=True, exist_ok=True)


def load_text(path: str | os.PathLike) -> str:
    """Read text as UTF-8, dropping a leading BOM if present."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Missing input file: {p}")
    return p.read_text(encoding="utf-8-sig")


def display_name(path: Optional[str | os.PathLike]) -> str:
    if not path:
        return NO_FILE_NAME
    return Path(path).name


def save_json(obj: Dict, path: str | os.PathLike) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)
