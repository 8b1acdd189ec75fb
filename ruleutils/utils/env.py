from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def load_environment(dotenv_path: Optional[str] = None) -> None:
    candidate = Path(dotenv_path) if dotenv_path else Path(".env")
    if not candidate.exists():
        return
    load_dotenv(candidate, override=True)
