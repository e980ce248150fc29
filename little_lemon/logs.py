"""File logging setup; the terminal belongs to the Textual UI."""

from __future__ import annotations

import logging
from pathlib import Path

from little_lemon.config import LOG_PATH


def setup_logging(log_path: str | Path = LOG_PATH, level: int = logging.DEBUG) -> None:
    path = Path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger("little_lemon")
    root.setLevel(level)
    if any(isinstance(h, logging.FileHandler) and Path(h.baseFilename) == path.resolve() for h in root.handlers):
        return
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root.addHandler(handler)
