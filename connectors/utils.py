"""
Helpers shared by connector implementations.
"""

from __future__ import annotations

import logging
import pathlib
from typing import Union

logger = logging.getLogger(__name__)

DOCS_DIR = pathlib.Path(__file__).resolve().parent / "docs"


def get_markdown_contents(path: Union[str, pathlib.Path], fallback: str) -> str:
    """Return the text of a markdown file, or ``fallback`` if it can't be read."""
    try:
        return pathlib.Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not read %s (%s), using fallback text", path, exc)
        return fallback
