"""Stylesheet passed between pipeline stages."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Stylesheet:
    """CSS text plus the name of the file it came from."""

    css: str
    source: Optional[str] = None

    def __str__(self) -> str:
        return self.css


__all__ = ['Stylesheet']
