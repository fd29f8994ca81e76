from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ListOptions:
    offset: int = 0
    limit: Optional[int] = None
