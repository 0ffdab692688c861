"""Autocomplete over the catalog by display name.

``FuzzySearch`` is the only matcher the app ships, but the app only relies on
``search(query)`` and ``on_select(callback)``.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List

import pandas as pd
from thefuzz import fuzz

logger = logging.getLogger(__name__)

# Rank bands: prefix hits, then substring hits, then fuzzy hits by score.
PREFIX_SCORE = 300
SUBSTRING_SCORE = 200


@dataclass(frozen=True)
class SearchMatch:
    id: str
    name: str
    icon: str
    score: int


def search_entries(catalog: pd.DataFrame) -> List[Dict[str, str]]:
    return [
        {"name": row["name"], "id": cid, "icon": row["image_url"]}
        for cid, row in catalog.iterrows()
    ]


def _score(query: str, name: str, cutoff: int) -> int:
    q, n = query.lower(), name.lower()
    if n.startswith(q):
        return PREFIX_SCORE
    if q in n:
        return SUBSTRING_SCORE
    ratio = fuzz.partial_ratio(q, n)
    return ratio if ratio >= cutoff else 0


class FuzzySearch:
    def __init__(self, entries: List[Dict[str, str]], limit: int = 5, cutoff: int = 70):
        self._entries = list(entries)
        self.limit = limit
        self.cutoff = cutoff
        self._listeners: List[Callable[[str], None]] = []

    def search(self, query: str) -> List[SearchMatch]:
        query = (query or "").strip()
        if not query:
            return []
        scored = []
        for e in self._entries:
            s = _score(query, e["name"], self.cutoff)
            if s:
                scored.append(SearchMatch(id=e["id"], name=e["name"], icon=e["icon"], score=s))
        scored.sort(key=lambda m: (-m.score, m.name))
        return scored[:self.limit]

    def on_select(self, callback: Callable[[str], None]) -> None:
        self._listeners.append(callback)

    def select(self, cid: str) -> None:
        logger.debug("Search selected %s", cid)
        for cb in list(self._listeners):
            cb(cid)


def highlight(name: str, query: str) -> str:
    query = (query or "").strip()
    if not query:
        return name
    m = re.search(re.escape(query), name, flags=re.IGNORECASE)
    if not m:
        return name
    return f"{name[:m.start()]}**{m.group(0)}**{name[m.end():]}"
