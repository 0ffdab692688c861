"""Pure view descriptions for the grid and the blocked list.

Nothing here touches Streamlit; ``ui.py`` applies these to the page.
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Mapping, Optional, Tuple

import pandas as pd

from .text import EMPTY_BLOCKED_LIST, FETCH_FAILED, reason_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridCell:
    id: str
    name: str
    image_url: str
    blocked: bool
    tooltip: str = ""


@dataclass(frozen=True)
class BlockedEntry:
    id: str
    name: str
    image_url: str
    reason_text: str
    tooltip: str


@dataclass(frozen=True)
class BlockedListView:
    entries: Tuple[BlockedEntry, ...] = ()
    empty_message: Optional[str] = None


def render_grid(catalog: pd.DataFrame, block_state: Mapping) -> List[GridCell]:
    cells = []
    for cid in sorted(catalog.index):
        row = catalog.loc[cid]
        tooltip = f"{row['name']}, {row['title']}" if row["title"] else row["name"]
        cells.append(GridCell(id=cid, name=row["name"], image_url=row["image_url"], blocked=cid in block_state,
                              tooltip=tooltip))
    return cells


def render_blocked_list(catalog: pd.DataFrame, block_state: Mapping) -> BlockedListView:
    if not block_state:
        return BlockedListView(entries=(), empty_message=EMPTY_BLOCKED_LIST)
    entries = []
    for cid in sorted(block_state):
        if cid not in catalog.index:
            logger.debug("Blocked id %r is not in the catalog; skipping", cid)
            continue
        row = catalog.loc[cid]
        entries.append(BlockedEntry(
            id=cid,
            name=row["name"],
            image_url=row["image_url"],
            reason_text=reason_text(block_state[cid].reason),
            tooltip=f"Click to unblock {row['name']}",
        ))
    return BlockedListView(entries=tuple(entries))


def update_single_item(cells: List[GridCell], cid: str, block_state: Mapping) -> List[GridCell]:
    blocked = cid in block_state
    out = list(cells)
    for i, cell in enumerate(out):
        if cell.id == cid:
            if cell.blocked != blocked:
                out[i] = replace(cell, blocked=blocked)
            break
    return out


def render_fetch_error() -> str:
    return FETCH_FAILED
