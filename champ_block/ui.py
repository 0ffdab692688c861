from typing import List

import pandas as pd
import streamlit as st

from .render import BlockedListView, GridCell
from .search import highlight
from .text import SEARCH_PLACEHOLDER, no_results
from .workflow import SelectOutcome

OVERLAY = "🚫 Blocked"


def select_item(cid: str):
    """Shared entry point for grid, blocked-list and search selections."""
    outcome = st.session_state.workflow.select(cid)
    if outcome is SelectOutcome.ASK_REASON:
        st.session_state.open_reason_dialog = True


def _choose_search_result(search, cid: str):
    st.session_state.search_query = ""
    search.select(cid)


def sidebar(store, catalog_size: int):
    st.sidebar.header("Blocked champions")
    st.sidebar.markdown(f"**Blocked (🚫):** {len(store)} of {catalog_size}")
    if st.sidebar.button("Reset blocked list", type="secondary", disabled=len(store) == 0):
        store.clear()
        st.session_state.grid_cells = None
        st.sidebar.success("All champions unblocked.")
        st.rerun()


def search_box(search):
    query = st.text_input("Search", key="search_query", placeholder=SEARCH_PLACEHOLDER, label_visibility="collapsed")
    if not query.strip():
        return
    matches = search.search(query)
    if not matches:
        st.caption(no_results(query))
        return
    for m in matches:
        c1, c2 = st.columns([1, 11])
        with c1:
            st.image(m.icon, width=32)
        with c2:
            st.button(highlight(m.name, query), key=f"search_{m.id}",
                      on_click=_choose_search_result, args=(search, m.id))


def blocked_list(view: BlockedListView, columns: int):
    st.subheader("Blocked")
    if view.empty_message:
        st.caption(view.empty_message)
        return
    cols = st.columns(columns)
    for i, entry in enumerate(view.entries):
        with cols[i % columns]:
            st.image(entry.image_url, use_container_width=True)
            st.button(entry.name, key=f"blocked_{entry.id}", help=entry.tooltip,
                      on_click=select_item, args=(entry.id,), use_container_width=True)
            st.caption(f"*{entry.reason_text}*")


def champion_grid(cells: List[GridCell], columns: int):
    st.subheader("All champions")
    for start in range(0, len(cells), columns):
        cols = st.columns(columns)
        for col, cell in zip(cols, cells[start:start + columns]):
            with col:
                card(cell)


def card(cell: GridCell):
    with st.container(border=True):
        st.image(cell.image_url, use_container_width=True)
        if cell.blocked:
            st.markdown(f"**{OVERLAY}**")
        label = f"Unblock {cell.name}" if cell.blocked else cell.name
        st.button(label, key=f"grid_{cell.id}", help=cell.tooltip,
                  on_click=select_item, args=(cell.id,), use_container_width=True)


def _reason_form(workflow):
    reason = st.text_input("Reason (optional)", key="block_reason", placeholder="e.g. counters mid")
    b1, b2 = st.columns(2)
    with b1:
        if st.button("Save", type="primary", use_container_width=True):
            workflow.confirm(reason)
            st.rerun()
    with b2:
        if st.button("Cancel", use_container_width=True):
            workflow.cancel()
            st.rerun()


def reason_dialog(workflow, catalog: pd.DataFrame):
    cid = workflow.pending_id
    name = catalog.loc[cid, "name"] if cid in catalog.index else cid
    st.dialog(f"Block {name}")(_reason_form)(workflow)
