import logging

import streamlit as st

from champ_block.config import get_settings
from champ_block.data import FetchError, load_catalog
from champ_block.render import render_blocked_list, render_fetch_error, render_grid
from champ_block.search import FuzzySearch, search_entries
from champ_block.state import init_session
from champ_block.ui import blocked_list, champion_grid, reason_dialog, search_box, select_item, sidebar

settings = get_settings()
logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("champ_block.app")

st.set_page_config(page_title="Champion Blocker", page_icon="🚫", layout="wide")

init_session(settings)
store = st.session_state.block_store
workflow = st.session_state.workflow

st.title("🚫 Champion Blocker")
st.caption(f"Block champions you want to avoid and note why. Data Dragon {settings.ddragon_version}.")

try:
    CATALOG = load_catalog(settings.cdn_base_url, settings.ddragon_version, settings.locale, settings.request_timeout)
except FetchError as e:
    logger.error("Could not fetch champion data: %s", e)
    st.error(render_fetch_error())
    st.stop()

if st.session_state.grid_cells is None:
    st.session_state.grid_cells = render_grid(CATALOG, store.snapshot())

search = FuzzySearch(search_entries(CATALOG), limit=settings.search_limit, cutoff=settings.search_cutoff)
search.on_select(select_item)

sidebar(store, len(CATALOG))
search_box(search)
blocked_list(render_blocked_list(CATALOG, store.snapshot()), columns=settings.grid_columns)
st.write("---")
champion_grid(st.session_state.grid_cells, columns=settings.grid_columns)

if st.session_state.open_reason_dialog:
    st.session_state.open_reason_dialog = False
    reason_dialog(workflow, CATALOG)
elif workflow.awaiting_reason:
    # the dialog was dismissed without Save
    workflow.cancel()
