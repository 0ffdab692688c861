"""Tests for the grid and blocked-list view descriptions."""

import random

from champ_block.render import (
    BlockedListView, render_blocked_list, render_fetch_error, render_grid, update_single_item,
)
from champ_block.state import BlockRecord, BlockStore
from champ_block.text import EMPTY_BLOCKED_LIST, FETCH_FAILED, NO_REASON


class TestRenderGrid:
    def test_sorted_by_id_with_one_cell_each(self, catalog):
        cells = render_grid(catalog, {})
        assert [c.id for c in cells] == ["Aatrox", "Ahri", "Lux", "Yasuo", "Zed"]
        assert not any(c.blocked for c in cells)

    def test_image_url_is_templated(self, catalog):
        cell = render_grid(catalog, {})[1]
        assert cell.image_url == "https://cdn.test/cdn/14.10.1/img/champion/Ahri.png"

    def test_tooltip_includes_title(self, catalog):
        cell = render_grid(catalog, {})[1]
        assert cell.tooltip == "Ahri, the Ahri"

    def test_blocked_cell_has_overlay(self, catalog):
        cells = render_grid(catalog, {"Ahri": BlockRecord("counters mid")})
        assert [c.id for c in cells if c.blocked] == ["Ahri"]


class TestRenderBlockedList:
    def test_empty_state_message(self, catalog):
        view = render_blocked_list(catalog, {})
        assert view == BlockedListView(entries=(), empty_message=EMPTY_BLOCKED_LIST)

    def test_reason_shown(self, catalog):
        view = render_blocked_list(catalog, {"Ahri": BlockRecord("counters mid")})
        assert view.empty_message is None
        (entry,) = view.entries
        assert (entry.id, entry.name, entry.reason_text) == ("Ahri", "Ahri", "counters mid")
        assert entry.tooltip == "Click to unblock Ahri"

    def test_empty_reason_uses_placeholder(self, catalog):
        (entry,) = render_blocked_list(catalog, {"Zed": BlockRecord("")}).entries
        assert entry.reason_text == NO_REASON

    def test_whitespace_reason_is_kept(self, catalog):
        (entry,) = render_blocked_list(catalog, {"Zed": BlockRecord("  ")}).entries
        assert entry.reason_text == "  "

    def test_sorted_by_id(self, catalog):
        state = {cid: BlockRecord("") for cid in ["Zed", "Ahri", "Lux"]}
        assert [e.id for e in render_blocked_list(catalog, state).entries] == ["Ahri", "Lux", "Zed"]

    def test_unknown_id_is_skipped(self, catalog):
        state = {"Removed": BlockRecord("gone"), "Lux": BlockRecord("")}
        view = render_blocked_list(catalog, state)
        assert [e.id for e in view.entries] == ["Lux"]


class TestUpdateSingleItem:
    def test_adds_and_removes_overlay(self, catalog):
        cells = render_grid(catalog, {})
        state = {"Zed": BlockRecord("")}
        cells = update_single_item(cells, "Zed", state)
        assert cells == render_grid(catalog, state)
        cells = update_single_item(cells, "Zed", {})
        assert cells == render_grid(catalog, {})

    def test_does_not_mutate_input(self, catalog):
        cells = render_grid(catalog, {})
        update_single_item(cells, "Lux", {"Lux": BlockRecord("")})
        assert not any(c.blocked for c in cells)

    def test_unknown_id_leaves_cells(self, catalog):
        cells = render_grid(catalog, {})
        assert update_single_item(cells, "Nope", {"Nope": BlockRecord("")}) == cells


def test_incremental_grid_stays_consistent_with_store(catalog, storage):
    rng = random.Random(3)
    store = BlockStore(storage)
    cells = render_grid(catalog, store.snapshot())
    for _ in range(100):
        cid = rng.choice(list(catalog.index))
        store.toggle(cid, lambda: "why")
        cells = update_single_item(cells, cid, store.snapshot())
        state = store.snapshot()
        assert cells == render_grid(catalog, state)
        blocked_in_grid = {c.id for c in cells if c.blocked}
        listed = {e.id for e in render_blocked_list(catalog, state).entries}
        assert blocked_in_grid == listed == set(state)


def test_fetch_error_text():
    assert render_fetch_error() == FETCH_FAILED
