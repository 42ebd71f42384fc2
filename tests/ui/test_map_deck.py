"""Tests for turning map geometry into a pydeck deck."""

from __future__ import annotations

import pydeck as pdk

from tripwright import plan_trip
from tripwright.agents import clear_catalog_cache
from tripwright.schemas import MapData
from tripwright.ui.map import build_deck, hex_to_rgba


def test_hex_to_rgba() -> None:
    assert hex_to_rgba("#34d399") == [52, 211, 153, 220]
    assert hex_to_rgba("#0f172a", alpha=255) == [15, 23, 42, 255]
    assert hex_to_rgba("not-a-colour") == [148, 163, 184, 220]


def test_build_deck_has_leg_and_node_layers() -> None:
    clear_catalog_cache()
    plan = plan_trip("Plan a 2-day trip to Tokyo from New Delhi")

    deck = build_deck(plan.map)

    assert isinstance(deck, pdk.Deck)
    layer_ids = [layer.id for layer in deck.layers]
    assert layer_ids == ["plan-legs", "plan-nodes"]


def test_build_deck_handles_empty_map() -> None:
    deck = build_deck(MapData())

    assert deck.layers == []
