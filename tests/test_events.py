# tests/test_events.py
# How to run:
#   From repo root: pytest -q
#
# What this covers:
#   - SemanticEvent defaults and serialization (to_record)
#   - Keymap default entries, lookup of unmapped keys, immutability

import dataclasses

import pytest

from core.hooks.events import SemanticEvent, InputEvent
from core.hooks.keymap import Keymap

def test_semantic_event_defaults_and_serialization():
    ev = SemanticEvent()
    assert ev.kind == InputEvent.PRESS
    assert isinstance(ev.t_mono, float)
    rec = ev.to_record()
    assert rec["kind"] == "press"
    assert rec["t_mono"] == ev.t_mono
    assert isinstance(rec["t_utc"], str) and rec["t_utc"]

def test_semantic_event_is_frozen():
    ev = SemanticEvent(t_mono=1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ev.t_mono = 2.0

def test_default_keymap_maps_x_and_b_to_press():
    km = Keymap.default()
    assert len(km) == 2
    assert km.lookup("x") == InputEvent.PRESS
    assert km.lookup("b") == InputEvent.PRESS
    assert "x" in km

def test_unmapped_key_has_no_event():
    km = Keymap.default()
    assert km.lookup("q") is None
    assert km.lookup(260) is None  # curses KEY_LEFT

def test_keymap_mapping_is_read_only():
    source = {"z": InputEvent.PRESS}
    km = Keymap(source)
    source["y"] = InputEvent.PRESS
    assert "y" not in km
    with pytest.raises(TypeError):
        km.mapping["y"] = InputEvent.PRESS
