from __future__ import annotations

import pytest

from sietor.keymaps import (
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    KeyStroke,
    load_default_keymaps,
)


def make_action(action_id: str) -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(binding_id: str, token: str, action_id: str = "core.test") -> Binding:
    return Binding(id=binding_id, stroke=KeyStroke.parse(token), action_id=action_id)


def test_key_stroke_tokens_are_normalized() -> None:
    assert KeyStroke("Home", ("CTRL",)).token == "ctrl+home"
    assert KeyStroke("x", ("shift", "ctrl", "shift")).token == "ctrl+shift+x"
    assert KeyStroke.parse("Ctrl+End") == KeyStroke("end", ("ctrl",))


def test_key_stroke_rejects_empty_key() -> None:
    with pytest.raises(ValueError):
        KeyStroke("")
    with pytest.raises(ValueError):
        KeyStroke.parse("+")


def test_register_and_lookup() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("core.test"))
    binding = registry.register_binding(make_binding("b1", "f5"))

    found = registry.lookup("f5")

    assert found is not None
    assert found[0] == binding
    assert found[1].id == "core.test"
    assert registry.lookup("f6") is None


def test_binding_requires_registered_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding("b1", "f5", action_id="missing"))


def test_conflicting_binding_is_rejected() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("core.test"))
    first = registry.register_binding(make_binding("b1", "f5"))

    with pytest.raises(KeymapConflictError) as info:
        registry.register_binding(make_binding("b2", "f5"))

    assert info.value.existing == first


def test_replace_takes_over_key() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("core.test"))
    registry.register_binding(make_binding("b1", "f5"))
    revision = registry.revision()

    registry.register_binding(make_binding("b2", "f5"), replace=True)

    found = registry.lookup("f5")
    assert found is not None and found[0].id == "b2"
    assert registry.stats().binding_count == 1
    assert registry.revision() > revision


def test_rebinding_same_id_moves_key() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("core.test"))
    registry.register_binding(make_binding("b1", "f5"))

    registry.register_binding(make_binding("b1", "f6"), replace=True)

    assert registry.lookup("f5") is None
    assert registry.lookup("f6") is not None


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("core.test"))
    registry.register_binding(make_binding("b1", "f5"))

    removed = registry.unregister_binding("b1")

    assert removed is not None
    assert registry.lookup("f5") is None
    assert registry.unregister_binding("b1") is None


def test_duplicate_action_requires_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("core.test"))

    with pytest.raises(ValueError):
        registry.register_action(make_action("core.test"))
    registry.register_action(make_action("core.test"), replace=True)


def test_default_keymaps_load_twice() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)
    stats = registry.stats()
    load_default_keymaps(registry)

    assert registry.stats() == stats
    assert registry.lookup("ctrl+home") is not None
    assert registry.get_action("edit.insert_text").id == "edit.insert_text"
