"""Tests for templaterender.variables."""

import pytest

from templaterender.exceptions import FormatError
from templaterender.variables import VariableStore


class TestVariableStore:
    def test_set_and_get(self):
        store = VariableStore()
        store.set("k", "v")
        assert store.get("k") == "v"

    def test_missing_variable_is_none(self):
        assert VariableStore().get("missing") is None
        assert VariableStore().get("missing", {"a": 1}) is None

    def test_unset_removes(self):
        store = VariableStore({"k": "v"})
        store.unset("k")
        assert not store.has("k")
        assert store.get("k") is None

    def test_unset_missing_is_noop(self):
        store = VariableStore()
        store.unset("nothing")
        assert len(store) == 0

    def test_sequence_value_kept_in_order(self):
        store = VariableStore()
        store.set("items", ["valor_1", "valor_2"])
        assert list(store.get("items")) == ["valor_1", "valor_2"]

    def test_set_all_last_write_wins(self):
        store = VariableStore()
        store.set_all({"a": 1, "b": 2})
        store.set_all({"b": 3})
        assert store.all() == {"a": 1, "b": 3}

    def test_all_is_a_snapshot(self):
        store = VariableStore({"a": 1})
        snapshot = store.all()
        snapshot["b"] = 2
        assert not store.has("b")

    def test_get_with_format_args_does_not_mutate(self):
        store = VariableStore({"msg": "hola @@name@@"})
        assert store.get("msg", {"name": "ada"}) == "hola ada"
        assert store.get("msg") == "hola @@name@@"

    def test_get_with_empty_format_args(self):
        store = VariableStore({"msg": "100%"})
        assert store.get("msg", []) == "100%"

    def test_get_with_format_args_on_non_string(self):
        store = VariableStore({"items": [1, 2]})
        with pytest.raises(FormatError):
            store.get("items", [1])

    def test_fill_mutates(self):
        store = VariableStore({"clave": "esto es un @@valor@@"})
        store.fill("clave", {"valor": "cambio"})
        assert store.get("clave") == "esto es un cambio"

    def test_fill_missing_is_noop(self):
        store = VariableStore()
        store.fill("clave", {"valor": "cambio"})
        assert not store.has("clave")

    def test_container_protocol(self):
        store = VariableStore({"a": 1, "b": 2})
        assert "a" in store
        assert "z" not in store
        assert sorted(store) == ["a", "b"]
