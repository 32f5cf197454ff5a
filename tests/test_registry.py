import pytest

from cadgeo_editor import CommandNotAvailableError, CommandRegistry


@pytest.fixture
def registry():
    return CommandRegistry()


def test_execute_without_data(registry):
    calls = []
    registry.register("ping", lambda: calls.append("ping") or "pong", "Ping")

    assert registry.execute("ping") == "pong"
    assert calls == ["ping"]


def test_execute_passes_command_data(registry):
    received = []
    registry.register("echo", received.append, "Echo")

    registry.execute("echo", {"value": 1})

    assert received == [{"value": 1}]


def test_unknown_command_lists_available(registry):
    registry.register("a", lambda: None, "A")
    registry.register("b", lambda: None, "B")

    with pytest.raises(CommandNotAvailableError, match="Available commands: a, b"):
        registry.execute("c")


def test_double_registration_rejected(registry):
    registry.register("a", lambda: None, "A")

    with pytest.raises(ValueError, match="already registered"):
        registry.register("a", lambda: None, "Again")


def test_handler_errors_propagate(registry):
    def boom():
        raise RuntimeError("boom")

    registry.register("boom", boom, "Fails")

    with pytest.raises(RuntimeError, match="boom"):
        registry.execute("boom")


def test_introspection(registry):
    registry.register("a", lambda: None, "First")

    assert registry.is_available("a")
    assert not registry.is_available("b")
    assert registry.available_commands == {"a"}
    assert registry.get_help() == {"a": "First"}
    assert registry.count() == 1
