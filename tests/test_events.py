"""
Tests for the Signal observer hook.
"""
import pytest

from rainbow_snake.events import Signal


class TestSignal:
    """Tests for connect/emit/disconnect."""

    def test_emit_reaches_listeners_in_order(self):
        signal = Signal("grew")
        seen = []
        signal.connect(lambda score: seen.append(("a", score)))
        signal.connect(lambda score: seen.append(("b", score)))
        signal.emit(3)
        assert seen == [("a", 3), ("b", 3)]

    def test_connect_twice_registers_once(self):
        signal = Signal("grew")
        seen = []
        signal.connect(seen.append)
        signal.connect(seen.append)
        signal.emit(1)
        assert seen == [1]

    def test_disconnect(self):
        signal = Signal("collided")
        seen = []
        signal.connect(seen.append)
        signal.disconnect(seen.append)
        signal.emit("x")
        assert seen == []

    def test_listener_errors_propagate(self):
        signal = Signal("collided")

        @signal.connect
        def broken(*_):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            signal.emit()

    def test_disconnect_bound_method(self):
        """Front ends detach their bound-method hooks on shutdown."""

        class Hooks:
            def __init__(self):
                self.seen = []

            def on_grew(self, score):
                self.seen.append(score)

        signal = Signal("grew")
        hooks = Hooks()
        signal.connect(hooks.on_grew)
        signal.emit(1)
        signal.disconnect(hooks.on_grew)
        signal.emit(2)
        assert hooks.seen == [1]
