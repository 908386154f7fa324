"""Unit tests for the password event registry.

Tests cover:
- Callback registration and unregistration
- Registration-order dispatch
- Error isolation between callbacks
"""

import pytest

from keysmith.core.events import (
    PasswordEvent,
    PasswordEventRegistry,
    get_all_events,
)


class TestPasswordEventRegistry:
    """Tests for the PasswordEventRegistry class."""

    def test_register_returns_unique_id(self) -> None:
        """Test that register() returns a prefixed, unique callback ID."""
        registry = PasswordEventRegistry()

        def callback(event, data):
            pass

        ids = {
            registry.register(PasswordEvent.ON_PASSWORD_GENERATED, callback)
            for _ in range(10)
        }

        assert len(ids) == 10
        assert all(callback_id.startswith("cb_") for callback_id in ids)

    def test_register_unknown_event(self) -> None:
        """Test that unknown events are rejected."""
        registry = PasswordEventRegistry()

        with pytest.raises(ValueError, match="Unknown password event"):
            registry.register("on_nothing", lambda event, data: None)

    def test_register_non_callable(self) -> None:
        """Test that a non-callable callback is rejected."""
        registry = PasswordEventRegistry()

        with pytest.raises(ValueError, match="callable"):
            registry.register(PasswordEvent.ON_PASSWORD_ERROR, "not a function")

    def test_trigger_in_registration_order(self) -> None:
        """Test that callbacks run in the order they were registered."""
        registry = PasswordEventRegistry()
        calls = []

        registry.register(PasswordEvent.ON_STRENGTH_EVALUATED, lambda e, d: calls.append("first"))
        registry.register(PasswordEvent.ON_STRENGTH_EVALUATED, lambda e, d: calls.append("second"))
        registry.register(PasswordEvent.ON_PASSWORD_ERROR, lambda e, d: calls.append("other"))

        result = registry.trigger(PasswordEvent.ON_STRENGTH_EVALUATED, {})

        assert calls == ["first", "second"]
        assert result.called == 2
        assert result.success is True

    def test_trigger_passes_event_and_data(self) -> None:
        """Test that callbacks receive the event name and payload."""
        registry = PasswordEventRegistry()
        received = []

        registry.register(
            PasswordEvent.ON_PASSWORD_GENERATED, lambda e, d: received.append((e, d))
        )
        registry.trigger(PasswordEvent.ON_PASSWORD_GENERATED, {"mode": "random"})

        assert received == [(PasswordEvent.ON_PASSWORD_GENERATED, {"mode": "random"})]

    def test_failing_callback_does_not_stop_others(self) -> None:
        """Test that an exception in one callback is collected, not raised."""
        registry = PasswordEventRegistry()
        calls = []

        def broken(event, data):
            raise RuntimeError("boom")

        registry.register(PasswordEvent.ON_PASSWORD_ERROR, broken)
        registry.register(PasswordEvent.ON_PASSWORD_ERROR, lambda e, d: calls.append("ran"))

        result = registry.trigger(PasswordEvent.ON_PASSWORD_ERROR, {})

        assert calls == ["ran"]
        assert result.called == 2
        assert result.success is False
        assert len(result.errors) == 1
        assert "boom" in result.errors[0]

    def test_trigger_without_callbacks(self) -> None:
        """Test that triggering an event nobody listens to is a no-op."""
        result = PasswordEventRegistry().trigger(PasswordEvent.ON_PASSWORD_GENERATED, {})

        assert result.called == 0
        assert result.success is True

    def test_unregister(self) -> None:
        """Test that an unregistered callback is no longer called."""
        registry = PasswordEventRegistry()
        calls = []
        callback_id = registry.register(
            PasswordEvent.ON_PASSWORD_GENERATED, lambda e, d: calls.append(1)
        )

        assert registry.unregister(callback_id) is True
        registry.trigger(PasswordEvent.ON_PASSWORD_GENERATED, {})

        assert calls == []
        assert registry.get_callbacks_for_event(PasswordEvent.ON_PASSWORD_GENERATED) == []

    def test_unregister_unknown_id(self) -> None:
        """Test that unregistering an unknown ID returns False."""
        assert PasswordEventRegistry().unregister("cb_missing") is False

    def test_clear(self) -> None:
        """Test that clear() removes everything and reports the count."""
        registry = PasswordEventRegistry()
        for event in get_all_events():
            registry.register(event, lambda e, d: None)

        assert registry.clear() == 3
        for event in get_all_events():
            assert registry.get_callbacks_for_event(event) == []


def test_all_events_listed() -> None:
    """Test that get_all_events() lists every PasswordEvent constant."""
    assert set(get_all_events()) == {
        PasswordEvent.ON_PASSWORD_GENERATED,
        PasswordEvent.ON_PASSWORD_ERROR,
        PasswordEvent.ON_STRENGTH_EVALUATED,
    }
