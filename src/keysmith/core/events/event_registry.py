"""Password event registry - callback registration and dispatch.

The PasswordEventRegistry lets callers subscribe to password events:
- Registration returns an id used for later removal
- Callbacks run in registration order
- A failing callback is logged and never stops the others
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Callable

from keysmith.core.events.password_events import get_all_events
from keysmith.core.logging import get_logger

logger = get_logger(__name__)

EventCallback = Callable[[str, dict[str, Any]], None]


@dataclass
class RegisteredCallback:
    """Internal representation of a registered callback.

    Attributes:
        id: Unique identifier for this registration.
        event: The event this callback listens to.
        callback: Function called as callback(event, data).
        registration_order: Order in which this callback was registered.
    """

    id: str
    event: str
    callback: EventCallback
    registration_order: int = 0


@dataclass
class DispatchResult:
    """Outcome of triggering an event.

    Attributes:
        called: Number of callbacks invoked.
        errors: One message per callback that raised.
    """

    called: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors


class PasswordEventRegistry:
    """Registry of password event callbacks.

    Example:
        registry = PasswordEventRegistry()

        def on_generated(event, data):
            print(data["strength"].level)

        callback_id = registry.register(PasswordEvent.ON_PASSWORD_GENERATED, on_generated)
        registry.trigger(PasswordEvent.ON_PASSWORD_GENERATED, {...})
        registry.unregister(callback_id)
    """

    def __init__(self) -> None:
        """Initialize the event registry."""
        self._callbacks: dict[str, list[RegisteredCallback]] = {}
        self._callback_map: dict[str, RegisteredCallback] = {}
        self._registration_counter: int = 0

    def register(self, event: str, callback: EventCallback) -> str:
        """Register a callback for an event.

        Args:
            event: Password event name (see PasswordEvent).
            callback: Function accepting (event, data).

        Returns:
            Unique callback id for later removal.

        Raises:
            ValueError: If the event is unknown or callback is not callable.
        """
        if event not in get_all_events():
            raise ValueError(f"Unknown password event: {event}")
        if not callable(callback):
            raise ValueError("Callback must be callable")

        callback_id = f"cb_{uuid.uuid4().hex[:12]}"
        self._registration_counter += 1

        registered = RegisteredCallback(
            id=callback_id,
            event=event,
            callback=callback,
            registration_order=self._registration_counter,
        )
        self._callbacks.setdefault(event, []).append(registered)
        self._callback_map[callback_id] = registered

        logger.debug("Callback registered", callback_id=callback_id, password_event=event)
        return callback_id

    def unregister(self, callback_id: str) -> bool:
        """Remove a registered callback.

        Args:
            callback_id: The id returned from register().

        Returns:
            True if the callback was removed, False if not found.
        """
        registered = self._callback_map.pop(callback_id, None)
        if registered is None:
            logger.warning("Callback not found for unregister", callback_id=callback_id)
            return False

        remaining = [c for c in self._callbacks[registered.event] if c.id != callback_id]
        if remaining:
            self._callbacks[registered.event] = remaining
        else:
            del self._callbacks[registered.event]

        logger.debug(
            "Callback unregistered", callback_id=callback_id, password_event=registered.event
        )
        return True

    def trigger(self, event: str, data: dict[str, Any]) -> DispatchResult:
        """Invoke every callback registered for an event.

        Args:
            event: Password event name.
            data: Event payload passed to each callback.

        Returns:
            DispatchResult with the number of calls and any errors.
        """
        result = DispatchResult()
        for registered in sorted(
            self._callbacks.get(event, []), key=lambda c: c.registration_order
        ):
            result.called += 1
            try:
                registered.callback(event, data)
            except Exception as e:
                logger.error(
                    "Password event callback failed",
                    callback_id=registered.id,
                    password_event=event,
                    error=str(e),
                )
                result.errors.append(f"Callback {registered.id} failed: {e}")
        return result

    def get_callbacks_for_event(self, event: str) -> list[RegisteredCallback]:
        """Get all callbacks registered for an event."""
        return self._callbacks.get(event, []).copy()

    def clear(self) -> int:
        """Remove all registered callbacks.

        Returns:
            Number of callbacks removed.
        """
        count = len(self._callback_map)
        self._callbacks.clear()
        self._callback_map.clear()
        return count
