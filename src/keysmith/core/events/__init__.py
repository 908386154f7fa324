"""Password event system.

Example usage:
    from keysmith.core.events import PasswordEvent, PasswordEventRegistry

    registry = PasswordEventRegistry()

    def show(event, data):
        print(data["password"], data["strength"].level)

    registry.register(PasswordEvent.ON_PASSWORD_GENERATED, show)
"""

from keysmith.core.events.event_registry import (
    DispatchResult,
    PasswordEventRegistry,
    RegisteredCallback,
)
from keysmith.core.events.password_events import PasswordEvent, get_all_events

__all__ = [
    "DispatchResult",
    "PasswordEvent",
    "PasswordEventRegistry",
    "RegisteredCallback",
    "get_all_events",
]
