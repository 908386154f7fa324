"""Password event names.

Events emitted by the PasswordService so that outer layers (a UI, a CLI,
an audit sink) can react to generation and evaluation without the core
knowing about them.

IMPORTANT: Adding new events is allowed (non-breaking), but
           removing or renaming events is a breaking change.
"""


class PasswordEvent:
    """Password event names.

    - ON_PASSWORD_GENERATED: a password was produced and evaluated.
      Data: {"mode", "password", "strength"}.
    - ON_PASSWORD_ERROR: generation failed.
      Data: {"mode", "code", "message"}.
    - ON_STRENGTH_EVALUATED: a password was scored.
      Data: {"strength"}.
    """

    ON_PASSWORD_GENERATED = "on_password_generated"
    ON_PASSWORD_ERROR = "on_password_error"
    ON_STRENGTH_EVALUATED = "on_strength_evaluated"


def get_all_events() -> list[str]:
    """Get a list of all password event names.

    Returns:
        List of event name strings.
    """
    return [
        PasswordEvent.ON_PASSWORD_GENERATED,
        PasswordEvent.ON_PASSWORD_ERROR,
        PasswordEvent.ON_STRENGTH_EVALUATED,
    ]
