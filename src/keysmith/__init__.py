"""KeySmith - Constrained password generation and strength scoring.

Generates random passwords by rejection sampling against weakness patterns,
memorable passwords from a word list, and scores any password for strength.
"""

__version__ = "0.1.0"

from keysmith.application.services.password_service import PasswordService

__all__ = ["PasswordService", "__version__"]
