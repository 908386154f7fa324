"""Cryptographically secure random source.

Draws 32-bit integers from the operating system CSPRNG and maps them onto a
range by rejection sampling, so every value in the range is equally likely.
"""

import secrets
from typing import MutableSequence, Protocol, Sequence, TypeVar

T = TypeVar("T")

# Width of a single draw in bytes (unsigned 32-bit integer)
DRAW_BYTES = 4
DRAW_SPACE = 1 << (DRAW_BYTES * 8)


class RandomSource(Protocol):
    """Anything that can produce an unbiased integer in [minimum, maximum]."""

    def uniform(self, minimum: int, maximum: int) -> int: ...


class SecureRandom:
    """Unbiased integer source backed by the secrets module.

    Example:
        >>> rng = SecureRandom()
        >>> 0 <= rng.uniform(0, 9) <= 9
        True
    """

    def uniform(self, minimum: int, maximum: int) -> int:
        """Return a uniformly distributed integer in [minimum, maximum].

        A draw falling in the remainder region above the largest multiple of
        the range that fits in 32 bits is discarded and redrawn.

        Args:
            minimum: Lower bound (inclusive).
            maximum: Upper bound (inclusive).

        Returns:
            A random integer in the closed range.

        Raises:
            ValueError: If minimum > maximum or the range exceeds 2**32.
        """
        if minimum > maximum:
            raise ValueError(f"Empty range: minimum {minimum} > maximum {maximum}")

        span = maximum - minimum + 1
        if span > DRAW_SPACE:
            raise ValueError(f"Range of {span} values exceeds a 32-bit draw")

        limit = (DRAW_SPACE // span) * span
        while True:
            draw = int.from_bytes(secrets.token_bytes(DRAW_BYTES), "big")
            if draw < limit:
                return minimum + (draw % span)


def random_choice(rng: RandomSource, items: Sequence[T]) -> T:
    """Pick one element of a non-empty sequence.

    Raises:
        ValueError: If the sequence is empty.
    """
    if not items:
        raise ValueError("Cannot choose from an empty sequence")
    return items[rng.uniform(0, len(items) - 1)]


def fisher_yates_shuffle(rng: RandomSource, items: MutableSequence[T]) -> None:
    """Shuffle a sequence in place.

    Walks from the last index down, swapping each position with a random
    position at or below it.
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.uniform(0, i)
        items[i], items[j] = items[j], items[i]
