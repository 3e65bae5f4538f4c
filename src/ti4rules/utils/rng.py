"""Deterministic seeded randomness.

All randomness is derived from a seed string so a roll can be replayed
exactly: the same seed and die count always produce the same faces.

Examples:
    >>> seed = generate_seed("table", 3, "space_combat")
    >>> seed
    'table:3:space_combat'
    >>> faces = roll_faces(seed, 4)
    >>> len(faces)
    4
"""

import hashlib
import random


def generate_seed(*parts: object) -> str:
    """Join seed components with ``:``.

    Raises:
        ValueError: If no parts are given.
    """
    if not parts:
        raise ValueError("at least one seed part is required")
    return ":".join(str(part) for part in parts)


def _seed_to_int(seed: str) -> int:
    """Convert seed string to a stable 64-bit integer for random.Random().

    Args:
        seed: Seed string

    Returns:
        64-bit integer derived from SHA-256(seed)
    """
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big", signed=False)


def roll_faces(seed: str, count: int, sides: int = 10) -> list[int]:
    """Roll ``count`` dice with ``sides`` faces.

    Args:
        seed: Deterministic seed string (see :func:`generate_seed`)
        count: Number of dice, may be zero
        sides: Faces per die

    Returns:
        Face values in ``1..sides``, one per die

    Raises:
        ValueError: If count is negative or sides is not positive
    """
    if count < 0:
        raise ValueError(f"Number of dice must be non-negative, got {count}")
    if sides <= 0:
        raise ValueError(f"Number of sides must be positive, got {sides}")

    rng = random.Random(_seed_to_int(seed))
    return [rng.randint(1, sides) for _ in range(count)]
