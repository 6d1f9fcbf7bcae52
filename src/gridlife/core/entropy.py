"""Secure random bytes for callers embedding the simulator."""

import secrets

RANDOM_BYTES_LENGTH = 32


class EntropyError(RuntimeError):
    """Raised when the system entropy source cannot supply bytes."""


def generate_random() -> bytes:
    """Return 32 bytes from the operating system's secure random source.

    This is independent of grid seeding, which uses numpy's generator.

    Raises:
        EntropyError: If the entropy source fails
    """
    try:
        buffer = secrets.token_bytes(RANDOM_BYTES_LENGTH)
    except (OSError, NotImplementedError) as e:
        raise EntropyError(f"failed to generate random bytes: {e}") from e

    if len(buffer) != RANDOM_BYTES_LENGTH:
        raise EntropyError(f"entropy source returned {len(buffer)} bytes, expected {RANDOM_BYTES_LENGTH}")
    return buffer
