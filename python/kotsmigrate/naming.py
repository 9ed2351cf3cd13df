"""Uniqueness tokens for migrations Pod names.

Pod names must be unique within a namespace. The default token is the current
Unix time in whole seconds, so two Pods built within the same second collide
and the second one is rejected by the API server. `RandomSuffixToken` appends
a short random suffix for callers that may build more than one Pod per second.
"""

from __future__ import annotations

import itertools
import random
import string
import time
from typing import Callable, Protocol

from kotsmigrate import constants

# Characters allowed in a DNS-1123 label, minus the hyphen.
_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


class TokenProvider(Protocol):
    """Produces the variable part of a Pod name."""

    def __call__(self) -> str:
        """Return a new token."""
        ...


class UnixTimeToken:
    """Whole seconds since the epoch."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        """Initialize with the clock to read."""
        self.clock = clock

    def __call__(self) -> str:
        """Current time in seconds."""
        return str(int(self.clock()))


class RandomSuffixToken:
    """Whole seconds since the epoch followed by a random suffix."""

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        length: int = 5,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the token provider.

        Args:
            clock: Clock returning seconds since the epoch.
            length: Number of random characters to append.
            rng: Random number generator. Defaults to a fresh `random.Random`.
        """
        if length < 1:
            raise ValueError(f"Suffix length must be positive, got {length}")
        self.clock = clock
        self.length = length
        self.rng = rng or random.Random()

    def __call__(self) -> str:
        """Current time in seconds and a random suffix."""
        suffix = "".join(self.rng.choice(_SUFFIX_ALPHABET) for _ in range(self.length))
        return f"{int(self.clock())}-{suffix}"


class FixedToken:
    """Always the same token."""

    def __init__(self, value: str) -> None:
        """Initialize with the token to return."""
        self.value = value

    def __call__(self) -> str:
        """The fixed token."""
        return self.value


class SequentialToken:
    """Increasing integers starting at `start`."""

    def __init__(self, start: int = 0) -> None:
        """Initialize the counter."""
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        """The next integer."""
        return str(next(self._counter))


def pod_name(token: str) -> str:
    """Name of the migrations Pod for the given token."""
    return f"{constants.POD_NAME_PREFIX}-{token}"
