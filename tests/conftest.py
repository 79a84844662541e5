"""Global pytest configuration and shared path generators.

The generators follow the shape of real paths: a list of components drawn
from the rule-set's valid alphabet, usually preceded by a root. They are
seeded so every run exercises the same inputs.
"""

from __future__ import annotations

import random
from typing import Callable, List

import pytest

from pathrules.codec import from_bytes
from pathrules.model.path import Path
from pathrules.rules import POSIX, WINDOWS

GENERATED_COUNT = 300

_POSIX_ALPHABET = bytes(b for b in range(1, 256) if b not in POSIX.reserved)
_WINDOWS_ALPHABET = bytes(b for b in range(256) if b not in WINDOWS.reserved)


def _component(rng: random.Random, alphabet: bytes) -> bytes:
    return bytes(rng.choice(alphabet) for _ in range(rng.randint(0, 10)))


def generate_posix_paths(seed: int = 1, count: int = GENERATED_COUNT) -> List[bytes]:
    """Return POSIX path byte strings, nine in ten of them absolute."""
    rng = random.Random(seed)
    out = []
    for i in range(count):
        parts = [_component(rng, _POSIX_ALPHABET) for _ in range(i % 12)]
        if rng.random() < 0.9:
            parts.insert(0, b"")
        out.append(b"/".join(parts))
    return out


def generate_windows_paths(seed: int = 2, count: int = GENERATED_COUNT) -> List[bytes]:
    """Return Windows path byte strings with a bare or drive-letter root."""
    rng = random.Random(seed)
    out = []
    for i in range(count):
        parts = [_component(rng, _WINDOWS_ALPHABET) for _ in range(i % 12)]
        if rng.random() < 0.9:
            parts.insert(0, b"")
        if rng.random() < 0.9:
            root = bytes([rng.randint(0x41, 0x5A)]) + b":\\"
        else:
            root = b"\\"
        out.append(root + b"\\".join(parts))
    return out


@pytest.fixture
def posix() -> Callable[[str], Path]:
    """Parse a text path with the POSIX rule-set."""
    return lambda text: from_bytes(POSIX, text.encode("utf-8"))


@pytest.fixture
def windows() -> Callable[[str], Path]:
    """Parse a text path with the Windows rule-set."""
    return lambda text: from_bytes(WINDOWS, text.encode("utf-8"))


@pytest.fixture(scope="session")
def posix_samples() -> List[bytes]:
    return generate_posix_paths()


@pytest.fixture(scope="session")
def windows_samples() -> List[bytes]:
    return generate_windows_paths()
