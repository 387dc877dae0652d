from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

import pytest

from pixelraster.core.models import Position
from pixelraster.infra.logging import shutdown_logging


def is_eight_connected(positions: Sequence[Position]) -> bool:
    return all(
        abs(b.x - a.x) <= 1 and abs(b.y - a.y) <= 1 for a, b in zip(positions, positions[1:])
    )


ENDPOINT_PAIRS: tuple[tuple[Position, Position], ...] = (
    (Position(0, 0), Position(3, 2)),
    (Position(0, 0), Position(2, 3)),
    (Position(5, 5), Position(-4, 1)),
    (Position(-3, 7), Position(2, -6)),
    (Position(1, 1), Position(9, 1)),
    (Position(1, 1), Position(1, -8)),
    (Position(0, 0), Position(7, 7)),
    (Position(4, -2), Position(-4, 6)),
    (Position(10, 3), Position(0, 0)),
    (Position(2, 2), Position(3, 3)),
)


def clear_env(monkeypatch: pytest.MonkeyPatch, *names: str) -> None:
    """Unset variables so monkeypatch restores them even if a test sets them later."""
    for name in names:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def restore_root_logging() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    shutdown_logging()
    root.handlers[:] = handlers
    root.setLevel(level)
