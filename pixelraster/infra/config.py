"""Environment-driven configuration for the preview tooling."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ENV_FILES: tuple[str, ...] = (".env.pixelraster", ".env.pixelraster.local")


def parse_env_assignment(raw_line: str) -> tuple[str, str] | None:
    """Split one ``KEY=VALUE`` line; comments, blanks and keyless lines yield None."""
    text = raw_line.strip()
    if text.startswith("#"):
        return None
    key, sep, value = text.partition("=")
    key, value = key.strip(), value.strip()
    if not sep or not key:
        return None
    if len(value) >= 2 and value[0] in "\"'" and value[-1] == value[0]:
        value = value[1:-1]
    return key, value


def load_env_file(path: str = ".env.pixelraster", *, override_existing: bool = True) -> None:
    """Export the assignments of an env file; a missing file is ignored."""
    env_path = Path(path)
    if not env_path.is_file():
        return
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        assignment = parse_env_assignment(raw_line)
        if assignment is None:
            continue
        key, value = assignment
        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files in order; later files win over earlier ones."""
    for path in tuple(paths) if paths is not None else DEFAULT_ENV_FILES:
        load_env_file(path, override_existing=override_existing)


def _int(name: str, default: int, *, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def _char(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or len(raw) != 1:
        return default
    return raw


@dataclass(frozen=True, slots=True)
class RasterConfig:
    """Defaults used by the preview command line."""

    bezier_resolution: int = 16
    canvas_margin: int = 1
    filled_char: str = "#"
    empty_char: str = "."


def load_raster_config() -> RasterConfig:
    """Load immutable preview configuration from env vars."""
    defaults = RasterConfig()
    return RasterConfig(
        bezier_resolution=_int(
            "PIXELRASTER_BEZIER_RESOLUTION", defaults.bezier_resolution, minimum=1
        ),
        canvas_margin=_int("PIXELRASTER_CANVAS_MARGIN", defaults.canvas_margin, minimum=0),
        filled_char=_char("PIXELRASTER_FILLED_CHAR", defaults.filled_char),
        empty_char=_char("PIXELRASTER_EMPTY_CHAR", defaults.empty_char),
    )
