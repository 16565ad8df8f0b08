"""Project configuration loading for sidediff.

This module is intentionally small and deterministic: it only reads
`sidediff.toml` and performs light validation.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sidediff.content import DEFAULT_SNIFF_BYTES
from sidediff.errors import SidediffConfigError

CONFIG_FILENAME = "sidediff.toml"

_STRATEGIES = ("auto", "content", "hunks")


@dataclass(frozen=True)
class EngineConfig:
    strategy: str = "auto"
    binary_sniff_bytes: int = DEFAULT_SNIFF_BYTES


@dataclass(frozen=True)
class ScrollConfig:
    line_height: float = 20
    anchor_fraction: float = 1 / 3
    scroll_threshold: float = 2


@dataclass(frozen=True)
class SidediffConfig:
    version: int = 1
    engine: EngineConfig = field(default_factory=EngineConfig)
    scroll: ScrollConfig = field(default_factory=ScrollConfig)


def default_config() -> SidediffConfig:
    return SidediffConfig()


def find_project_root(start: Path) -> Path:
    """Walk upward from `start` (file or directory) looking for `sidediff.toml`."""

    cur = start
    try:
        if cur.is_file():
            cur = cur.parent
    except OSError:
        # A broken symlink or otherwise non-stat'able path can still be walked from.
        cur = cur.parent

    cur = cur.resolve()
    while True:
        if (cur / CONFIG_FILENAME).is_file():
            return cur
        if cur.parent == cur:
            break
        cur = cur.parent

    raise SidediffConfigError(
        f"Could not find {CONFIG_FILENAME} by walking upward from start path."
    )


def _as_table(value: Any, *, name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SidediffConfigError(f"Expected [{name}] to be a table.")
    return value


def _as_int(value: Any, *, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise SidediffConfigError(f"Expected {name} to be an integer.")
    return value


def _as_number(value: Any, *, name: str) -> float:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise SidediffConfigError(f"Expected {name} to be a number.")
    return value


def _as_str(value: Any, *, name: str) -> str:
    if not isinstance(value, str):
        raise SidediffConfigError(f"Expected {name} to be a string.")
    return value


def load_config(*, root: Path | None = None, config_path: Path | None = None) -> SidediffConfig:
    """Load and validate `sidediff.toml`.

    If neither `root` nor `config_path` are provided, the project root is
    discovered by walking upward from the current working directory.
    """

    if config_path is None:
        if root is None:
            root = find_project_root(Path.cwd())
        config_path = root / CONFIG_FILENAME

    try:
        raw = config_path.read_bytes()
    except FileNotFoundError as e:
        raise SidediffConfigError(f"Missing {CONFIG_FILENAME} at: {config_path}") from e
    except OSError as e:
        raise SidediffConfigError(f"Failed reading config file: {config_path}") from e

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise SidediffConfigError(f"Config is not valid UTF-8: {config_path}") from e
    except tomllib.TOMLDecodeError as e:
        raise SidediffConfigError(f"Invalid TOML in {config_path}: {e}") from e

    version = data.get("version", None)
    if version is None:
        raise SidediffConfigError(f"Missing required `version = 1` in {CONFIG_FILENAME}.")
    version_i = _as_int(version, name="version")
    if version_i != 1:
        raise SidediffConfigError(f"Unsupported config version: {version_i} (expected 1).")

    engine_tbl = _as_table(data.get("engine"), name="engine")
    scroll_tbl = _as_table(data.get("scroll"), name="scroll")
    defaults = default_config()

    if "strategy" in engine_tbl:
        strategy = _as_str(engine_tbl["strategy"], name="engine.strategy")
    else:
        strategy = defaults.engine.strategy

    if "binary_sniff_bytes" in engine_tbl:
        sniff = _as_int(engine_tbl["binary_sniff_bytes"], name="engine.binary_sniff_bytes")
    else:
        sniff = defaults.engine.binary_sniff_bytes

    if "line_height" in scroll_tbl:
        line_height = _as_number(scroll_tbl["line_height"], name="scroll.line_height")
    else:
        line_height = defaults.scroll.line_height

    if "anchor_fraction" in scroll_tbl:
        anchor = _as_number(scroll_tbl["anchor_fraction"], name="scroll.anchor_fraction")
    else:
        anchor = defaults.scroll.anchor_fraction

    if "scroll_threshold" in scroll_tbl:
        threshold = _as_number(scroll_tbl["scroll_threshold"], name="scroll.scroll_threshold")
    else:
        threshold = defaults.scroll.scroll_threshold

    # Validation
    if strategy not in _STRATEGIES:
        raise SidediffConfigError(
            f"Invalid config: engine.strategy must be one of {', '.join(_STRATEGIES)}."
        )

    if sniff < 1:
        raise SidediffConfigError("Invalid config: engine.binary_sniff_bytes must be >= 1.")

    if line_height <= 0:
        raise SidediffConfigError("Invalid config: scroll.line_height must be > 0.")

    if not 0 <= anchor <= 1:
        raise SidediffConfigError("Invalid config: scroll.anchor_fraction must be within [0, 1].")

    if threshold < 0:
        raise SidediffConfigError("Invalid config: scroll.scroll_threshold must be >= 0.")

    return SidediffConfig(
        version=version_i,
        engine=EngineConfig(strategy=strategy, binary_sniff_bytes=sniff),
        scroll=ScrollConfig(
            line_height=line_height,
            anchor_fraction=anchor,
            scroll_threshold=threshold,
        ),
    )
