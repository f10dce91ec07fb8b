"""Startup configuration read from ``FLIGHT_PANEL_*`` environment variables.

Everything is resolved once, before the window opens. A malformed value is a
``ConfigError`` naming the offending variable; nothing is defaulted silently.
"""

from __future__ import annotations

import logging
import os
import random
from collections.abc import Mapping
from dataclasses import dataclass

from .color_scheme import DEFAULT_COLOR_SCHEME, ColorScheme, parse_color_scheme
from .exceptions import ColorSchemeError, ConfigError

logger = logging.getLogger(__name__)

ENV_COLOR_SCHEME = "FLIGHT_PANEL_COLOR_SCHEME"
ENV_ATTITUDE_BACKGROUND = "FLIGHT_PANEL_ATTITUDE_BACKGROUND"
ENV_SEED = "FLIGHT_PANEL_SEED"
ENV_WINDOW = "FLIGHT_PANEL_WINDOW"
ENV_LOG_LEVEL = "FLIGHT_PANEL_LOG_LEVEL"

DEFAULT_WINDOW_SIZE = (1194, 834)
DEFAULT_LOG_LEVEL = "WARNING"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class PanelConfig:
    color_scheme: ColorScheme = DEFAULT_COLOR_SCHEME
    attitude_background: bool = False
    seed: int | None = None
    window_size: tuple[int, int] = DEFAULT_WINDOW_SIZE
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_bool(name: str, raw: str) -> bool:
    key = raw.strip().lower()
    if key in _TRUE:
        return True
    if key in _FALSE:
        return False
    raise ConfigError(f"{name}: expected one of 1/true/yes/on or 0/false/no/off, got {raw!r}")


def _parse_seed(name: str, raw: str) -> int | None:
    text = raw.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        raise ConfigError(f"{name}: expected an integer seed, got {raw!r}") from None


def _parse_window(name: str, raw: str) -> tuple[int, int]:
    text = raw.strip().lower()
    if not text:
        return DEFAULT_WINDOW_SIZE
    parts = text.split("x")
    if len(parts) != 2:
        raise ConfigError(f"{name}: expected WIDTHxHEIGHT, got {raw!r}")
    try:
        w, h = (int(p.strip()) for p in parts)
    except ValueError:
        raise ConfigError(f"{name}: expected WIDTHxHEIGHT, got {raw!r}") from None
    if w <= 0 or h <= 0:
        raise ConfigError(f"{name}: window size must be positive, got {raw!r}")
    return (w, h)


def _parse_log_level(name: str, raw: str) -> str:
    level = raw.strip().upper()
    if not level:
        return DEFAULT_LOG_LEVEL
    if level not in _LOG_LEVELS:
        raise ConfigError(f"{name}: expected one of {', '.join(_LOG_LEVELS)}, got {raw!r}")
    return level


def load_config(environ: Mapping[str, str] | None = None) -> PanelConfig:
    env = os.environ if environ is None else environ

    raw_scheme = env.get(ENV_COLOR_SCHEME, "").strip()
    if raw_scheme:
        try:
            scheme = parse_color_scheme(raw_scheme)
        except ColorSchemeError as exc:
            raise ColorSchemeError(f"{ENV_COLOR_SCHEME}: {exc}") from None
    else:
        scheme = DEFAULT_COLOR_SCHEME

    return PanelConfig(
        color_scheme=scheme,
        attitude_background=_parse_bool(ENV_ATTITUDE_BACKGROUND, env.get(ENV_ATTITUDE_BACKGROUND, "")),
        seed=_parse_seed(ENV_SEED, env.get(ENV_SEED, "")),
        window_size=_parse_window(ENV_WINDOW, env.get(ENV_WINDOW, "")),
        log_level=_parse_log_level(ENV_LOG_LEVEL, env.get(ENV_LOG_LEVEL, "")),
    )


def log_config(config: PanelConfig) -> None:
    logger.info(
        "config: scheme=%s attitude_background=%s seed=%s window=%dx%d",
        config.color_scheme.value,
        config.attitude_background,
        "entropy" if config.seed is None else config.seed,
        config.window_size[0],
        config.window_size[1],
    )


def new_seed() -> int | None:
    """Fresh seed from the OS entropy source, or ``None`` when there is none.

    ``None`` makes the simulation run without jitter instead of failing.
    """

    try:
        return random.SystemRandom().randint(1, 2**31 - 1)
    except NotImplementedError:
        logger.warning("OS entropy source unavailable; running the simulation without jitter")
        return None


def resolve_seed(config: PanelConfig) -> int | None:
    return config.seed if config.seed is not None else new_seed()
