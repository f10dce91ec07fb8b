"""Colour schemes for the instrument panel.

All schemes use a true black background (OLED friendly).

- ``dark_bmw``: warm amber/orange/red spectrum, the classic BMW instrument look.
- ``sunny_day``: high contrast white/cyan/green for bright sunlight.

The scheme is picked once at startup and the resulting ``Palette`` is passed
explicitly to every gauge render call.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import StrEnum
from types import MappingProxyType

from .exceptions import ColorSchemeError

RGB = tuple[int, int, int]


class ColorScheme(StrEnum):
    DARK_BMW = "dark_bmw"
    SUNNY_DAY = "sunny_day"


DEFAULT_COLOR_SCHEME = ColorScheme.DARK_BMW

PALETTE_ROLES: tuple[str, ...] = (
    "bg",
    "primary",
    "secondary",
    "accent",
    "border",
    "tick",
    "needle",
    "warning",
    "critical",
    "positive",
    "negative",
    "arc_white",
    "arc_green",
    "arc_yellow",
    "arc_red",
    "sky",
    "ground",
    "horizon",
    "cardinal",
    "aircraft",
)

_SCHEMES: dict[ColorScheme, dict[str, RGB]] = {
    ColorScheme.DARK_BMW: {
        "bg": (0, 0, 0),
        "primary": (255, 180, 0),  # amber: text and numbers
        "secondary": (255, 140, 0),
        "accent": (255, 220, 0),
        "border": (255, 100, 0),
        "tick": (255, 30, 0),
        "needle": (255, 140, 0),
        "warning": (255, 220, 0),
        "critical": (255, 0, 0),
        "positive": (255, 220, 0),  # climb
        "negative": (255, 0, 0),  # descent
        "arc_white": (255, 200, 150),
        "arc_green": (200, 180, 0),
        "arc_yellow": (255, 180, 0),
        "arc_red": (255, 0, 0),
        # Attitude indicator keeps traditional colours.
        "sky": (30, 60, 130),
        "ground": (140, 90, 50),
        "horizon": (255, 220, 0),
        "cardinal": (255, 220, 0),
        "aircraft": (255, 140, 0),
    },
    ColorScheme.SUNNY_DAY: {
        "bg": (0, 0, 0),
        "primary": (255, 255, 255),
        "secondary": (0, 255, 255),
        "accent": (0, 255, 128),
        "border": (255, 255, 255),
        "tick": (0, 255, 255),
        "needle": (255, 255, 255),
        "warning": (255, 255, 0),
        # Magenta reads better than red in direct sun.
        "critical": (255, 0, 128),
        "positive": (0, 255, 128),
        "negative": (255, 0, 128),
        "arc_white": (255, 255, 255),
        "arc_green": (0, 255, 100),
        "arc_yellow": (255, 255, 0),
        "arc_red": (255, 0, 128),
        "sky": (0, 100, 200),
        "ground": (139, 90, 43),
        "horizon": (255, 255, 255),
        "cardinal": (0, 255, 128),
        "aircraft": (255, 255, 255),
    },
}


class Palette(Mapping[str, RGB]):
    """Read-only role -> RGB mapping; roles are also readable as attributes."""

    __slots__ = ("_scheme", "_colors")

    def __init__(self, scheme: ColorScheme, colors: Mapping[str, RGB]) -> None:
        missing = [role for role in PALETTE_ROLES if role not in colors]
        if missing:
            raise ColorSchemeError(f"scheme {scheme.value!r} is missing roles: {', '.join(missing)}")
        extra = sorted(set(colors) - set(PALETTE_ROLES))
        if extra:
            raise ColorSchemeError(f"scheme {scheme.value!r} has unknown roles: {', '.join(extra)}")
        self._scheme = scheme
        self._colors = MappingProxyType({role: tuple(colors[role]) for role in PALETTE_ROLES})

    @property
    def scheme(self) -> ColorScheme:
        return self._scheme

    def __getitem__(self, role: str) -> RGB:
        return self._colors[role]

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __getattr__(self, role: str) -> RGB:
        if role.startswith("_"):
            raise AttributeError(role)
        try:
            return self._colors[role]
        except KeyError:
            raise AttributeError(role) from None

    def __repr__(self) -> str:
        return f"Palette({self._scheme.value!r})"

    def dim(self, role: str, factor: float) -> RGB:
        r, g, b = self._colors[role]
        return (int(r * factor), int(g * factor), int(b * factor))


def available_schemes() -> list[str]:
    return [scheme.value for scheme in ColorScheme]


def parse_color_scheme(scheme_id: ColorScheme | str) -> ColorScheme:
    if isinstance(scheme_id, ColorScheme):
        return scheme_id
    key = str(scheme_id).strip().lower()
    try:
        return ColorScheme(key)
    except ValueError:
        raise ColorSchemeError(
            f"unknown color scheme {scheme_id!r}; expected one of: {', '.join(available_schemes())}"
        ) from None


def resolve_color_scheme(scheme_id: ColorScheme | str) -> Palette:
    scheme = parse_color_scheme(scheme_id)
    return Palette(scheme, _SCHEMES[scheme])
