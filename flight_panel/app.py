"""Pygame shell for the flight panel.

Six instruments in a 3x2 grid, each inside a titled frame. The shell only
drives the simulation on a fixed 50 ms step and paints the primitives the
gauge builders return; all instrument logic lives in the core modules.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

import pygame

from .color_scheme import Palette, resolve_color_scheme
from .config import PanelConfig, load_config, log_config, resolve_seed
from .flight_sim import FlightSim
from .gauges import (
    Circle,
    GaugeConfig,
    GaugeKind,
    Line,
    Polygon,
    Polyline,
    Primitive,
    RectShape,
    Text,
    gauge_half_extent,
    render_gauge,
)
from .geometry import Point
from .scheduler import FixedStepScheduler, MonotonicClock

logger = logging.getLogger(__name__)

TARGET_FPS = 60
SIM_STEP_S = 0.05
PANEL_COLUMNS = 3

PANEL_LAYOUT: tuple[tuple[GaugeKind, str], ...] = (
    (GaugeKind.TACHOMETER, "Engine RPM"),
    (GaugeKind.ALTIMETER, "Altimeter"),
    (GaugeKind.VSI, "Vertical Speed"),
    (GaugeKind.AIRSPEED, "Airspeed"),
    (GaugeKind.ATTITUDE, "Attitude"),
    (GaugeKind.HEADING, "Heading"),
)


def panel_cells(size: tuple[int, int], count: int = len(PANEL_LAYOUT)) -> list[pygame.Rect]:
    """Grid cells for ``count`` widgets, row major, filling the window."""

    w, h = size
    rows = max(1, -(-count // PANEL_COLUMNS))
    margin = max(6, min(20, w // 120))
    cell_w = max(1, (w - margin * (PANEL_COLUMNS + 1)) // PANEL_COLUMNS)
    cell_h = max(1, (h - margin * (rows + 1)) // rows)
    cells: list[pygame.Rect] = []
    for idx in range(count):
        row, col = divmod(idx, PANEL_COLUMNS)
        x = margin + col * (cell_w + margin)
        y = margin + row * (cell_h + margin)
        cells.append(pygame.Rect(x, y, cell_w, cell_h))
    return cells


class PrimitivePainter:
    """Paints gauge primitives into a target rect, scaled to fit."""

    def __init__(self) -> None:
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, px: int) -> pygame.font.Font:
        px = max(8, px)
        font = self._fonts.get(px)
        if font is None:
            font = pygame.font.Font(None, px)
            self._fonts[px] = font
        return font

    def paint(
        self,
        surface: pygame.Surface,
        primitives: Sequence[Primitive],
        rect: pygame.Rect,
        half_extent: tuple[float, float],
    ) -> None:
        hw, hh = half_extent
        scale = min(rect.w / (2.0 * hw), rect.h / (2.0 * hh))
        ox, oy = rect.center

        def pt(p: Point) -> tuple[float, float]:
            return (ox + p[0] * scale, oy + p[1] * scale)

        def px(width: float) -> int:
            return max(1, int(round(width * scale)))

        prev_clip = surface.get_clip()
        surface.set_clip(rect)
        try:
            for prim in primitives:
                if isinstance(prim, Line):
                    pygame.draw.line(surface, prim.color, pt(prim.start), pt(prim.end), px(prim.width))
                elif isinstance(prim, Polyline):
                    points = [pt(p) for p in prim.points]
                    width = px(prim.width)
                    pygame.draw.lines(surface, prim.color, False, points, width)
                    # Round the joints of thick arcs.
                    if width > 3:
                        for p in points:
                            pygame.draw.circle(surface, prim.color, p, width / 2.0)
                elif isinstance(prim, Polygon):
                    points = [pt(p) for p in prim.points]
                    if prim.fill is not None:
                        pygame.draw.polygon(surface, prim.fill, points)
                    if prim.outline is not None:
                        pygame.draw.polygon(surface, prim.outline, points, px(prim.width))
                elif isinstance(prim, Circle):
                    center = pt(prim.center)
                    radius = max(1.0, prim.radius * scale)
                    if prim.fill is not None:
                        pygame.draw.circle(surface, prim.fill, center, radius)
                    if prim.outline is not None:
                        pygame.draw.circle(surface, prim.outline, center, radius, px(prim.width))
                elif isinstance(prim, RectShape):
                    x, y = pt((prim.x, prim.y))
                    r = pygame.Rect(int(x), int(y), max(1, int(prim.w * scale)), max(1, int(prim.h * scale)))
                    radius = int(prim.corner_radius * scale)
                    if prim.fill is not None:
                        pygame.draw.rect(surface, prim.fill, r, border_radius=radius)
                    if prim.outline is not None:
                        pygame.draw.rect(surface, prim.outline, r, px(prim.width), border_radius=radius)
                elif isinstance(prim, Text):
                    self._blit_text(surface, prim, pt(prim.pos), scale)
        finally:
            surface.set_clip(prev_clip)

    def _blit_text(self, surface: pygame.Surface, prim: Text, pos: tuple[float, float], scale: float) -> None:
        img = self._font(int(round(prim.size * scale))).render(prim.text, True, prim.color)
        if prim.rotation_deg:
            # pygame rotates counter-clockwise.
            img = pygame.transform.rotate(img, -prim.rotation_deg)
        if prim.align == "left":
            dest = img.get_rect(midleft=(int(pos[0]), int(pos[1])))
        elif prim.align == "right":
            dest = img.get_rect(midright=(int(pos[0]), int(pos[1])))
        else:
            dest = img.get_rect(center=(int(pos[0]), int(pos[1])))
        surface.blit(img, dest)


class App:
    def __init__(
        self,
        surface: pygame.Surface,
        *,
        sim: FlightSim,
        scheduler: FixedStepScheduler,
        palette: Palette,
        attitude_background: bool = False,
    ) -> None:
        self._surface = surface
        self._sim = sim
        self._scheduler = scheduler
        self._palette = palette
        self._attitude_background = attitude_background
        self._painter = PrimitivePainter()
        self._title_font = pygame.font.Font(None, 26)
        self._gauge_config = GaugeConfig(transparent_background=attitude_background)
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    @property
    def sim(self) -> FlightSim:
        return self._sim

    def quit(self) -> None:
        self._running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.quit()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.quit()

    def update(self) -> int:
        steps = self._scheduler.due_steps()
        for _ in range(steps):
            before = self._sim.phase
            self._sim.tick(self._scheduler.step_s)
            after = self._sim.phase
            if after is not before:
                logger.info("phase %s -> %s", before.value, after.value)
        return steps

    def render(self) -> None:
        surface = self._surface
        palette = self._palette
        snapshot = self._sim.snapshot()
        surface.fill(palette.bg)

        if self._attitude_background:
            w, h = surface.get_size()
            bg_config = GaugeConfig(background_mode=True, width=float(w), height=float(h))
            primitives = render_gauge(GaugeKind.ATTITUDE, snapshot, palette, bg_config)
            self._painter.paint(surface, primitives, surface.get_rect(), (w / 2.0, h / 2.0))

        for cell, (kind, title) in zip(panel_cells(surface.get_size()), PANEL_LAYOUT, strict=True):
            # The full-screen horizon takes the attitude widget's place.
            if self._attitude_background and kind is GaugeKind.ATTITUDE:
                continue
            content = self._draw_frame(cell, title)
            primitives = render_gauge(kind, snapshot, palette, self._gauge_config)
            self._painter.paint(surface, primitives, content, gauge_half_extent(kind, self._gauge_config))

    def _draw_frame(self, cell: pygame.Rect, title: str) -> pygame.Rect:
        """Widget frame and title; returns the rect left for the instrument."""

        palette = self._palette
        pygame.draw.rect(self._surface, palette.border, cell, 2, border_radius=8)
        label = self._title_font.render(title, True, palette.primary)
        header_h = label.get_height() + 8
        self._surface.blit(label, label.get_rect(center=(cell.centerx, cell.y + header_h // 2 + 2)))
        return pygame.Rect(cell.x + 6, cell.y + header_h + 2, max(1, cell.w - 12), max(1, cell.h - header_h - 8))


def run(
    *,
    max_frames: int | None = None,
    event_injector: Callable[[int], None] | None = None,
    config: PanelConfig | None = None,
) -> int:
    cfg = load_config() if config is None else config
    log_config(cfg)
    palette = resolve_color_scheme(cfg.color_scheme)
    logger.info("color scheme %s", palette.scheme.value)
    sim = FlightSim(seed=resolve_seed(cfg))

    pygame.init()
    try:
        pygame.display.set_caption("Flight Panel")
        surface = pygame.display.set_mode(cfg.window_size, pygame.RESIZABLE)
        clock = pygame.time.Clock()

        app = App(
            surface,
            sim=sim,
            scheduler=FixedStepScheduler(MonotonicClock(), step_s=SIM_STEP_S),
            palette=palette,
            attitude_background=cfg.attitude_background,
        )

        frame = 0
        while app.running:
            if event_injector is not None:
                event_injector(frame)

            for event in pygame.event.get():
                app.handle_event(event)

            app.update()
            app.render()

            pygame.display.flip()

            frame += 1
            if max_frames is not None and frame >= max_frames:
                break

            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()

    return 0
