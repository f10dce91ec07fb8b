from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest  # noqa: E402

from flight_panel import __main__ as entry  # noqa: E402


def test_main_reports_bad_configuration_with_exit_status_2(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLIGHT_PANEL_COLOR_SCHEME", "neon")
    called: list[object] = []
    monkeypatch.setattr(entry, "run", lambda **kw: called.append(kw) or 0)
    assert entry.main() == 2
    assert called == []


def test_main_passes_loaded_config_to_run(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLIGHT_PANEL_SEED", "11")
    monkeypatch.delenv("FLIGHT_PANEL_COLOR_SCHEME", raising=False)
    seen: dict[str, object] = {}

    def fake_run(**kw: object) -> int:
        seen.update(kw)
        return 0

    monkeypatch.setattr(entry, "run", fake_run)
    assert entry.main() == 0
    assert seen["config"].seed == 11  # type: ignore[attr-defined]
