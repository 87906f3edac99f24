"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svger.engine.generator import Generator
from svger.services.config_store import ConfigStore
from svger.services.orchestrator import Orchestrator
from svger.services.storage import LockStore


# Lucide icons, as they come out of the design tool export

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

BAR_CHART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <line x1="18" x2="18" y1="20" y2="10"/>
  <line x1="12" x2="12" y1="20" y2="4"/>
  <line x1="6" x2="6" y1="20" y2="14"/>
</svg>'''

SETTINGS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M12.22 2h-.44a2 2 0 0 0-2 2v.18a2 2 0 0 1-1 1.73l-.43.25a2 2 0 0 1-2 0l-.15-.08a2 2 0 0 0-2.73.73l-.22.38a2 2 0 0 0 .73 2.73l.15.1a2 2 0 0 1 1 1.72v.51a2 2 0 0 1-1 1.74l-.15.09a2 2 0 0 0-.73 2.73l.22.38a2 2 0 0 0 2.73.73l.15-.08a2 2 0 0 1 2 0l.43.25a2 2 0 0 1 1 1.73V20a2 2 0 0 0 2 2h.44a2 2 0 0 0 2-2v-.18a2 2 0 0 1 1-1.73l.43-.25a2 2 0 0 1 2 0l.15.08a2 2 0 0 0 2.73-.73l.22-.39a2 2 0 0 0-.73-2.73l-.15-.08a2 2 0 0 1-1-1.74v-.5a2 2 0 0 1 1-1.74l.15-.09a2 2 0 0 0 .73-2.73l-.22-.38a2 2 0 0 0-2.73-.73l-.15.08a2 2 0 0 1-2 0l-.43-.25a2 2 0 0 1-1-1.73V4a2 2 0 0 0-2-2z"/>
  <circle cx="12" cy="12" r="3"/>
</svg>'''

# Minimal root-attribute sample
FILLED_SVG = '<svg viewBox="0 0 32 32" width="32" height="32" fill="#fff"><circle/></svg>'

# Editor export with everything the normalizer strips
EXPORTED_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">
<!-- Generator: Sketch 52.6 -->
<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 16 16">
  <path style="fill:red" fill-rule="evenodd" d="M0 0h16v16H0z"/>
</svg>'''

FILL_RULE_SVG = '<svg viewBox="0 0 16 16"><path fill-rule="evenodd" clip-rule="evenodd" d="M0 0h16v16H0z"/></svg>'

TEXT_SVG = '<svg viewBox="0 0 40 10"><text x="0" y="8">{count} @home</text></svg>'

MALFORMED_SVG = "<not-valid-svg"


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def home_svg() -> str:
    return HOME_SVG


@pytest.fixture
def settings_svg() -> str:
    return SETTINGS_SVG


@pytest.fixture
def generator() -> Generator:
    return Generator()


@pytest.fixture
def icon_dir(tmp_path):
    """Four valid icons and one malformed file."""
    src = tmp_path / "icons"
    src.mkdir()
    (src / "home.svg").write_text(HOME_SVG)
    (src / "settings.svg").write_text(SETTINGS_SVG)
    (src / "circle.svg").write_text(CIRCLE_SVG)
    (src / "bar-chart.svg").write_text(BAR_CHART_SVG)
    (src / "broken.svg").write_text(MALFORMED_SVG)
    return src


@pytest.fixture
def orchestrator(tmp_path, generator) -> Orchestrator:
    return Orchestrator(
        generator=generator,
        config=ConfigStore(tmp_path / ".svgconfig.json"),
        locks=LockStore(tmp_path / ".svg-lock"),
        max_workers=2,
    )
