"""Shared fixtures."""

import os

import pytest

SYSTEM_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/freefont/FreeSerif.ttf",
    "/usr/share/fonts/truetype/noto/NotoNaskhArabic-Regular.ttf",
    "/Library/Fonts/Arial Unicode.ttf",
    "C:\\Windows\\Fonts\\arial.ttf",
]


@pytest.fixture(autouse=True)
def clean_font_env(monkeypatch):
    """Keep the developer's font environment out of the tests."""
    monkeypatch.delenv("ARABIC_TTF_PATH", raising=False)
    monkeypatch.delenv("ARABIC_FONTS_DIR", raising=False)


@pytest.fixture
def system_font():
    for path in SYSTEM_FONT_CANDIDATES:
        if os.path.isfile(path):
            return path
    pytest.skip("No TrueType font available on this system")
