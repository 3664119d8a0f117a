"""Shared test fixtures for sibylline-scan."""

import pytest

from sibylline_scan import Scanner, ScanConfig


@pytest.fixture
def scanner_factory():
    """Build scanners over ad-hoc text."""

    def make(text: str, index: int = 0, config: ScanConfig | None = None) -> Scanner:
        return Scanner(text, index, config)

    return make


@pytest.fixture
def european_config():
    """Config for literals like ``1 234,5``."""
    return ScanConfig(digit_separators=frozenset(" "), decimal_point=",")
