"""
Pytest configuration and shared fixtures for all codeframe tests.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from codeframe.frame.renderer import FrameOptions


# =============================================================================
# Source fixtures
# =============================================================================

@pytest.fixture
def hello_source() -> str:
    return 'fn main() {\n  println!("Hello, world!");\n}'


@pytest.fixture
def numbered_source():
    """Twelve lines 'line 1' .. 'line 12' (two-digit gutter near the end)."""
    return "\n".join(f"line {i}" for i in range(1, 13))


@pytest.fixture
def tight_options() -> FrameOptions:
    """One context line on each side."""
    return FrameOptions(lines_above=1, lines_below=1)


@pytest.fixture(autouse=True)
def plain_environment(monkeypatch):
    """Keep color preference independent of the developer's shell."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("CODEFRAME_COLOR", raising=False)


def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
