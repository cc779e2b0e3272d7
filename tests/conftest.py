import sys
from datetime import date
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `forest_fire` and `visualization`.

    The packages live under `src/` and may not be installed
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def start_date():
    """A fixed first day so calendar assertions do not depend on today."""
    return date(2030, 1, 1)
