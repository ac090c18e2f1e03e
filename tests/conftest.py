import sys
from pathlib import Path

import pytest

# Ensure local source package (src/restler) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("RESTLER_BASE_URL", raising=False)
    monkeypatch.delenv("RESTLER_TIMEOUT", raising=False)
    monkeypatch.delenv("RESTLER_DISABLE_SSL_VERIFY", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://example.com"
