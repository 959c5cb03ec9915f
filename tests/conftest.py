import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.utils.models import SampleBody

# Ensure local source package (src/restspec) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "RESTSPEC_BASE_URL",
        "RESTSPEC_TIMEOUT",
        "RESTSPEC_FOLLOW_REDIRECTS",
        "RESTSPEC_MAX_WORKERS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def sample_body() -> SampleBody:
    return SampleBody(id="testId", list=["a", "b", "c"])


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    path = tmp_path / "test.txt"
    path.write_bytes(b"hello attachment")
    return path
