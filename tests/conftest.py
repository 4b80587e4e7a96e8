"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from filetable.client import InMemoryFileSource

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_files() -> dict[str, str | None]:
    """Upstream files covering valid, partially valid, failing and empty content."""
    return {
        "file1.csv": (
            "file,text,number,hex\n"
            "file1.csv,test text 1,123,a1b2c3d4e5f6a7b8c9d0e1f2a3b4c5d6\n"
            "file1.csv,another line,456,00112233445566778899aabbccddeeff"
        ),
        "file2.csv": (
            "file,text,number,hex\n"
            "file2.csv,valid data,789,ffeeddccbbaa99887766554433221100\n"
            "file2.csv,invalid,number,badhex,toomanyfields\n"
            "file2.csv,onlytext\n"
            "file2.csv,text3,999,11223344556677889900aabbccddeeff"
        ),
        "fileWithError.csv": None,
        "emptyFile.csv": "",
    }


@pytest.fixture
def memory_source(sample_files: dict[str, str | None]) -> InMemoryFileSource:
    return InMemoryFileSource(sample_files)
