import pytest

from cli_todo import tasklist
from cli_todo.storage import Storage

TODAY = "10/19/26"


@pytest.fixture(autouse=True)
def fixed_today(monkeypatch):
    """Pin the creation date so rendered rows and saved files are predictable."""
    monkeypatch.setattr(tasklist, "today_stamp", lambda: TODAY)
    return TODAY


@pytest.fixture
def store(tmp_path):
    """Store backed by a tasks.json inside the test's temp directory."""
    return Storage(tmp_path / "tasks.json")


@pytest.fixture
def workdir(monkeypatch, tmp_path):
    """Run with tmp_path as cwd so the CLI's relative tasks.json lands there."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
