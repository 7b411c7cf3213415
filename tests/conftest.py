import pytest
from click.testing import CliRunner

from commitguard.registry import TypeRegistry

@pytest.fixture
def cli_runner():
    """Fixture for testing CLI commands."""
    return CliRunner()

@pytest.fixture
def default_registry():
    """The registry of default commit types."""
    return TypeRegistry.default()

@pytest.fixture
def scoped_registry():
    """A registry where feat and fix require a scope, like the classic hook."""
    return TypeRegistry.build("feat=scope,description;fix=scope,description;docs=;chore=")

@pytest.fixture
def message_file(tmp_path):
    """Write a commit message file the way git hands it to commit-msg hooks."""
    def _write(text: str):
        path = tmp_path / "COMMIT_EDITMSG"
        path.write_text(text)
        return path
    return _write

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep COMMIT_GUARD_* variables from the developer's shell out of tests."""
    for name in (
        "COMMIT_GUARD_IGNORE_CASE",
        "COMMIT_GUARD_CONTINUE_ON_ERROR",
        "COMMIT_GUARD_TYPES",
        "COMMIT_GUARD_SHOW_TABLE",
        "COMMIT_GUARD_ALWAYS_LOG",
        "COMMIT_GUARD_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
