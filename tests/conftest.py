import io

import pytest

from envcheck.core import output_utils

# --- Fixtures ---

@pytest.fixture
def console_output():
    """
    Redirects the report console to an in-memory buffer without colors.
    Returns the buffer; read it with .getvalue().
    """
    buffer = io.StringIO()
    output_utils.configure_console(no_color=True, file=buffer)
    yield buffer
    output_utils.configure_console()


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """An empty working directory for the check to run in."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    return tmp_path


@pytest.fixture
def write_env(project_dir):
    def _write(contents: str, name: str = ".env"):
        path = project_dir / name
        path.write_text(contents, encoding="utf-8")
        return path
    return _write
