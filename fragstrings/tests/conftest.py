"""Unit tests configuration file."""

import pytest


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def formats_file(tmp_path):
    """Write a formats file and return its path."""

    def write(text: str) -> str:
        path = tmp_path / "formats.frag"
        path.write_text(text, encoding="utf-8")
        return str(path)

    return write
