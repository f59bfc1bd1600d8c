"""Shared fixtures for memthresh tests."""

import pytest

SAMPLE_MEMINFO = """\
MemTotal:       16303428 kB
MemFree:          716124 kB
MemAvailable:    9114856 kB
Buffers:          512344 kB
Cached:          8125616 kB
SwapCached:        10240 kB
Active:          7392188 kB
SwapTotal:       2097148 kB
SwapFree:        1572860 kB
Dirty:               964 kB
"""


@pytest.fixture
def meminfo_file(tmp_path, monkeypatch):
    """Write meminfo text to a temp file and point MEMTHRESH_MEMINFO at it."""

    def _write(text: str):
        path = tmp_path / "meminfo"
        path.write_text(text)
        monkeypatch.setenv("MEMTHRESH_MEMINFO", str(path))
        return path

    return _write


@pytest.fixture
def posix_shell(monkeypatch):
    """Make the login shell lookup return /bin/sh."""
    monkeypatch.setattr("memthresh.runner.resolve_login_shell", lambda: "/bin/sh")
    return "/bin/sh"
