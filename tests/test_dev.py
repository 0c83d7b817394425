"""
Tests for the dev-mode uvicorn supervisor
"""
import sys
from unittest.mock import MagicMock, patch

import pytest
from watchdog.events import FileModifiedEvent

import dev

CHANGED = str(dev.PACKAGE_DIR / "core" / "query.py")


@pytest.fixture
def popen():
    with patch("dev.subprocess.Popen") as popen:
        popen.return_value.poll.return_value = None
        yield popen


class TestUvicornSupervisor:
    """Test UvicornSupervisor restarts."""

    def test_command(self):
        supervisor = dev.UvicornSupervisor("127.0.0.1", 8080)
        assert supervisor.command == [
            sys.executable, "-m", "uvicorn", "mcp_fpds_ux.server_http:app",
            "--host", "127.0.0.1", "--port", "8080",
        ]

    def test_change_restarts_server(self, popen):
        supervisor = dev.UvicornSupervisor("127.0.0.1", 8080)
        supervisor.start()
        first = popen.return_value
        supervisor.last_restart -= 10

        supervisor.on_any_event(FileModifiedEvent(CHANGED))

        assert popen.call_count == 2
        first.terminate.assert_called()

    def test_burst_of_events_restarts_once(self, popen):
        supervisor = dev.UvicornSupervisor("127.0.0.1", 8080)
        supervisor.start()

        supervisor.on_any_event(FileModifiedEvent(CHANGED))
        supervisor.on_any_event(FileModifiedEvent(CHANGED))

        assert popen.call_count == 1

    def test_other_event_types_ignored(self, popen):
        supervisor = dev.UvicornSupervisor("127.0.0.1", 8080)
        supervisor.start()
        supervisor.last_restart -= 10

        supervisor.on_any_event(MagicMock(event_type="opened", src_path=CHANGED))

        assert popen.call_count == 1

    def test_stop(self, popen):
        supervisor = dev.UvicornSupervisor("127.0.0.1", 8080)
        supervisor.start()

        supervisor.stop()

        popen.return_value.terminate.assert_called_once()
        assert supervisor.process is None
