#!/usr/bin/env python3
"""
Dev mode runner for mcp-fpds-ux

Runs the HTTP app under uvicorn and restarts it whenever a module in
mcp_fpds_ux/ is created, changed, moved or deleted.

Usage:
  python dev.py                  # PORT/HOST from the environment
  python dev.py --port 8080
"""
import argparse
import subprocess
import sys
import threading
import time
from pathlib import Path

from watchdog.events import FileSystemEvent, PatternMatchingEventHandler
from watchdog.observers import Observer

from mcp_fpds_ux.config import get_host, get_port

PACKAGE_DIR = Path(__file__).parent / "mcp_fpds_ux"
APP = "mcp_fpds_ux.server_http:app"

# Editors emit several events per save
RESTART_QUIET_SECONDS = 0.5


class UvicornSupervisor(PatternMatchingEventHandler):
    """Owns the uvicorn child process, restarting it on source changes."""

    def __init__(self, host: str, port: int):
        super().__init__(patterns=["*.py"], ignore_directories=True)
        self.command = [sys.executable, "-m", "uvicorn", APP, "--host", host, "--port", str(port)]
        self.process: subprocess.Popen | None = None
        self.last_restart = 0.0
        self.lock = threading.Lock()

    def start(self) -> None:
        with self.lock:
            self._terminate()
            print(f"$ {' '.join(self.command[1:])}", flush=True)
            # Output goes straight to this terminal
            self.process = subprocess.Popen(self.command)
            self.last_restart = time.monotonic()

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.event_type not in ("created", "modified", "moved", "deleted"):
            return
        if time.monotonic() - self.last_restart < RESTART_QUIET_SECONDS:
            return
        print(f"\n{Path(event.src_path).relative_to(PACKAGE_DIR.parent)} {event.event_type}, restarting", flush=True)
        self.start()

    def stop(self) -> None:
        with self.lock:
            self._terminate()

    def _terminate(self) -> None:
        if self.process and self.process.poll() is None:
            self.process.terminate()
            try:
                self.process.wait(timeout=5)
            except subprocess.TimeoutExpired:
                self.process.kill()
                self.process.wait()
        self.process = None


def main() -> int:
    parser = argparse.ArgumentParser(description="Auto-restarting dev server for the FPDS HTTP app")
    parser.add_argument("--host", default=get_host())
    parser.add_argument("--port", type=int, default=get_port())
    args = parser.parse_args()

    supervisor = UvicornSupervisor(args.host, args.port)
    observer = Observer()
    observer.schedule(supervisor, str(PACKAGE_DIR), recursive=True)

    print(f"mcp-fpds-ux dev mode on http://{args.host}:{args.port} (Ctrl+C to stop)")
    supervisor.start()
    observer.start()
    try:
        while observer.is_alive():
            observer.join(1)
    except KeyboardInterrupt:
        print("\nStopping dev server...")
    finally:
        observer.stop()
        observer.join()
        supervisor.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
