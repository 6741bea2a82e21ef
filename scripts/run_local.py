#!/usr/bin/env python3
"""Local runner.

Starts the notes service and the Streamlit UI, waits for both to accept
connections, and keeps them running until interrupted.
"""

import atexit
import signal
import socket
import subprocess
import sys
import time

import httpx

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

SERVICE = {
    "name": "Notes service",
    "cmd": [sys.executable, "-m", "notes_server.main"],
    "port": 3001,
}

UI = {
    "name": "Streamlit UI",
    "cmd": [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        "notes_ui/app.py",
        "--server.headless",
        "true",
    ],
    "port": 8501,
}

STARTUP_TIMEOUT = 30  # seconds to wait for each process

# ---------------------------------------------------------------------------
# Process management
# ---------------------------------------------------------------------------

_processes: list[subprocess.Popen] = []


def _cleanup() -> None:
    """Kill all child processes."""
    for proc in _processes:
        try:
            proc.terminate()
        except OSError:
            pass
    # Give them a moment, then force-kill
    time.sleep(1)
    for proc in _processes:
        try:
            proc.kill()
        except OSError:
            pass
    print("\n--- All processes cleaned up ---")


atexit.register(_cleanup)
signal.signal(signal.SIGINT, lambda *_: sys.exit(0))
signal.signal(signal.SIGTERM, lambda *_: sys.exit(0))


def start_process(cmd: list[str], name: str) -> subprocess.Popen:
    """Start a command as a background process."""
    proc = subprocess.Popen(cmd)
    _processes.append(proc)
    print(f"  Started {name} (PID {proc.pid})")
    return proc


def wait_for_port(port: int, name: str, timeout: int = STARTUP_TIMEOUT) -> bool:
    """Poll a port via TCP until it accepts connections or timeout is reached."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            with socket.create_connection(("localhost", port), timeout=1):
                print(f"  {name} (port {port}) is ready")
                return True
        except OSError:
            pass
        time.sleep(0.5)
    print(f"  TIMEOUT: {name} (port {port}) did not start in {timeout}s")
    return False


def wait_for_service(port: int, timeout: int = STARTUP_TIMEOUT) -> bool:
    """Wait for the notes service health endpoint to answer."""
    url = f"http://localhost:{port}/health"
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            with httpx.Client(timeout=5) as client:
                resp = client.get(url)
                if resp.status_code == 200:
                    print(f"  Notes service (port {port}) is healthy")
                    return True
        except (httpx.ConnectError, httpx.ReadTimeout):
            pass
        time.sleep(0.5)
    print(f"  TIMEOUT: Notes service (port {port}) did not start in {timeout}s")
    return False


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> int:
    print("=" * 60)
    print("Notes — local run")
    print("=" * 60)

    print("\n--- Starting notes service ---")
    start_process(SERVICE["cmd"], SERVICE["name"])
    if not wait_for_service(SERVICE["port"]):
        print("FATAL: Notes service failed to start. Aborting.")
        return 1

    print("\n--- Starting UI ---")
    start_process(UI["cmd"], UI["name"])
    if not wait_for_port(UI["port"], UI["name"]):
        print("FATAL: UI failed to start. Aborting.")
        return 1

    print(f"\nOpen http://localhost:{UI['port']} — Ctrl+C to stop.")
    while all(proc.poll() is None for proc in _processes):
        time.sleep(1)
    print("A child process exited; shutting down.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
