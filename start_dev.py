"""Convenience launcher for the FileGate development server.

Usage:
    Windows: python start_dev.py [path-to-serve]
    Linux:   python3 start_dev.py [path-to-serve]

Press Ctrl+C to stop. Runs Uvicorn with --reload against the app factory,
serving the given directory (default: the current directory). Run from the
repository root.
"""

from __future__ import annotations

import os
import signal
import subprocess
import sys
import time
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
BACKEND_DIR = ROOT_DIR / "backend"

BACKEND_VENV = ROOT_DIR / (
    ".venv\\Scripts\\python.exe" if os.name == "nt" else ".venv/bin/python"
)

# ANSI colors (disabled on Windows without VT support)
if os.name == "nt":
    os.system("")  # enable VT100 on Windows 10+

CYAN = "\033[36m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
RESET = "\033[0m"


def log(level: str, msg: str) -> None:
    colors = {"info": CYAN, "start": GREEN, "stop": YELLOW, "error": RED}
    color = colors.get(level, "")
    print(f"{color}[{level}]{RESET} {msg}")


def resolve_python() -> str:
    """Prefer the project venv, fall back to the running interpreter."""
    if BACKEND_VENV.exists():
        return str(BACKEND_VENV)
    log("info", "No venv found, using system Python")
    return sys.executable


def check_dependencies(python: str) -> bool:
    """Verify critical packages are importable."""
    result = subprocess.run(
        [python, "-c", "import fastapi; import uvicorn; import pydantic_settings"],
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        log("error", "Missing dependencies. Run:")
        log("error", f"  cd {ROOT_DIR} && pip install -e '.[dev]'")
        return False
    return True


def terminate(proc: subprocess.Popen) -> None:
    if proc.poll() is not None:
        return
    log("stop", "backend")
    try:
        if os.name == "nt":
            proc.send_signal(signal.CTRL_BREAK_EVENT)
        else:
            try:
                os.killpg(os.getpgid(proc.pid), signal.SIGTERM)
            except ProcessLookupError:
                pass
        proc.wait(timeout=10)
    except subprocess.TimeoutExpired:
        proc.kill()


def main() -> int:
    serve_dir = Path(sys.argv[1] if len(sys.argv) > 1 else ".").resolve()
    if not serve_dir.is_dir():
        log("error", f"Not a directory: {serve_dir}")
        return 1

    python = resolve_python()
    log("info", f"Python: {python}")
    log("info", f"Serving: {serve_dir}")

    if not check_dependencies(python):
        return 1

    env = dict(os.environ)
    env["FILEGATE_ROOT_DIR"] = str(serve_dir)
    env.setdefault("FILEGATE_DEBUG", "true")
    env.setdefault("FILEGATE_LOG_LEVEL", "DEBUG")

    cmd = [
        python, "-m", "uvicorn", "filegate.main:create_app", "--factory",
        "--reload", "--reload-dir", str(BACKEND_DIR / "filegate"),
        "--host", "localhost", "--port", "8080",
    ]
    log("start", " ".join(cmd))
    if os.name == "nt":
        proc = subprocess.Popen(
            cmd, cwd=BACKEND_DIR, env=env,
            creationflags=subprocess.CREATE_NEW_PROCESS_GROUP,
        )
    else:
        proc = subprocess.Popen(cmd, cwd=BACKEND_DIR, env=env, start_new_session=True)

    log("info", "")
    log("info", "  Files:   http://localhost:8080/api/files")
    log("info", "  Health:  http://localhost:8080/api/health")
    log("info", "  Docs:    http://localhost:8080/docs")
    log("info", "")
    log("info", "Press Ctrl+C to stop")

    try:
        while True:
            retcode = proc.poll()
            if retcode is not None:
                log("info", f"backend exited with code {retcode}")
                return retcode
            time.sleep(0.5)
    except KeyboardInterrupt:
        print()
        log("info", "Ctrl+C received, shutting down...")
        return 0
    finally:
        terminate(proc)


if __name__ == "__main__":
    raise SystemExit(main())
