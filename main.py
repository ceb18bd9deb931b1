"""
main.py — desktop launcher for the mock exam
"""

import os
import socket
import subprocess
import sys
import time
import logging

from config import APP_HOME, BASE_DIR, LOG_FILE, DEFAULT_HOST, DEFAULT_PORT, DEFAULT_TIMEOUT, PACKAGE_DIR

# ── logging ──────────────────────────────────────────────────────────────────
try:
    os.makedirs(APP_HOME, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        handlers=[
            logging.FileHandler(LOG_FILE, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ]
    )
except OSError:
    # log file unavailable → console only
    logging.basicConfig(level=logging.INFO)

logger = logging.getLogger(__name__)

APP_SCRIPT = os.path.join(PACKAGE_DIR, "app.py")

# ── server / network utils ───────────────────────────────────────────────────

def _find_free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((DEFAULT_HOST, 0))
        return s.getsockname()[1]

def _wait_for_server(port: int, timeout: float = DEFAULT_TIMEOUT) -> bool:
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            with socket.create_connection((DEFAULT_HOST, port), timeout=0.5):
                return True
        except OSError:
            time.sleep(0.1)
    return False

def _open_browser(url: str) -> None:
    """
    Windows: open a Chrome or Edge app window when one is installed.
    Elsewhere, or when neither is found: the default browser.
    """
    candidates = []
    if sys.platform == "win32":
        candidates = [
            r"C:\Program Files\Google\Chrome\Application\chrome.exe",
            r"C:\Program Files (x86)\Google\Chrome\Application\chrome.exe",
            r"C:\Program Files\Microsoft\Edge\Application\msedge.exe",
            r"C:\Program Files (x86)\Microsoft\Edge\Application\msedge.exe",
        ]
    flags = [f"--app={url}", "--no-first-run", "--window-size=1280,800"]

    for path in candidates:
        if os.path.exists(path):
            logger.info(f"Opening browser: {path}")
            subprocess.Popen([path] + flags)
            return

    import webbrowser
    webbrowser.open(url)

def _start_server(port: int) -> subprocess.Popen:
    logger.info(f"Starting Streamlit - Port: {port}")
    return subprocess.Popen([
        sys.executable, "-m", "streamlit", "run", APP_SCRIPT,
        "--server.address", DEFAULT_HOST,
        "--server.port", str(port),
        "--server.headless", "true",
        "--browser.gatherUsageStats", "false",
    ], cwd=BASE_DIR)

# ── main ─────────────────────────────────────────────────────────────────────

def main() -> None:
    logger.info("=== Cloud+ Mock Exam Started ===")

    port = DEFAULT_PORT or _find_free_port()
    server = _start_server(port)

    try:
        if not _wait_for_server(port):
            logger.error("Streamlit did not start in time. Check for a stale process on the port.")
            sys.exit(1)

        logger.info("Server ready. Opening browser.")
        _open_browser(f"http://{DEFAULT_HOST}:{port}")

        # keep the launcher alive while the server runs
        while server.poll() is None:
            time.sleep(1)
        logger.error(f"Streamlit exited with code {server.returncode}")
    except KeyboardInterrupt:
        logger.info("Stopped by user.")
    finally:
        if server.poll() is None:
            server.terminate()
            server.wait(timeout=10)


if __name__ == "__main__":
    main()
