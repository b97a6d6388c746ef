"""Entry point that launches the Streamlit app and opens the browser.

Runs from a source checkout only; there is no frozen-bundle support.
"""

import sys
import threading
import time
import webbrowser
from pathlib import Path

import requests


PORT = 8501
URL = f"http://localhost:{PORT}"


def _wait_and_open_browser() -> None:
    """Poll the Streamlit server until it answers, then open the browser."""
    for _ in range(30):
        try:
            resp = requests.get(URL, timeout=2)
            if resp.status_code == 200:
                webbrowser.open(URL)
                return
        except requests.RequestException:
            pass
        time.sleep(1)


def main() -> None:
    src_dir = Path(__file__).resolve().parent / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    from streamlit.web import bootstrap

    app_path = str(src_dir / "TreeArt" / "app.py")

    threading.Thread(target=_wait_and_open_browser, daemon=True).start()

    bootstrap.run(
        app_path,
        is_hello=False,
        args=[],
        flag_options={
            "server.headless": True,
            "server.port": PORT,
            "browser.gatherUsageStats": False,
        },
    )


if __name__ == "__main__":
    main()
