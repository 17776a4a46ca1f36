"""Command-line entry point for Omar's Cousins.

RUN_MODE=integrated (default) serves the API and the chat page from one
uvicorn process on PORT. RUN_MODE=separate starts the API on PORT and the
chat page on UI_PORT as two child processes.

In both modes the chat page posts questions to API_BASE_URL, which defaults
to the local API port unless set explicitly.
"""

import logging
import os
import subprocess
import sys
import time

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

STORAGE_SECRET_DEFAULT = "omars-cousins-secret"


def configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def point_ui_at_api(port: int) -> str:
    """Default API_BASE_URL to the API served on ``port``.

    An API_BASE_URL already in the environment is left alone.

    Returns:
        The base URL the chat page will post to.
    """
    return os.environ.setdefault("API_BASE_URL", f"http://localhost:{port}")


def serve_integrated(host: str, port: int) -> None:
    """Serve the API and the NiceGUI page from a single FastAPI app."""
    import uvicorn
    from nicegui import ui

    from omars_cousins.api.app import create_app
    from omars_cousins.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()
    ui.run_with(
        app,
        title="Omar's Cousins",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", STORAGE_SECRET_DEFAULT),
    )

    logger.info(f"Chat UI and API on http://localhost:{port} (docs at /docs)")
    uvicorn.run(app, host=host, port=port, log_level=os.getenv("LOG_LEVEL", "info").lower())


def serve_separate(host: str, port: int) -> None:
    """Run the API and the chat page as two processes until either exits."""
    api_cmd = [
        sys.executable, "-m", "uvicorn", "omars_cousins.api.app:app",
        "--host", host, "--port", str(port),
    ]
    ui_cmd = [sys.executable, "-m", "omars_cousins.ui.chat_page"]

    logger.info(f"API on port {port}, chat UI on port {os.getenv('UI_PORT', '8080')}")
    children = [subprocess.Popen(api_cmd), subprocess.Popen(ui_cmd)]
    try:
        while all(child.poll() is None for child in children):
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Shutting down servers...")
    finally:
        for child in children:
            child.terminate()
        for child in children:
            child.wait()


def main() -> None:
    load_dotenv()
    configure_logging()

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    mode = os.getenv("RUN_MODE", "integrated").lower()

    api_base_url = point_ui_at_api(port)
    logger.info(f"Starting Omar's Cousins in {mode} mode, UI talks to {api_base_url}")

    if mode == "separate":
        serve_separate(host, port)
    else:
        serve_integrated(host, port)


if __name__ == "__main__":
    main()
