"""Application launcher.

Integrated mode serves the query endpoint and the chat widget from one
uvicorn process. Separate mode runs the widget as a child NiceGUI process
pointed at the API through API_BASE_URL, derived from HOST and PORT.
"""

import logging
import os
import subprocess
import sys
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

_WILDCARD_HOSTS = {"", "0.0.0.0", "::"}


class RunMode(str, Enum):
    INTEGRATED = "integrated"
    SEPARATE = "separate"


class ServerSettings(BaseModel):
    """Server settings read from the environment.

    Attributes:
        host: Interface the API binds to.
        port: API port (and widget port in integrated mode).
        ui_port: Widget port in separate mode.
        mode: Integrated or separate processes.
        log_level: Root log level name.
        storage_secret: NiceGUI storage secret.
    """

    model_config = ConfigDict(validate_default=True)

    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: os.getenv("PORT", "8000"), gt=0, lt=65536)
    ui_port: int = Field(default_factory=lambda: os.getenv("UI_PORT", "8080"), gt=0, lt=65536)
    mode: RunMode = Field(default_factory=lambda: os.getenv("RUN_MODE", "integrated").lower())
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    storage_secret: str = Field(
        default_factory=lambda: os.getenv("NICEGUI_STORAGE_SECRET", "support-chat-secret")
    )

    @property
    def public_host(self) -> str:
        return "localhost" if self.host in _WILDCARD_HOSTS else self.host

    @property
    def api_base_url(self) -> str:
        """URL the widget uses to reach the query endpoint."""
        return f"http://{self.public_host}:{self.port}"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # httpx logs request URLs at INFO, and the Gemini key travels in the query string
    logging.getLogger("httpx").setLevel(logging.WARNING)


def widget_environment(settings: ServerSettings) -> dict[str, str]:
    """Environment for the separate widget process."""
    return {
        **os.environ,
        "API_BASE_URL": settings.api_base_url,
        "HOST": settings.host,
        "UI_PORT": str(settings.ui_port),
    }


def run_integrated(settings: ServerSettings) -> None:
    """Serve the query endpoint with NiceGUI mounted on the same app."""
    import uvicorn
    from nicegui import ui

    from support_chat.api.app import create_app
    from support_chat.ui.chat_page import chat_page  # noqa: F401 - Registers the page
    from support_chat.ui.messages import PAGE_TITLE

    # The widget calls back into this same server
    os.environ["API_BASE_URL"] = settings.api_base_url

    app = create_app()
    ui.run_with(app, title=PAGE_TITLE, favicon="💬", storage_secret=settings.storage_secret)

    logger.info(f"Chat UI and API on {settings.api_base_url} (docs at /docs)")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


def run_separate(settings: ServerSettings) -> None:
    """Serve the API in this process and the widget in a child process."""
    import uvicorn

    logger.info(
        f"API on {settings.api_base_url}, "
        f"chat UI on http://{settings.public_host}:{settings.ui_port}"
    )
    widget = subprocess.Popen(
        [sys.executable, "-m", "support_chat.ui.chat_page"],
        env=widget_environment(settings),
    )
    try:
        uvicorn.run(
            "support_chat.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    finally:
        widget.terminate()
        widget.wait()


def main() -> None:
    """Console entry point; RUN_MODE selects integrated (default) or separate."""
    load_dotenv()
    settings = ServerSettings()
    configure_logging(settings.log_level)

    logger.info(f"Starting Support Chat in {settings.mode.value} mode")
    if settings.mode is RunMode.SEPARATE:
        run_separate(settings)
    else:
        run_integrated(settings)


if __name__ in {"__main__", "__mp_main__"}:
    main()
