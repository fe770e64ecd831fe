"""ListEdit - Main application entry point."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import flet as ft
from dotenv import load_dotenv

from listedit.core.configuration import SystemConfig, ValidationLevel, get_config
from listedit.core.event_bus import EventBus
from listedit.state import Store
from listedit.ui.layouts.editor_view import build_editor_view

PROJECT_ROOT = Path(__file__).parent.parent.resolve()

logger = logging.getLogger(__name__)

LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(config: SystemConfig, root: Optional[Path] = None) -> Path:
    """Configure file and console logging.

    File handler logs at the configured level to ``<log_dir>/listedit.log``;
    the console only shows warnings and above unless configured otherwise.

    Returns:
        Path of the log file
    """
    logs_dir = Path(config.logging.log_dir)
    if not logs_dir.is_absolute():
        logs_dir = (root or PROJECT_ROOT) / logs_dir
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = logs_dir / "listedit.log"

    file_log_level = LOG_LEVEL_MAP.get(config.logging.level.upper(), logging.DEBUG)
    console_log_level = LOG_LEVEL_MAP.get(config.logging.console_level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)

    # Remove existing handlers to avoid duplicates
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_log_level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    # Suppress verbose third-party library logs
    logging.getLogger("flet_controls").setLevel(logging.WARNING)
    logging.getLogger("flet_transport").setLevel(logging.WARNING)
    logging.getLogger("fletx.core.state").setLevel(logging.CRITICAL)  # Observer errors during shutdown

    # Importing fletx.core disables logging process-wide unless FLETX_ENABLE_LOGGING is set
    logging.disable(logging.NOTSET)

    logger.info(f"Logging configured: file={log_file_path}, console={logging.getLevelName(console_log_level)}+")
    return log_file_path


def create_app(config: SystemConfig):
    """Build the Flet session entry point bound to ``config``."""

    async def main(page: ft.Page) -> None:
        """Per-session entry point: one Store per page."""
        logger.info("Starting list editor session")
        page.title = config.editor.title

        store = Store(EventBus(), config.editor)
        await store.initialize()

        page.views.append(build_editor_view(page, store, config.ui.theme_mode))
        page.update()

    return main


def run() -> None:
    """Load configuration, configure logging and start Flet."""
    load_dotenv(dotenv_path=PROJECT_ROOT / ".env")
    config = get_config(ValidationLevel.LENIENT)
    configure_logging(config)

    main = create_app(config)
    if config.ui.flet_web_mode:
        port = config.ui.flet_port
        renderer = (
            ft.WebRenderer.AUTO
            if config.ui.flet_web_renderer.lower() == "auto"
            else ft.WebRenderer.CANVAS_KIT
        )
        logger.info(f"Starting Flet app in WEB mode on port {port}")
        ft.run(main, view=ft.AppView.WEB_BROWSER, port=port, host="127.0.0.1", web_renderer=renderer)
    else:
        logger.info("Starting Flet app in DESKTOP mode")
        ft.run(main, view=ft.AppView.FLET_APP)


if __name__ == "__main__":
    run()
