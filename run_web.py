# run_web.py: boot do app de demonstração
from __future__ import annotations
import logging
import os
from pathlib import Path
import flet as ft

from services.logging_setup import configure_logging
from services.settings import Settings

log = logging.getLogger("boot")


def _boot():
    settings = Settings.from_environment()
    configure_logging(level=settings.log_level)

    # Porta 0 = o sistema escolhe uma porta livre
    port = int(os.environ.get("PORT", "0"))
    root = Path(__file__).resolve().parent
    log.info("Starting Flet app on port %s | CWD=%s | locale=%s", port, os.getcwd(), settings.locale)

    try:
        import main as app_main
    except Exception:
        log.exception("Failed to import main")
        raise

    try:
        ft.app(target=app_main.main, view=ft.AppView.WEB_BROWSER, assets_dir=str(root), port=port)
    except Exception:
        log.exception("ft.app crashed")
        raise


if __name__ == "__main__":
    _boot()
