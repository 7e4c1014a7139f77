# ===== Part 1: Imports & Logging ============================================
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from services.admission_service import AdmissionService
from utils.app_settings import AppSettings, load_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


# ===== Part 2: Front ends ===================================================
def run_console(service: AdmissionService, settings: AppSettings) -> int:
    from modules.admissions.console import AdmissionConsole

    console = AdmissionConsole(service, clear_screen=settings.clear_screen)
    console.attach_desks()
    console.run()
    return 0


def run_gui(service: AdmissionService) -> int:
    from PySide6.QtWidgets import QApplication

    from modules.admissions.panels.admission_panel import get_admission_panel

    app = QApplication.instance() or QApplication(sys.argv)
    panel = get_admission_panel(service)
    panel.setWindowTitle("Hospital Management System")
    panel.resize(520, 640)
    panel.show()
    return app.exec()


# ===== Part 3: Application Entrypoint =======================================
def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Hospital admission and billing desk")
    parser.add_argument("--gui", action="store_true", help="Open the desktop admission panel")
    parser.add_argument("--data-dir", default=None, help="Directory holding app.ini")
    args = parser.parse_args(argv)

    settings = load_settings(args.data_dir)
    configure_logging(settings)
    logger.debug("Loaded settings: %s", settings)

    service = AdmissionService()
    if args.gui:
        return run_gui(service)
    return run_console(service, settings)


if __name__ == "__main__":
    sys.exit(main())
