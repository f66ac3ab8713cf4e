from __future__ import annotations

import logging
import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication

from ..bootstrap import configure_logging
from ..config import AppPalette, get_settings
from ..core import today
from ..data import EventStoreClient
from ..services import CalendarService, CalendarSync, sample_events
from .login import LoginDialog
from .main_window import MainWindow
from .styles.theme import apply_palette

logger = logging.getLogger(__name__)


def run_gui(api_url: Optional[str] = None) -> None:
    configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    settings = get_settings()
    app.setApplicationName(settings.ui.app_name)
    app.setOrganizationName(settings.ui.organization)
    apply_palette(app, AppPalette())

    base_url = api_url or settings.api.base_url
    calendar = CalendarService(track_pending=bool(base_url), month_limit=settings.ui.month_cell_limit)
    sync: Optional[CalendarSync] = None
    client: Optional[EventStoreClient] = None

    if base_url:
        client = EventStoreClient(base_url=base_url)
        login = LoginDialog(client=client, app_name=settings.ui.app_name)
        if login.exec() != LoginDialog.DialogCode.Accepted.value:
            client.close()
            return
        sync = CalendarSync(calendar=calendar, client=client)
    else:
        logger.info("No calendar server configured; starting with sample events")
        calendar.load(sample_events(today()))

    window = MainWindow(calendar=calendar, settings=settings, sync=sync)
    window.show()
    exit_code = app.exec()
    if client is not None:
        client.close()
    sys.exit(exit_code)
