"""
Builds the object graph used by the front end and the console entry point.

The Session Store is created once and handed explicitly to the API client,
which every controller shares through :class:`BotService`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from controllers.analytics_controller import AnalyticsController
from controllers.auth_controller import AuthController
from controllers.dashboard_controller import DashboardController
from controllers.history_controller import HistoryController
from controllers.settings_controller import SettingsController
from repositories.session_repository import SessionRepository
from services.api_service import ApiService
from services.bot_service import BotService
from utils.config import Settings, get_settings


@dataclass
class AppContext:
    settings: Settings
    session: SessionRepository
    service: BotService
    auth: AuthController
    dashboard: DashboardController
    history: HistoryController
    analytics: AnalyticsController
    config: SettingsController


def create_context(settings: Optional[Settings] = None) -> AppContext:
    settings = settings or get_settings()
    session = SessionRepository(db_path=settings.db_path)
    api = ApiService(session, base_url=settings.api_base_url, timeout=settings.api_timeout_sec)
    service = BotService(api)
    return AppContext(
        settings=settings,
        session=session,
        service=service,
        auth=AuthController(service, session),
        dashboard=DashboardController(service),
        history=HistoryController(service),
        analytics=AnalyticsController(service),
        config=SettingsController(service),
    )
