"""
Controller for the login, register and logout flows.

Successful authentication stores the token in the Session Store; logout
clears it even when the backend call fails, so a dead session can always be
abandoned locally.
"""

from __future__ import annotations

from controllers.screen_controller import ScreenController
from controllers.validators import ValidationError, require_fields
from models.auth import AuthResponse
from repositories.session_repository import SessionRepository
from schemas.screen_schema import ScreenResult
from services.bot_service import BotService
from utils.logger import log_function, setup_logger

logger = setup_logger(__name__)


class AuthController(ScreenController):
    def __init__(self, service: BotService, session: SessionRepository) -> None:
        super().__init__(service)
        self.session = session

    @log_function
    def login(self, phone: str, password: str) -> ScreenResult:
        try:
            require_fields("Credentials required.", phone, password)
        except ValidationError as e:
            return ScreenResult(ok=False, message=str(e))
        res = self._run(lambda: self.service.login(phone, password), "Authentication Failed")
        return self._store_token(res)

    @log_function
    def register(self, name: str, phone: str, password: str) -> ScreenResult:
        try:
            require_fields("All fields are required.", name, phone, password)
        except ValidationError as e:
            return ScreenResult(ok=False, message=str(e))
        res = self._run(
            lambda: self.service.register(name, phone, password),
            "Registration Failed",
        )
        return self._store_token(res)

    def _store_token(self, res: ScreenResult) -> ScreenResult:
        if not res.ok:
            return res
        auth: AuthResponse = res.data
        self.session.save(auth.token)
        return ScreenResult(ok=True, data=auth)

    @log_function
    def logout(self, confirmed: bool) -> ScreenResult:
        if not confirmed:
            return ScreenResult(ok=False, message="Logout requires confirmation.")
        res = self._run(self.service.logout, "Logout failed")
        if not res.ok:
            logger.warning(f"Logout call failed ({res.message}); clearing local session anyway.")
        self.session.clear()
        return ScreenResult(ok=True, message="Logged out.")

    def is_authenticated(self) -> bool:
        return self.session.has_session()
