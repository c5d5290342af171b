"""
Common failure handling for the screen controllers.

Every backend call made on behalf of a screen goes through
:meth:`ScreenController._run`, which turns the three failure kinds into a
:class:`ScreenResult` message:

- transport errors (``requests.RequestException``) -> "Network Connection Failed"
- backend rejections (a record carrying ``detail``) -> the detail verbatim
- undecodable bodies (``requests.JSONDecodeError``) and records that fail
  validation (``ValueError``) -> the action's fallback message

Nothing is retried.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import requests

from models.api_model import ApiModel
from schemas.screen_schema import ScreenResult
from services.bot_service import BotService
from utils.logger import logger_manager

logger = logger_manager.setup_logger(__name__)

NETWORK_ERROR = "Network Connection Failed"


class ScreenController:
    def __init__(self, service: BotService) -> None:
        self.service = service

    def _run(
        self,
        action: Callable[[], Any],
        fallback: str,
        success: Optional[str] = None,
    ) -> ScreenResult:
        try:
            result = action()
        except requests.JSONDecodeError as e:
            logger.error(f"❌ {fallback} (cuerpo no JSON): {e}")
            return ScreenResult(ok=False, message=fallback)
        except requests.RequestException as e:
            logger.error(f"❌ {fallback}: {e}")
            return ScreenResult(ok=False, message=NETWORK_ERROR)
        except ValueError as e:
            logger.error(f"❌ {fallback} (respuesta inválida): {e}")
            return ScreenResult(ok=False, message=fallback)

        if isinstance(result, ApiModel) and not result.ok:
            logger.warning(f"Backend rejected call: {result.detail}")
            return ScreenResult(ok=False, message=result.detail or fallback, data=result)
        return ScreenResult(ok=True, message=success, data=result)
