"""
Controller for the trade history screen.
"""

from __future__ import annotations

from controllers.screen_controller import ScreenController
from schemas.screen_schema import HistoryView, ScreenResult
from services.metrics import summarize_history
from utils.log_config import log_function


class HistoryController(ScreenController):

    @log_function
    def load(self) -> ScreenResult:
        res = self._run(self.service.get_history, "Failed to load history")
        if not res.ok:
            return res
        entries = res.data.history
        return ScreenResult(ok=True, data=HistoryView(entries=entries, summary=summarize_history(entries)))

    @log_function
    def export_csv(self) -> ScreenResult:
        return self._run(self.service.export_history, "Failed to export CSV", "CSV Export Initiated")
