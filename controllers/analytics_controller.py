"""
Controller for the analytics screen.

Loads the analytics bundle and derives every label the cards display in
one pass, so the view only formats.
"""

from __future__ import annotations

from controllers.screen_controller import ScreenController
from enums.metric_labels import UNCLASSIFIED_MARK
from models.analytics import AnalyticsBundle
from schemas.screen_schema import AnalyticsView, ScreenResult
from services import metrics
from utils.log_config import log_function


def build_analytics_view(bundle: AnalyticsBundle) -> AnalyticsView:
    roi = bundle.roi.roi_percent
    prices = bundle.price_vs_time.values()
    rsi = bundle.rsi_vs_time
    return AnalyticsView(
        bundle=bundle,
        roi_label=metrics.classify_roi(roi),
        roi_sentence=metrics.roi_sentence(roi),
        price_trend=metrics.price_trend(prices),
        rsi_zone=metrics.rsi_zone(rsi.values(), rsi.thresholds.buy, rsi.thresholds.sell),
        pnl_trend=metrics.pnl_trend(bundle.profit_vs_loss.values()),
        last_price_label=f"{prices[-1]:.2f}" if prices else UNCLASSIFIED_MARK,
    )


class AnalyticsController(ScreenController):

    @log_function
    def load(self) -> ScreenResult:
        res = self._run(self.service.get_analytics, "Analytics load failed")
        if not res.ok:
            return res
        return ScreenResult(ok=True, data=build_analytics_view(res.data))
