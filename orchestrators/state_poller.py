# orchestrators/state_poller.py
from __future__ import annotations
import threading
from typing import Any, Callable, Optional

from utils.config import get_settings
from utils.log_config import logger_manager

logger = logger_manager.setup_logger(__name__)

class StatePoller:
    """
    Periodic refresh of the bot state:
      - Runs load_fn on start and then every `interval` seconds.
      - A failing tick is logged and does not end the loop (no extra retries).
      - stop() cancels and joins the thread; no calls happen after stop().
    """
    def __init__(
        self,
        load_fn: Callable[[], Any],
        interval: Optional[float] = None,
        on_result: Optional[Callable[[Any], None]] = None,
        name: str = "StatePoller",
    ) -> None:
        self.load_fn = load_fn
        self.interval = float(interval if interval is not None else get_settings().state_poll_interval_sec)
        self.on_result = on_result
        self.name = name

        self._stop_evt = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return bool(self._thread and self._thread.is_alive())

    def start(self) -> None:
        if self.running:
            return
        self._stop_evt.clear()
        self._thread = threading.Thread(target=self._run_loop, name=self.name, daemon=True)
        self._thread.start()
        logger.info(f"{self.name} iniciado (cada {self.interval:g}s).")

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        self._stop_evt.set()
        if self._thread and self._thread is not threading.current_thread():
            self._thread.join(timeout)
        logger.info(f"{self.name} detenido.")

    def __enter__(self) -> "StatePoller":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()

    def _run_loop(self) -> None:
        while not self._stop_evt.is_set():
            self._tick()
            self._stop_evt.wait(self.interval)

    def _tick(self) -> None:
        try:
            result = self.load_fn()
        except Exception as e:
            logger.exception(f"Error en {self.name}: {e}")
            return
        if self.on_result and not self._stop_evt.is_set():
            try:
                self.on_result(result)
            except Exception as e:
                logger.exception(f"Error en callback de {self.name}: {e}")
