# main.py
from __future__ import annotations
import os
import sys
import time
import signal
import subprocess
from pathlib import Path

# ---- imports del proyecto ----
from controllers.app_context import create_context
from orchestrators.state_poller import StatePoller
from utils.config import get_settings
from utils.log_config import logger_manager

logger = logger_manager.setup_logger(__name__)

# ------------------------------
# Configuración
# ------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent
SETTINGS = get_settings()
WATCH_STATE = os.getenv("WATCH_STATE", "False").lower() == "true"

# ------------------------------
# Lanzadores
# ------------------------------
def log_state(result) -> None:
    if not result.ok:
        logger.warning(f"Estado no disponible: {result.message}")
        return
    view = result.data
    logger.info(
        f"[state] {view.state.asset} price={view.market.current_price_label} "
        f"running={view.state.bot_running} risk={view.state.risk_level.value}"
    )

def start_state_watch() -> StatePoller | None:
    """
    Console watch: refreshes /state/ + /market-data/ every STATE_POLL_INTERVAL_SEC.
    Requires a stored session.
    """
    ctx = create_context(SETTINGS)
    if not ctx.auth.is_authenticated():
        logger.warning("Sin sesión guardada; inicia sesión desde la app antes de WATCH_STATE.")
        return None
    poller = StatePoller(ctx.dashboard.load_state, interval=SETTINGS.state_poll_interval_sec, on_result=log_state)
    poller.start()
    return poller

def start_streamlit_process() -> subprocess.Popen:
    """
    Launch streamlit as a separate process.
    """
    app_path = Path(SETTINGS.streamlit_app)
    if not app_path.exists():
        logger.error(f"Streamlit app no encontrada: {app_path}")
    cmd = [
        sys.executable, "-m", "streamlit", "run", str(app_path),
        "--server.headless=true",
        f"--server.port={SETTINGS.streamlit_port}",
    ]
    logger.info(f"Lanzando Streamlit: {' '.join(cmd)}")
    # heredamos entorno (API_BASE_URL, DB_PATH etc.)
    env = dict(os.environ, PYTHONPATH=os.pathsep.join(filter(None, [str(PROJECT_ROOT), os.getenv("PYTHONPATH")])))
    return subprocess.Popen(cmd, cwd=str(PROJECT_ROOT), env=env)

# ------------------------------
# Señales / apagado limpio
# ------------------------------
stopping = False
streamlit_proc: subprocess.Popen | None = None
poller: StatePoller | None = None

def shutdown(*_):
    global stopping
    if stopping:
        return
    stopping = True
    logger.info("🛑 Señal de apagado recibida, deteniendo servicios...")
    if poller:
        poller.stop()
    if streamlit_proc and streamlit_proc.poll() is None:
        try:
            streamlit_proc.terminate()
            streamlit_proc.wait(timeout=3)
        except subprocess.TimeoutExpired:
            streamlit_proc.kill()
        except OSError as e:
            logger.error(f"No se pudo cerrar Streamlit: {e}")
    logger.info("✅ Apagado completado.")

# ------------------------------
# Main
# ------------------------------
if __name__ == "__main__":
    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    logger.info(f"🚀 Iniciando cliente (backend: {SETTINGS.api_base_url})")

    if WATCH_STATE:
        poller = start_state_watch()

    streamlit_proc = start_streamlit_process()

    try:
        while not stopping:
            if streamlit_proc.poll() is not None:
                logger.warning("El proceso de Streamlit finalizó. Cerrando servicios...")
                break
            time.sleep(0.5)
    finally:
        shutdown()
