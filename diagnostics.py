# diagnostics.py
from utils.log_config import logger_manager
from controllers.app_context import create_context
from services.api_service import is_public

logger = logger_manager.setup_logger("diagnostics")

ctx = create_context()

def ok(b, msg): print(("✅" if b else "❌"), msg)

print("== DIAGNÓSTICO CLIENTE BOT ==")
ok(True, f"API_BASE_URL: {ctx.settings.api_base_url}")
ok(True, f"DB_PATH: {ctx.settings.db_path}")

try:
    has_token = ctx.session.has_session(); ok(True, f"SessionRepository OK (token={'sí' if has_token else 'no'})")
except Exception as e:
    has_token = False
    ok(False, f"SessionRepository fallo: {e}")

ok(is_public("/login/") and not is_public("/state/"), "Política de endpoints públicos")

if has_token:
    res = ctx.dashboard.load_state()
    ok(res.ok, f"/state/ + /market-data/: {res.message or 'OK'}")
else:
    print("Sin sesión: se omite la comprobación de endpoints protegidos.")

print("== FIN ==")
