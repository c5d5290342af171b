
from utils.logger import logger_manager, log_function

# Decorador para logging de funciones
log_function = log_function

# Logger ya configurado para el módulo principal
# NOTA: se recomienda sobrescribirlo por módulo con __name__
logger = logger_manager.setup_logger("main")
