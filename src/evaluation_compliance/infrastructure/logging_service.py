"""
Adaptador de logging sobre el módulo estándar logging.
"""

import logging
from typing import Any, Dict, Optional

from ..application.ports import LoggingService
from .config.settings import Settings, settings as default_settings


def configure_logging(config: Optional[Settings] = None) -> logging.Logger:
    """
    Configura el logger del paquete según LOGGING_CONFIG.

    Solo agrega un handler si el logger aún no tiene uno, para no
    duplicar salidas al llamarse varias veces.
    """
    config = config or default_settings
    log_config = config.get_logging_config()
    logger = logging.getLogger(log_config["logger_name"])
    # El modo debug prevalece sobre el nivel configurado
    logger.setLevel("DEBUG" if config.is_debug_enabled() else log_config["level"].upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(log_config["log_format"], log_config["date_format"]))
        logger.addHandler(handler)

    return logger


class StandardLoggingService(LoggingService):
    """Implementación de LoggingService que escribe en un logger estándar."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or configure_logging()

    def log_compliance_computed(self, workers_count: int, pending_count: int,
                                completed_count: int) -> None:
        self._logger.info(
            "Cumplimiento calculado: %d trabajadores, %d pendientes, %d al día",
            workers_count, pending_count, completed_count
        )

    def log_info(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self._logger.info(self._with_context(message, context))

    def log_warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self._logger.warning(self._with_context(message, context))

    def log_error(self, operation: str, error: Exception,
                  context: Optional[Dict[str, Any]] = None) -> None:
        self._logger.error(
            self._with_context(f"Error en {operation}: {error}", context),
            exc_info=error
        )

    @staticmethod
    def _with_context(message: str, context: Optional[Dict[str, Any]]) -> str:
        if not context:
            return message
        details = ", ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} ({details})"
