"""
Constantes del motor de cumplimiento de evaluaciones.

Este módulo contiene todas las constantes utilizadas a lo largo del sistema,
organizadas por categorías para facilitar el mantenimiento.
"""

from typing import Dict, List

# =====================================================================
# Ciclos de Evaluación
# =====================================================================

# Antigüedad (en días) a partir de la cual aplica el ciclo anual recurrente
ONBOARDING_TENURE_DAYS = 365

# Fases del primer año, medidas en días desde el ingreso [inicio, fin)
ONBOARDING_PHASES = [
    {"key": "first", "label": "1ª Evaluación (90 días)", "start_day": 0, "end_day": 90},
    {"key": "annual", "label": "2ª Evaluación (Anual)", "start_day": 90, "end_day": 365},
]

# Etiqueta del ciclo anual recurrente
ANNUAL_CYCLE_LABEL = "Evaluación Anual"

# =====================================================================
# Umbrales de Alerta
# =====================================================================

# Días restantes para pasar de "pendiente" a "alerta" en el ciclo anual.
# El listado general usa 45 y la vista de evaluaciones propias usa 30;
# queda pendiente la definición de producto, ver ANNUAL_ALERT_DAYS_ALTERNATIVE.
ANNUAL_ALERT_DAYS = 45
ANNUAL_ALERT_DAYS_ALTERNATIVE = 30

# Umbrales para las fases del primer año según la duración de la fase
PHASE_ALERT_DAYS = {
    "long": 45,   # Fases de más de 90 días
    "short": 20   # Fases de 90 días o menos
}

# Duración (en días) a partir de la cual una fase se considera larga
LONG_PHASE_SPAN_DAYS = 90

# =====================================================================
# Fechas
# =====================================================================

# Separadores aceptados al leer fechas
DATE_SEPARATORS = ("-", "/")

# Rango de años aceptado; el tope deja margen para el vencimiento del año siguiente
MIN_DATE_YEAR = 100
MAX_DATE_YEAR = 9998

# Formatos de salida
DATE_FORMATS = {
    "iso": "%Y-%m-%d",
    "display": "%d/%m/%Y"
}

# =====================================================================
# Estados y Mensajes
# =====================================================================

# Mensajes fijos del motor
STATUS_MESSAGES = {
    "invalid_hire_date": "Fecha inválida",
    "invalid_reference_date": "Fecha ref. inválida",
    "annual_completed": "Evaluación Anual Completa",
    "pending_observation": "Pendiente de Observador",
    "initial_cycle_completed": "Ciclo Inicial Completo",
    "first_phase_completed": "1ª Evaluación Completa",
    "inactive": "Inactivo"
}

# Plantillas para los mensajes que dependen de los días
STATUS_TEMPLATES = {
    "overdue": "{label}: {days} días de retraso",
    "alert": "{label}: {days} días restantes",
    "pending": "{label} en {days} días"
}

# =====================================================================
# Listados de Cumplimiento
# =====================================================================

# Columnas de la tabla de cumplimiento
WORKLIST_COLUMNS: List[str] = [
    "Código",
    "Empleado",
    "Cargo",
    "Estado",
    "Mensaje",
    "Días",
    "Última evaluación",
    "Evaluaciones"
]

# =====================================================================
# Configuración de Logging
# =====================================================================

# Niveles de log
LOG_LEVELS: Dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50
}

# Configuración de logs
LOGGING_CONFIG = {
    "level": "INFO",
    "logger_name": "evaluation_compliance",
    "log_format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "date_format": "%Y-%m-%d %H:%M:%S"
}

# =====================================================================
# Configuración de Desarrollo y Debug
# =====================================================================

DEBUG_CONFIG = {
    "enable_debug": False
}
