"""
Infrastructure Config - Configuración del sistema.

Este paquete contiene toda la configuración del sistema,
incluyendo constantes, configuraciones y utilidades.
"""

from .constants import (
    ONBOARDING_TENURE_DAYS,
    ONBOARDING_PHASES,
    ANNUAL_CYCLE_LABEL,
    ANNUAL_ALERT_DAYS,
    ANNUAL_ALERT_DAYS_ALTERNATIVE,
    PHASE_ALERT_DAYS,
    LONG_PHASE_SPAN_DAYS,
    DATE_FORMATS,
    STATUS_MESSAGES,
    STATUS_TEMPLATES,
    WORKLIST_COLUMNS,
    LOGGING_CONFIG
)

from .settings import (
    Settings,
    settings
)

__all__ = [
    # Constants
    'ONBOARDING_TENURE_DAYS',
    'ONBOARDING_PHASES',
    'ANNUAL_CYCLE_LABEL',
    'ANNUAL_ALERT_DAYS',
    'ANNUAL_ALERT_DAYS_ALTERNATIVE',
    'PHASE_ALERT_DAYS',
    'LONG_PHASE_SPAN_DAYS',
    'DATE_FORMATS',
    'STATUS_MESSAGES',
    'STATUS_TEMPLATES',
    'WORKLIST_COLUMNS',
    'LOGGING_CONFIG',

    # Settings
    'Settings',
    'settings',
]
