"""
Configuración del motor de cumplimiento de evaluaciones.

Este módulo proporciona una interfaz unificada para acceder a toda la configuración
del sistema, incluyendo valores por defecto y validaciones.
"""

import os
import json
import copy
import logging
from typing import Dict, Any, Optional, List
from pathlib import Path

from .constants import *

_LOGGER = logging.getLogger(__name__)


class Settings:
    """
    Clase principal de configuración del sistema.

    Maneja la carga de configuración desde múltiples fuentes:
    - Valores por defecto
    - Archivo JSON opcional
    - Variables de entorno
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Inicializa la configuración.

        Args:
            config_file: Ruta al archivo de configuración personalizado (opcional)
        """
        self._config_data = {}
        self._config_file = config_file
        self._load_configuration()

    def _load_configuration(self):
        """Carga la configuración desde todas las fuentes disponibles."""
        # 1. Cargar valores por defecto
        self._load_defaults()

        # 2. Cargar desde archivo de configuración si existe
        if self._config_file and Path(self._config_file).exists():
            self._load_from_file(self._config_file)

        # 3. Cargar desde variables de entorno
        self._load_from_environment()

        # 4. Validar configuración
        self._validate_configuration()

    def _load_defaults(self):
        """Carga los valores por defecto desde constants.py."""
        self._config_data = copy.deepcopy({
            "cycles": {
                "onboarding_tenure_days": ONBOARDING_TENURE_DAYS,
                "phases": ONBOARDING_PHASES,
                "annual_label": ANNUAL_CYCLE_LABEL
            },
            "alerts": {
                "annual_days": ANNUAL_ALERT_DAYS,
                "phase_days": PHASE_ALERT_DAYS,
                "long_phase_span_days": LONG_PHASE_SPAN_DAYS
            },
            "messages": {
                "status": STATUS_MESSAGES,
                "templates": STATUS_TEMPLATES
            },
            "worklist": {
                "columns": WORKLIST_COLUMNS
            },
            "logging": LOGGING_CONFIG,
            "debug": DEBUG_CONFIG
        })

    def _load_from_file(self, config_file: str):
        """Carga configuración desde archivo JSON."""
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            _LOGGER.warning("No se pudo cargar el archivo de configuración %s: %s", config_file, e)
            return

        # Merge de configuración usando deep update
        self._deep_update(self._config_data, file_config)

    def _load_from_environment(self):
        """Carga configuración desde variables de entorno."""
        # Mapeo de variables de entorno a configuración
        env_mappings = {
            "EVAL_COMPLIANCE_ANNUAL_ALERT_DAYS": ("alerts", "annual_days", int),
            "EVAL_COMPLIANCE_LOG_LEVEL": ("logging", "level", str),
            "EVAL_COMPLIANCE_DEBUG": ("debug", "enable_debug", bool)
        }

        for env_var, (section, key, var_type) in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                try:
                    if var_type == bool:
                        value = env_value.lower() in ('true', '1', 'yes', 'on')
                    elif var_type == int:
                        value = int(env_value)
                    else:
                        value = env_value

                    if section not in self._config_data:
                        self._config_data[section] = {}
                    self._config_data[section][key] = value

                except ValueError:
                    _LOGGER.warning("Valor inválido para %s: %s", env_var, env_value)

    def _validate_configuration(self):
        """Valida que la configuración sea coherente."""
        errors = []

        alerts = self._config_data["alerts"]
        if alerts["annual_days"] < 0:
            errors.append("El umbral de alerta anual no puede ser negativo")

        for size, days in alerts["phase_days"].items():
            if days < 0:
                errors.append(f"El umbral de alerta para fases '{size}' no puede ser negativo")

        cycles = self._config_data["cycles"]
        previous_end = 0
        for phase in cycles["phases"]:
            if phase["start_day"] >= phase["end_day"]:
                errors.append(f"La fase '{phase['key']}' debe terminar después de su inicio")
            if phase["start_day"] < previous_end:
                errors.append(f"La fase '{phase['key']}' se superpone con la fase anterior")
            previous_end = phase["end_day"]

        if previous_end > cycles["onboarding_tenure_days"]:
            errors.append("Las fases del primer año exceden la antigüedad de incorporación")

        if self._config_data["logging"]["level"].upper() not in LOG_LEVELS:
            errors.append(f"Nivel de log inválido: {self._config_data['logging']['level']}")

        if errors:
            raise ValueError("Errores en la configuración: " + "; ".join(errors))

    def _deep_update(self, base_dict: dict, update_dict: dict):
        """Actualiza recursivamente un diccionario."""
        for key, value in update_dict.items():
            if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
                self._deep_update(base_dict[key], value)
            else:
                base_dict[key] = value

    # =====================================================================
    # Métodos de acceso a configuración específica
    # =====================================================================

    def get_cycle_config(self) -> Dict[str, Any]:
        """Obtiene la configuración de ciclos."""
        return self._config_data["cycles"]

    def get_logging_config(self) -> Dict[str, Any]:
        """Obtiene la configuración de logging."""
        return self._config_data["logging"]

    def get_worklist_config(self) -> Dict[str, Any]:
        """Obtiene la configuración de los listados."""
        return self._config_data["worklist"]

    # =====================================================================
    # Métodos de utilidad
    # =====================================================================

    def is_debug_enabled(self) -> bool:
        """Verifica si el modo debug está habilitado."""
        return self._config_data["debug"]["enable_debug"]

    def get_annual_alert_days(self) -> int:
        """Obtiene el umbral de alerta del ciclo anual."""
        return self._config_data["alerts"]["annual_days"]

    def get_phase_alert_days(self, span_days: int) -> int:
        """Obtiene el umbral de alerta de una fase según su duración."""
        alerts = self._config_data["alerts"]
        size = "long" if span_days > alerts["long_phase_span_days"] else "short"
        return alerts["phase_days"][size]

    def get_message(self, key: str) -> str:
        """Obtiene un mensaje fijo del motor."""
        return self._config_data["messages"]["status"].get(key, f"Mensaje no encontrado: {key}")

    def get_template(self, key: str) -> str:
        """Obtiene una plantilla de mensaje."""
        return self._config_data["messages"]["templates"][key]

    # =====================================================================
    # Métodos de configuración dinámica
    # =====================================================================

    def update_setting(self, path: str, value: Any):
        """
        Actualiza un valor de configuración dinámicamente.

        Args:
            path: Ruta del setting en formato "section.key" o "section.subsection.key"
            value: Nuevo valor
        """
        keys = path.split('.')
        current = self._config_data

        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value
        self._validate_configuration()

    def get_setting(self, path: str, default: Any = None) -> Any:
        """
        Obtiene un valor de configuración por ruta.

        Args:
            path: Ruta del setting en formato "section.key"
            default: Valor por defecto si no se encuentra

        Returns:
            Valor de configuración o default
        """
        keys = path.split('.')
        current = self._config_data

        try:
            for key in keys:
                current = current[key]
            return current
        except KeyError:
            return default


# =====================================================================
# Instancia global de configuración
# =====================================================================

# Instancia global que puede ser importada y usada en toda la aplicación
settings = Settings(os.getenv("EVAL_COMPLIANCE_CONFIG_FILE"))
