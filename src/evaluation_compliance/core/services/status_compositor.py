"""
Composición del estado de cumplimiento a partir de una ventana clasificada.
"""

from datetime import date
from typing import Optional

from ..models import (
    ClassificationOutcome,
    ComplianceCategory,
    ComplianceStatus,
    CycleWindow
)
from ...infrastructure.config.settings import Settings, settings as default_settings


class StatusCompositor:
    """Traduce (ventana, resultado, hoy, umbral) a un ComplianceStatus."""

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings

    def compose(self, window: CycleWindow, outcome: ClassificationOutcome,
                today: date, alert_threshold_days: int, label: str,
                completed_message: Optional[str] = None) -> ComplianceStatus:
        """
        Calcula el estado de una ventana.

        Args:
            window: Ventana del ciclo
            outcome: Resultado de clasificar sus registros
            today: Fecha de consulta
            alert_threshold_days: Días restantes a partir de los cuales se alerta
            label: Nombre del ciclo para los mensajes
            completed_message: Mensaje para el ciclo cumplido (opcional)

        Returns:
            ComplianceStatus: Estado con categoría, mensaje y días con signo
        """
        if outcome == ClassificationOutcome.FINALIZED:
            return ComplianceStatus.completed(
                completed_message or self.config.get_message("annual_completed")
            )

        if outcome == ClassificationOutcome.AWAITING_OBSERVER:
            return ComplianceStatus.pending_observation(
                self.config.get_message("pending_observation")
            )

        days_until_due = window.days_until_end(today)

        if days_until_due <= 0:
            message = self.config.get_template("overdue").format(
                label=label, days=abs(days_until_due)
            )
            return ComplianceStatus(ComplianceCategory.OVERDUE, message, days_until_due)

        if days_until_due <= alert_threshold_days:
            message = self.config.get_template("alert").format(label=label, days=days_until_due)
            return ComplianceStatus(ComplianceCategory.ALERT, message, days_until_due)

        message = self.config.get_template("pending").format(label=label, days=days_until_due)
        return ComplianceStatus(ComplianceCategory.PENDING, message, days_until_due)


def compose_status(window: CycleWindow, outcome: ClassificationOutcome, today: date,
                   alert_threshold_days: int, label: str) -> ComplianceStatus:
    """Atajo funcional sobre StatusCompositor con la configuración global."""
    return StatusCompositor().compose(window, outcome, today, alert_threshold_days, label)
