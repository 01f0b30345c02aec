"""
Motor de cumplimiento de evaluaciones de desempeño - Dominio puro.

Este módulo orquesta el cálculo completo del estado de un trabajador:
interpreta sus fechas, resuelve el ciclo vigente, clasifica su historial
y compone el estado final. No guarda estado entre llamadas; con los
mismos datos y la misma fecha de consulta el resultado es siempre igual.
"""

from datetime import date, datetime
from typing import Iterable, List, Optional, Union

from ..models import (
    ClassificationOutcome,
    ComplianceStatus,
    EvaluationPhase,
    EvaluationRecord,
    RegimePlan,
    Worker
)
from ...infrastructure.config.settings import Settings, settings as default_settings
from .cycle_resolver import CycleResolver
from .date_parser import coerce_date, parse_date
from .record_classifier import classify
from .status_compositor import StatusCompositor


class ComplianceEngine:
    """
    Calcula el estado de cumplimiento de evaluación de un trabajador.

    En el primer año las fases se evalúan en orden: mientras la primera
    no esté completa, su estado es el estado del trabajador y la segunda
    no se considera.
    """

    def __init__(self, config: Optional[Settings] = None,
                 annual_alert_days: Optional[int] = None):
        """
        Inicializa el motor.

        Args:
            config: Configuración a usar (por defecto la global)
            annual_alert_days: Umbral de alerta anual explícito (opcional)
        """
        self.config = config or default_settings
        self.resolver = CycleResolver(self.config, annual_alert_days)
        self.compositor = StatusCompositor(self.config)

    def evaluate(self, worker: Worker, records: Iterable[EvaluationRecord],
                 today: Union[date, datetime, str]) -> ComplianceStatus:
        """
        Calcula el estado de cumplimiento.

        Args:
            worker: Trabajador a evaluar
            records: Historial de evaluaciones del trabajador
            today: Fecha de consulta

        Returns:
            ComplianceStatus: Estado vigente del trabajador
        """
        today = coerce_date(today)
        records = list(records)

        hire_date = parse_date(worker.hire_date)
        if hire_date is None:
            return ComplianceStatus.invalid(self.config.get_message("invalid_hire_date"))

        anchor_date = None
        if worker.annual_anchor_date:
            anchor_date = parse_date(worker.annual_anchor_date)

        plan = self.resolver.resolve(hire_date, anchor_date, today)

        if plan.is_onboarding:
            return self._evaluate_onboarding(plan, worker, records, today)

        # Una fecha anual configurada pero ilegible no cae al aniversario de ingreso
        if worker.annual_anchor_date and anchor_date is None:
            return ComplianceStatus.invalid(self.config.get_message("invalid_reference_date"))

        return self._evaluate_annual(plan, worker, records, today)

    def _evaluate_annual(self, plan: RegimePlan, worker: Worker,
                         records: List[EvaluationRecord], today: date) -> ComplianceStatus:
        """Estado del ciclo anual recurrente."""
        outcome = classify(records, plan.annual_window, worker.has_observer)
        return self.compositor.compose(
            plan.annual_window, outcome, today,
            self.resolver.annual_alert_days, plan.annual_label
        )

    def _evaluate_onboarding(self, plan: RegimePlan, worker: Worker,
                             records: List[EvaluationRecord], today: date) -> ComplianceStatus:
        """Estado del primer año, con las fases encadenadas."""
        for index, phase in enumerate(plan.phases):
            status = self._evaluate_phase(phase, worker, records, today)

            if status is None:
                if index == 0:
                    # Ingreso futuro: la primera fase aún no abre pero ya corre su plazo
                    return self.compositor.compose(
                        phase.window, ClassificationOutcome.NONE, today,
                        phase.alert_days, phase.label
                    )
                return ComplianceStatus.completed(self.config.get_message("first_phase_completed"))

            if not status.is_completed:
                return status

        return ComplianceStatus.completed(self.config.get_message("initial_cycle_completed"))

    def _evaluate_phase(self, phase: EvaluationPhase, worker: Worker,
                        records: List[EvaluationRecord],
                        today: date) -> Optional[ComplianceStatus]:
        """
        Estado de una fase, o None si la fase no ha comenzado.

        Las evaluaciones registradas cuentan aunque la fase aún no esté activa.
        """
        outcome = classify(records, phase.window, worker.has_observer)

        if outcome == ClassificationOutcome.NONE and not phase.active:
            return None

        return self.compositor.compose(
            phase.window, outcome, today, phase.alert_days, phase.label,
            completed_message=phase.label
        )


def get_evaluation_status(worker: Worker, records: Iterable[EvaluationRecord],
                          today: Union[date, datetime, str],
                          annual_alert_days: Optional[int] = None) -> ComplianceStatus:
    """Calcula el estado de un trabajador con la configuración global."""
    return ComplianceEngine(annual_alert_days=annual_alert_days).evaluate(worker, records, today)
