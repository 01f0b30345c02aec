"""
Resolución del ciclo de evaluación vigente.

Determina qué régimen aplica a un trabajador (incorporación en dos fases
o ciclo anual recurrente) y calcula los límites de las ventanas de
cumplimiento respecto a la fecha de consulta.
"""

from datetime import date, timedelta
from typing import List, Optional

from ..models import CycleWindow, EvaluationPhase, Regime, RegimePlan
from ...infrastructure.config.settings import Settings, settings as default_settings
from .date_parser import with_year


class CycleResolver:
    """
    Calcula las ventanas de cumplimiento de un trabajador.

    Régimen anual (antigüedad > 365 días): la fecha de vencimiento es el
    próximo aniversario de la fecha de referencia (fecha de evaluación
    anual personalizada o, en su defecto, fecha de ingreso), siempre
    posterior a hoy. La ventana cubre el año anterior a ese vencimiento.

    Régimen de incorporación (antigüedad <= 365 días): dos fases fijas
    medidas en días desde el ingreso.
    """

    def __init__(self, config: Optional[Settings] = None,
                 annual_alert_days: Optional[int] = None):
        """
        Inicializa el resolvedor.

        Args:
            config: Configuración a usar (por defecto la global)
            annual_alert_days: Umbral de alerta anual explícito (opcional)
        """
        self.config = config or default_settings
        cycles = self.config.get_cycle_config()
        self.onboarding_tenure_days = cycles["onboarding_tenure_days"]
        self.phase_definitions = cycles["phases"]
        self.annual_label = cycles["annual_label"]
        self.annual_alert_days = (
            annual_alert_days if annual_alert_days is not None
            else self.config.get_annual_alert_days()
        )

    def resolve(self, hire_date: date, annual_anchor_date: Optional[date],
                today: date) -> RegimePlan:
        """
        Determina el régimen y las ventanas para la fecha de consulta.

        Args:
            hire_date: Fecha de ingreso
            annual_anchor_date: Fecha de evaluación anual personalizada (opcional)
            today: Fecha de consulta

        Returns:
            RegimePlan: Plan con la ventana anual o las fases del primer año
        """
        days_since_hire = (today - hire_date).days

        if days_since_hire > self.onboarding_tenure_days:
            reference = annual_anchor_date or hire_date
            return RegimePlan(
                regime=Regime.ANNUAL,
                days_since_hire=days_since_hire,
                annual_window=self.resolve_annual_window(reference, today),
                annual_label=self.annual_label
            )

        return RegimePlan(
            regime=Regime.ONBOARDING,
            days_since_hire=days_since_hire,
            phases=self.build_phases(hire_date, days_since_hire)
        )

    def resolve_annual_window(self, reference: date, today: date) -> CycleWindow:
        """
        Calcula la ventana anual que termina en el próximo aniversario.

        Si el aniversario de este año ya pasó o es hoy, el vencimiento
        se traslada al año siguiente.
        """
        due_date = with_year(reference, today.year)
        if due_date <= today:
            due_date = with_year(reference, today.year + 1)

        start = with_year(reference, due_date.year - 1)
        return CycleWindow(start=start, end=due_date, includes_end=True)

    def build_phases(self, hire_date: date, days_since_hire: int) -> List[EvaluationPhase]:
        """Construye las fases del primer año en el orden en que se evalúan."""
        phases = []
        for definition in self.phase_definitions:
            start_day = definition["start_day"]
            end_day = definition["end_day"]
            window = CycleWindow(
                start=hire_date + timedelta(days=start_day),
                end=hire_date + timedelta(days=end_day),
                includes_end=False
            )
            phases.append(EvaluationPhase(
                key=definition["key"],
                label=definition["label"],
                start_day=start_day,
                end_day=end_day,
                window=window,
                alert_days=self.config.get_phase_alert_days(end_day - start_day),
                active=days_since_hire >= start_day
            ))
        return phases


def resolve_cycle(hire_date: date, annual_anchor_date: Optional[date],
                  today: date) -> RegimePlan:
    """Atajo funcional sobre CycleResolver con la configuración global."""
    return CycleResolver().resolve(hire_date, annual_anchor_date, today)
