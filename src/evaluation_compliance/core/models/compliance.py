"""
Objetos de valor del cálculo de cumplimiento.

Ventanas de ciclo, planes de régimen y el estado de cumplimiento que
consumen los listados. Ninguno se persiste: se recalculan en cada consulta.
"""

import math
from datetime import date
from typing import List, Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum


class Regime(Enum):
    """Régimen de evaluación según la antigüedad del trabajador."""
    ONBOARDING = "onboarding"   # Primer año, dos fases
    ANNUAL = "annual"           # Ciclo anual recurrente


class ComplianceCategory(Enum):
    """Categorías de cumplimiento que muestra el portal."""
    INVALID = "invalido"
    PENDING = "pendiente"
    ALERT = "alerta"
    OVERDUE = "atrasado"
    PENDING_OBSERVATION = "pending_observation"
    COMPLETED = "completado"


class ClassificationOutcome(Enum):
    """Resultado de clasificar los registros de una ventana."""
    FINALIZED = "finalized"
    AWAITING_OBSERVER = "awaiting_observer"
    NONE = "none"


@dataclass(frozen=True)
class CycleWindow:
    """
    Período [start, end] en el que debe existir una evaluación válida.

    Las fases del primer año son semiabiertas ([start, end)): una
    evaluación hecha justo el día 90 ya cuenta para la fase siguiente.
    """
    start: date
    end: date
    includes_end: bool = True

    def __post_init__(self):
        """Validación post-inicialización."""
        if self.end < self.start:
            raise ValueError("La ventana debe terminar después de su inicio")

    def contains(self, day: date) -> bool:
        """Verifica si una fecha cae dentro de la ventana."""
        if self.includes_end:
            return self.start <= day <= self.end
        return self.start <= day < self.end

    def days_until_end(self, today: date) -> int:
        """Días que faltan para el vencimiento (negativo si ya pasó)."""
        return (self.end - today).days

    @property
    def span_days(self) -> int:
        """Duración de la ventana en días."""
        return (self.end - self.start).days


@dataclass(frozen=True)
class EvaluationPhase:
    """Una fase del régimen de incorporación, medida en días desde el ingreso."""
    key: str
    label: str
    start_day: int
    end_day: int
    window: CycleWindow
    alert_days: int
    active: bool


@dataclass(frozen=True)
class RegimePlan:
    """Régimen aplicable y ventanas resultantes para una fecha de consulta."""
    regime: Regime
    days_since_hire: int
    annual_window: Optional[CycleWindow] = None
    annual_label: str = ""
    phases: List[EvaluationPhase] = field(default_factory=list)

    @property
    def is_onboarding(self) -> bool:
        return self.regime == Regime.ONBOARDING


@dataclass(frozen=True)
class ComplianceStatus:
    """
    Estado de cumplimiento de un trabajador.

    signed_days es negativo cuando hay retraso, positivo cuando queda
    tiempo, infinito cuando no compite por urgencia y NaN si es inválido.
    """
    category: ComplianceCategory
    message: str
    signed_days: float

    @property
    def is_completed(self) -> bool:
        """Indica si el ciclo vigente está cumplido."""
        return self.category == ComplianceCategory.COMPLETED

    @property
    def is_invalid(self) -> bool:
        return self.category == ComplianceCategory.INVALID

    @property
    def sort_key(self) -> Tuple[int, float]:
        """Clave de orden para listados: inválidos primero, luego los más atrasados."""
        if math.isnan(self.signed_days):
            return (0, 0.0)
        return (1, self.signed_days)

    @classmethod
    def invalid(cls, message: str) -> 'ComplianceStatus':
        return cls(ComplianceCategory.INVALID, message, math.nan)

    @classmethod
    def completed(cls, message: str) -> 'ComplianceStatus':
        return cls(ComplianceCategory.COMPLETED, message, math.inf)

    @classmethod
    def pending_observation(cls, message: str) -> 'ComplianceStatus':
        return cls(ComplianceCategory.PENDING_OBSERVATION, message, math.inf)

    def to_dict(self) -> dict:
        """Representación plana para los consumidores del estado."""
        return {
            "status": self.category.value,
            "message": self.message,
            "days": self.signed_days,
            "is_completed": self.is_completed
        }

    def __str__(self) -> str:
        return f"[{self.category.value}] {self.message}"
