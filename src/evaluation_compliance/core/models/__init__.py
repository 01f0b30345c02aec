"""
Core Models - Modelos de dominio puro para el cumplimiento de evaluaciones.

Este paquete contiene todas las entidades y objetos de valor del dominio,
sin dependencias externas ni lógica de infraestructura.
"""

from .worker import Worker
from .evaluation import EvaluationRecord, ObserverStatus
from .compliance import (
    Regime,
    ComplianceCategory,
    ClassificationOutcome,
    CycleWindow,
    EvaluationPhase,
    RegimePlan,
    ComplianceStatus
)

__all__ = [
    # Worker models
    'Worker',

    # Evaluation models
    'EvaluationRecord',
    'ObserverStatus',

    # Compliance models
    'Regime',
    'ComplianceCategory',
    'ClassificationOutcome',
    'CycleWindow',
    'EvaluationPhase',
    'RegimePlan',
    'ComplianceStatus',
]
