"""
Core Domain - Dominio puro del cumplimiento de evaluaciones.

Este paquete contiene toda la lógica de dominio pura del sistema,
incluyendo modelos y servicios de dominio.
"""

# Models - Entidades y objetos de valor
from .models import (
    Worker,
    EvaluationRecord,
    ObserverStatus,
    Regime,
    ComplianceCategory,
    ClassificationOutcome,
    CycleWindow,
    EvaluationPhase,
    RegimePlan,
    ComplianceStatus
)

# Services - Servicios de dominio
from .services import (
    parse_date,
    format_date,
    coerce_date,
    CycleResolver,
    resolve_cycle,
    classify,
    StatusCompositor,
    compose_status,
    ComplianceEngine,
    get_evaluation_status
)

__all__ = [
    # Models
    'Worker',
    'EvaluationRecord',
    'ObserverStatus',
    'Regime',
    'ComplianceCategory',
    'ClassificationOutcome',
    'CycleWindow',
    'EvaluationPhase',
    'RegimePlan',
    'ComplianceStatus',

    # Services
    'parse_date',
    'format_date',
    'coerce_date',
    'CycleResolver',
    'resolve_cycle',
    'classify',
    'StatusCompositor',
    'compose_status',
    'ComplianceEngine',
    'get_evaluation_status',
]
