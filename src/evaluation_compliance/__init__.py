"""
Motor de cumplimiento de evaluaciones de desempeño.

Calcula, para cada trabajador, si su evaluación de desempeño está
pendiente, en alerta, atrasada, esperando al observador o completa,
y cuántos días faltan (o sobran) para el vencimiento.
"""

from .core import (
    Worker,
    EvaluationRecord,
    ObserverStatus,
    ComplianceCategory,
    ComplianceStatus,
    CycleWindow,
    ComplianceEngine,
    get_evaluation_status,
    parse_date
)

__version__ = "1.0.0"

__all__ = [
    'Worker',
    'EvaluationRecord',
    'ObserverStatus',
    'ComplianceCategory',
    'ComplianceStatus',
    'CycleWindow',
    'ComplianceEngine',
    'get_evaluation_status',
    'parse_date',
]
