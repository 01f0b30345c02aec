"""
Core Services - Servicios de dominio para el cumplimiento de evaluaciones.

Este paquete contiene los servicios que calculan el estado de cumplimiento:
interpretación de fechas, resolución de ciclos, clasificación de
registros y composición del estado final.
"""

# Fechas
from .date_parser import (
    parse_date,
    format_date,
    coerce_date,
    with_year
)

# Ciclos
from .cycle_resolver import CycleResolver, resolve_cycle

# Clasificación
from .record_classifier import (
    classify,
    records_in_window,
    is_finalized,
    is_awaiting_observer
)

# Composición
from .status_compositor import StatusCompositor, compose_status

# Motor
from .compliance_engine import ComplianceEngine, get_evaluation_status

__all__ = [
    # Dates
    'parse_date',
    'format_date',
    'coerce_date',
    'with_year',

    # Cycles
    'CycleResolver',
    'resolve_cycle',

    # Classification
    'classify',
    'records_in_window',
    'is_finalized',
    'is_awaiting_observer',

    # Composition
    'StatusCompositor',
    'compose_status',

    # Engine
    'ComplianceEngine',
    'get_evaluation_status',
]
