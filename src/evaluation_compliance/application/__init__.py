"""
Application Use Cases - Casos de uso de la capa de aplicación.

Este paquete contiene los casos de uso que orquestan el cálculo de
cumplimiento sobre la nómina completa.
"""

from .use_cases.track_compliance import (
    TrackComplianceUseCase,
    ComplianceRequest,
    ComplianceResult,
    WorkerComplianceEntry,
    normalize_for_search
)

from .use_cases.rework_queue import ReworkQueueUseCase

__all__ = [
    # Track Compliance
    'TrackComplianceUseCase',
    'ComplianceRequest',
    'ComplianceResult',
    'WorkerComplianceEntry',
    'normalize_for_search',

    # Rework Queue
    'ReworkQueueUseCase',
]
