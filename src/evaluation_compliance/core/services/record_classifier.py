"""
Clasificación de los registros de evaluación de una ventana.
"""

from typing import Iterable, List

from ..models import (
    ClassificationOutcome,
    CycleWindow,
    EvaluationRecord,
    ObserverStatus
)
from .date_parser import parse_date


def records_in_window(records: Iterable[EvaluationRecord],
                      window: CycleWindow) -> List[EvaluationRecord]:
    """
    Filtra los registros cuya fecha cae dentro de la ventana.

    Un registro con fecha ilegible se ignora sin afectar a los demás.
    """
    selected = []
    for record in records:
        evaluation_date = parse_date(record.evaluation_date)
        if evaluation_date is not None and window.contains(evaluation_date):
            selected.append(record)
    return selected


def is_finalized(record: EvaluationRecord, has_observer: bool) -> bool:
    """Una evaluación cuenta si no requiere observador o si este la aprobó."""
    return not has_observer or record.observer_status == ObserverStatus.APPROVED


def is_awaiting_observer(record: EvaluationRecord, has_observer: bool) -> bool:
    return has_observer and record.observer_status == ObserverStatus.PENDING


def classify(records: Iterable[EvaluationRecord], window: CycleWindow,
             has_observer: bool) -> ClassificationOutcome:
    """
    Clasifica el resultado de una ventana.

    Prioridad: finalizada > esperando observador > ninguna. Una sola
    evaluación aprobada cierra el ciclo aunque existan intentos devueltos
    o pendientes. Las devueltas para corrección (review_requested) no
    cuentan en ningún sentido.

    Args:
        records: Historial de evaluaciones del trabajador
        window: Ventana del ciclo
        has_observer: Si el trabajador tiene observador asignado

    Returns:
        ClassificationOutcome: Resultado de la ventana
    """
    in_window = records_in_window(records, window)

    if any(is_finalized(record, has_observer) for record in in_window):
        return ClassificationOutcome.FINALIZED
    if any(is_awaiting_observer(record, has_observer) for record in in_window):
        return ClassificationOutcome.AWAITING_OBSERVER
    return ClassificationOutcome.NONE
