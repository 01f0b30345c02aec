"""
Caso de uso: Evaluaciones devueltas por el observador.

El motor de cumplimiento no cuenta las evaluaciones devueltas para
corrección; este caso de uso las muestra al evaluador que debe rehacerlas.
"""

from typing import List, Optional

from ...core.models import EvaluationRecord
from ..ports import EvaluationRepository, LoggingService
from .track_compliance import sort_by_evaluation_date


class ReworkQueueUseCase:
    """Lista las evaluaciones de un evaluador que esperan corrección."""

    def __init__(self,
                 evaluation_repository: EvaluationRepository,
                 logging_service: Optional[LoggingService] = None):
        self.evaluation_repository = evaluation_repository
        self.logging_service = logging_service

    def execute(self, evaluator_id: str) -> List[EvaluationRecord]:
        """
        Obtiene la cola de correcciones de un evaluador.

        Args:
            evaluator_id: ID del evaluador

        Returns:
            List[EvaluationRecord]: Evaluaciones devueltas, la más reciente primero
        """
        if not evaluator_id:
            return []

        queue = [
            record for record in self.evaluation_repository.get_all_evaluations()
            if record.needs_rework and record.evaluator_id == evaluator_id
        ]

        if self.logging_service and queue:
            self.logging_service.log_info(
                f"{len(queue)} evaluaciones devueltas para corrección",
                {"evaluator_id": evaluator_id}
            )

        return sort_by_evaluation_date(queue)
