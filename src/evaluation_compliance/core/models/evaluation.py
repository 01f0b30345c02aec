"""
Modelo de dominio para los registros de evaluación de desempeño.
"""

from typing import Dict, Any, List, Optional
from enum import Enum
from dataclasses import dataclass


class ObserverStatus(Enum):
    """Estados posibles del visto bueno del observador."""
    NONE = "none"                           # El trabajador no tiene observador
    PENDING = "pending"                     # Esperando revisión del observador
    APPROVED = "approved"                   # Aprobada por el observador
    REVIEW_REQUESTED = "review_requested"   # Devuelta al evaluador para corrección

    @classmethod
    def from_string(cls, status_str: Optional[str]) -> 'ObserverStatus':
        """Convierte string a ObserverStatus. Un valor vacío equivale a NONE."""
        if not status_str:
            return cls.NONE
        for status in cls:
            if status.value == status_str:
                return status
        raise ValueError(f"Estado de observador inválido: {status_str}")

    @classmethod
    def get_all_values(cls) -> List[str]:
        """Retorna todos los valores como strings."""
        return [status.value for status in cls]


@dataclass(frozen=True)
class EvaluationRecord:
    """Una evaluación realizada (o en revisión) sobre un trabajador."""
    id: str
    worker_id: str
    evaluation_date: Optional[str]
    observer_status: ObserverStatus = ObserverStatus.NONE
    evaluator_id: Optional[str] = None
    observer_comments: Optional[str] = None

    def __post_init__(self):
        """Validación post-inicialización."""
        if not isinstance(self.observer_status, ObserverStatus):
            raise ValueError("observer_status debe ser un ObserverStatus")

    @property
    def needs_rework(self) -> bool:
        """Indica si el observador la devolvió para corrección."""
        return self.observer_status == ObserverStatus.REVIEW_REQUESTED

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EvaluationRecord':
        """
        Construye un registro a partir de un documento del portal.

        Args:
            data: Documento con las claves del portal (workerId, evaluationDate, ...)

        Returns:
            EvaluationRecord: Registro validado

        Raises:
            ValueError: Si faltan identificadores o el estado es desconocido
        """
        if not data.get("id"):
            raise ValueError("La evaluación debe tener un identificador")
        if not data.get("workerId"):
            raise ValueError(f"La evaluación {data['id']} no indica el trabajador evaluado")

        return cls(
            id=str(data["id"]),
            worker_id=str(data["workerId"]),
            evaluation_date=data.get("evaluationDate"),
            observer_status=ObserverStatus.from_string(data.get("observerStatus")),
            evaluator_id=data.get("evaluatorId"),
            observer_comments=data.get("observerComments")
        )
