"""
Interfaces y contratos para la capa de aplicación.

Este módulo define las interfaces que la capa de aplicación necesita
para interactuar con la persistencia y los servicios externos.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional

from ...core.models import Worker, EvaluationRecord


# =====================================================================
# Repository Interfaces
# =====================================================================

class WorkerRepository(ABC):
    """Interfaz para el repositorio de trabajadores."""

    @abstractmethod
    def get_all_workers(self) -> List[Worker]:
        """
        Obtiene todos los trabajadores registrados, activos e inactivos.

        Returns:
            List[Worker]: Lista de trabajadores
        """
        pass

    @abstractmethod
    def get_worker_by_id(self, worker_id: str) -> Optional[Worker]:
        """
        Obtiene un trabajador específico por ID.

        Args:
            worker_id: ID del trabajador

        Returns:
            Worker o None si no se encuentra
        """
        pass


class EvaluationRepository(ABC):
    """Interfaz para el repositorio de evaluaciones."""

    @abstractmethod
    def get_all_evaluations(self) -> List[EvaluationRecord]:
        """
        Obtiene todas las evaluaciones registradas.

        Returns:
            List[EvaluationRecord]: Lista de evaluaciones
        """
        pass

    @abstractmethod
    def get_evaluations_for_worker(self, worker_id: str) -> List[EvaluationRecord]:
        """
        Obtiene el historial de evaluaciones de un trabajador.

        Args:
            worker_id: ID del trabajador

        Returns:
            List[EvaluationRecord]: Evaluaciones del trabajador
        """
        pass


# =====================================================================
# Service Interfaces
# =====================================================================

class LoggingService(ABC):
    """Interfaz para el servicio de logging."""

    @abstractmethod
    def log_compliance_computed(self, workers_count: int, pending_count: int,
                                completed_count: int) -> None:
        """Registra el cálculo de cumplimiento de una nómina."""
        pass

    @abstractmethod
    def log_info(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Registra información general."""
        pass

    @abstractmethod
    def log_warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Registra una advertencia."""
        pass

    @abstractmethod
    def log_error(self, operation: str, error: Exception,
                  context: Optional[Dict[str, Any]] = None) -> None:
        """Registra un error."""
        pass
