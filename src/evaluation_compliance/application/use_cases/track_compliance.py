"""
Caso de uso: Seguimiento del cumplimiento de evaluaciones de la nómina.

Este módulo calcula el estado de cada trabajador y arma los dos listados
del portal: pendientes (ordenados por urgencia) y al día (ordenados por
la evaluación más reciente), además de la tabla de cumplimiento.
"""

import unicodedata
from collections import defaultdict
from datetime import date, datetime
from typing import List, Dict, Any, Optional, Union
from dataclasses import dataclass, field

import pandas as pd

from ...core.models import Worker, EvaluationRecord, ComplianceStatus
from ...core.services import ComplianceEngine, coerce_date, parse_date, format_date
from ...infrastructure.config.settings import settings
from ..ports import WorkerRepository, EvaluationRepository, LoggingService


def normalize_for_search(text: Optional[str]) -> str:
    """Pasa a minúsculas y elimina tildes para búsquedas tolerantes."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).lower()


def sort_by_evaluation_date(records: List[EvaluationRecord]) -> List[EvaluationRecord]:
    """Ordena de la más reciente a la más antigua; las fechas ilegibles van al final."""
    dated = [(parse_date(record.evaluation_date), record) for record in records]
    valid = sorted((item for item in dated if item[0] is not None),
                   key=lambda item: item[0], reverse=True)
    invalid = [record for parsed, record in dated if parsed is None]
    return [record for _, record in valid] + invalid


@dataclass
class ComplianceRequest:
    """Solicitud de cálculo de cumplimiento."""
    today: Union[date, datetime, str]
    search_term: Optional[str] = None
    annual_alert_days: Optional[int] = None

    def validate(self) -> List[str]:
        """Valida la solicitud."""
        errors = []

        try:
            coerce_date(self.today)
        except ValueError:
            errors.append(f"La fecha de consulta no es válida: {self.today!r}")

        if self.annual_alert_days is not None and self.annual_alert_days < 0:
            errors.append("El umbral de alerta anual no puede ser negativo")

        return errors


@dataclass
class WorkerComplianceEntry:
    """Fila de un listado de cumplimiento."""
    worker: Worker
    status: Optional[ComplianceStatus]
    last_evaluation: Optional[EvaluationRecord]
    evaluation_count: int

    @property
    def is_inactive(self) -> bool:
        return not self.worker.active

    @property
    def last_evaluation_date(self) -> Optional[date]:
        """Fecha de la última evaluación registrada, si es legible."""
        if not self.last_evaluation:
            return None
        return parse_date(self.last_evaluation.evaluation_date)

    def matches(self, terms: List[str]) -> bool:
        """Verifica si todos los términos aparecen en nombre o cédula."""
        haystack = normalize_for_search(
            f"{self.worker.first_names} {self.worker.last_names} {self.worker.national_id}"
        )
        return all(term in haystack for term in terms)

    def to_row(self) -> Dict[str, Any]:
        """Fila para la tabla de cumplimiento."""
        if self.status is None:
            state = "inactivo"
            message = settings.get_message("inactive")
            days = None
        else:
            state = self.status.category.value
            message = self.status.message
            days = self.status.signed_days

        last_date = self.last_evaluation_date
        return {
            "Código": self.worker.code,
            "Empleado": self.worker.full_name,
            "Cargo": self.worker.position,
            "Estado": state,
            "Mensaje": message,
            "Días": days,
            "Última evaluación": format_date(last_date, "display") if last_date else "N/A",
            "Evaluaciones": self.evaluation_count
        }


@dataclass
class ComplianceResult:
    """Resultado del cálculo de cumplimiento de la nómina."""
    success: bool
    today: Optional[date]
    pending: List[WorkerComplianceEntry] = field(default_factory=list)
    completed: List[WorkerComplianceEntry] = field(default_factory=list)
    message: str = ""
    warnings: List[str] = field(default_factory=list)

    @property
    def total_workers(self) -> int:
        return len(self.pending) + len(self.completed)

    def category_counts(self) -> Dict[str, int]:
        """Número de trabajadores por estado (los inactivos aparte)."""
        counts: Dict[str, int] = defaultdict(int)
        for entry in self.pending + self.completed:
            key = "inactivo" if entry.status is None else entry.status.category.value
            counts[key] += 1
        return dict(counts)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Tabula ambos listados (pendientes primero) para las exportaciones.

        Returns:
            pd.DataFrame: Una fila por trabajador con las columnas configuradas
        """
        columns = settings.get_worklist_config()["columns"]
        rows = [entry.to_row() for entry in self.pending + self.completed]
        return pd.DataFrame(rows, columns=columns)

    @classmethod
    def success_result(cls, today: date, pending: List[WorkerComplianceEntry],
                       completed: List[WorkerComplianceEntry],
                       warnings: List[str] = None) -> 'ComplianceResult':
        """Crea un resultado exitoso."""
        return cls(
            success=True,
            today=today,
            pending=pending,
            completed=completed,
            message="Cumplimiento calculado exitosamente",
            warnings=warnings or []
        )

    @classmethod
    def failure_result(cls, message: str, warnings: List[str] = None) -> 'ComplianceResult':
        """Crea un resultado de fallo."""
        return cls(
            success=False,
            today=None,
            message=message,
            warnings=warnings or []
        )


class TrackComplianceUseCase:
    """
    Caso de uso para calcular el cumplimiento de toda la nómina.

    Los trabajadores inactivos no se evalúan: pasan directamente al
    listado de "al día" y se ubican al final.
    """

    def __init__(self,
                 worker_repository: WorkerRepository,
                 evaluation_repository: EvaluationRepository,
                 logging_service: Optional[LoggingService] = None):
        """
        Inicializa el caso de uso.

        Args:
            worker_repository: Repositorio de trabajadores
            evaluation_repository: Repositorio de evaluaciones
            logging_service: Servicio de logging (opcional)
        """
        self.worker_repository = worker_repository
        self.evaluation_repository = evaluation_repository
        self.logging_service = logging_service

    def execute(self, request: ComplianceRequest) -> ComplianceResult:
        """
        Ejecuta el cálculo de cumplimiento.

        Args:
            request: Solicitud de cálculo

        Returns:
            ComplianceResult: Listados de pendientes y al día
        """
        try:
            # 1. Validar solicitud
            validation_errors = request.validate()
            if validation_errors:
                return ComplianceResult.failure_result(
                    "Solicitud inválida: " + "; ".join(validation_errors)
                )

            today = coerce_date(request.today)
            engine = ComplianceEngine(annual_alert_days=request.annual_alert_days)

            # 2. Cargar datos
            workers = self.worker_repository.get_all_workers()
            evaluations_by_worker = self._group_evaluations(
                self.evaluation_repository.get_all_evaluations()
            )

            # 3. Calcular el estado de cada trabajador
            pending: List[WorkerComplianceEntry] = []
            completed: List[WorkerComplianceEntry] = []
            warnings: List[str] = []

            for worker in workers:
                worker_evaluations = evaluations_by_worker.get(worker.id, [])
                entry = WorkerComplianceEntry(
                    worker=worker,
                    status=None,
                    last_evaluation=worker_evaluations[0] if worker_evaluations else None,
                    evaluation_count=len(worker_evaluations)
                )

                if not worker.active:
                    completed.append(entry)
                    continue

                entry.status = engine.evaluate(worker, worker_evaluations, today)
                if entry.status.is_invalid:
                    warnings.append(f"{worker.full_name or worker.id}: {entry.status.message}")

                if entry.status.is_completed:
                    completed.append(entry)
                else:
                    pending.append(entry)

            # 4. Filtrar por búsqueda
            terms = normalize_for_search(request.search_term).split()
            if terms:
                pending = [entry for entry in pending if entry.matches(terms)]
                completed = [entry for entry in completed if entry.matches(terms)]

            # 5. Ordenar
            pending.sort(key=lambda entry: entry.status.sort_key)
            completed = self._sort_completed(completed)

            result = ComplianceResult.success_result(today, pending, completed, warnings)

            # 6. Log
            if self.logging_service:
                self.logging_service.log_compliance_computed(
                    len(workers), len(pending), len(completed)
                )
                for warning in warnings:
                    self.logging_service.log_warning(warning)

            return result

        except Exception as e:
            if self.logging_service:
                self.logging_service.log_error("compliance_tracking", e, {
                    "today": str(request.today)
                })

            return ComplianceResult.failure_result(
                f"Error inesperado durante el cálculo de cumplimiento: {str(e)}"
            )

    def get_worker_status(self, worker_id: str,
                          today: Union[date, datetime, str],
                          annual_alert_days: Optional[int] = None) -> Optional[ComplianceStatus]:
        """
        Calcula el estado de un único trabajador.

        Args:
            worker_id: ID del trabajador
            today: Fecha de consulta
            annual_alert_days: Umbral de alerta anual explícito (opcional)

        Returns:
            ComplianceStatus o None si el trabajador no existe o está inactivo
        """
        worker = self.worker_repository.get_worker_by_id(worker_id)
        if worker is None or not worker.active:
            return None

        records = self.evaluation_repository.get_evaluations_for_worker(worker_id)
        return ComplianceEngine(annual_alert_days=annual_alert_days).evaluate(worker, records, today)

    def _group_evaluations(self, evaluations: List[EvaluationRecord]) -> Dict[str, List[EvaluationRecord]]:
        """Agrupa las evaluaciones por trabajador, la más reciente primero."""
        grouped: Dict[str, List[EvaluationRecord]] = defaultdict(list)
        for evaluation in evaluations:
            grouped[evaluation.worker_id].append(evaluation)
        return {worker_id: sort_by_evaluation_date(records)
                for worker_id, records in grouped.items()}

    def _sort_completed(self, entries: List[WorkerComplianceEntry]) -> List[WorkerComplianceEntry]:
        """Activos primero por evaluación más reciente; sin fecha e inactivos al final."""
        def sort_key(entry: WorkerComplianceEntry):
            last_date = entry.last_evaluation_date
            return (
                entry.is_inactive,
                last_date is None,
                -(last_date.toordinal()) if last_date else 0
            )

        return sorted(entries, key=sort_key)
