"""Fixtures compartidas: repositorios en memoria y fábricas de datos."""

from typing import Dict, List, Optional, Any

import pytest

from evaluation_compliance.core.models import EvaluationRecord, ObserverStatus, Worker
from evaluation_compliance.application.ports import (
    EvaluationRepository,
    LoggingService,
    WorkerRepository
)


class InMemoryWorkerRepository(WorkerRepository):
    def __init__(self, workers: List[Worker]):
        self._workers = list(workers)

    def get_all_workers(self) -> List[Worker]:
        return list(self._workers)

    def get_worker_by_id(self, worker_id: str) -> Optional[Worker]:
        return next((w for w in self._workers if w.id == worker_id), None)


class InMemoryEvaluationRepository(EvaluationRepository):
    def __init__(self, evaluations: List[EvaluationRecord]):
        self._evaluations = list(evaluations)

    def get_all_evaluations(self) -> List[EvaluationRecord]:
        return list(self._evaluations)

    def get_evaluations_for_worker(self, worker_id: str) -> List[EvaluationRecord]:
        return [e for e in self._evaluations if e.worker_id == worker_id]


class RecordingLoggingService(LoggingService):
    def __init__(self):
        self.calls: List[tuple] = []

    def log_compliance_computed(self, workers_count, pending_count, completed_count):
        self.calls.append(("computed", workers_count, pending_count, completed_count))

    def log_info(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.calls.append(("info", message, context))

    def log_warning(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.calls.append(("warning", message, context))

    def log_error(self, operation: str, error: Exception, context: Optional[Dict[str, Any]] = None):
        self.calls.append(("error", operation, error, context))


def make_worker(worker_id="w1", hire_date="2023-01-10", anchor=None, observer=None,
                active=True, **extra) -> Worker:
    return Worker(
        id=worker_id,
        hire_date=hire_date,
        annual_anchor_date=anchor,
        observer_email=observer,
        active=active,
        **extra
    )


def make_record(evaluation_date, status=ObserverStatus.NONE, worker_id="w1",
                record_id=None, evaluator_id="ev1") -> EvaluationRecord:
    return EvaluationRecord(
        id=record_id or f"{worker_id}-{evaluation_date}-{status.value}",
        worker_id=worker_id,
        evaluation_date=evaluation_date,
        observer_status=status,
        evaluator_id=evaluator_id
    )


@pytest.fixture
def logging_service():
    return RecordingLoggingService()
