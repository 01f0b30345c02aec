"""Tests de la cola de evaluaciones devueltas por el observador."""

from evaluation_compliance.application import ReworkQueueUseCase
from evaluation_compliance.core.models import ObserverStatus

from conftest import InMemoryEvaluationRepository, make_record


def _queue(logging_service=None):
    records = [
        make_record("2023-01-01", ObserverStatus.REVIEW_REQUESTED, record_id="r1"),
        make_record("2023-05-01", ObserverStatus.REVIEW_REQUESTED, record_id="r2"),
        make_record("sin fecha", ObserverStatus.REVIEW_REQUESTED, record_id="r3"),
        make_record("2023-06-01", ObserverStatus.REVIEW_REQUESTED, record_id="r4", evaluator_id="ev2"),
        make_record("2023-07-01", ObserverStatus.APPROVED, record_id="r5"),
    ]
    return ReworkQueueUseCase(InMemoryEvaluationRepository(records), logging_service)


def test_only_returned_evaluations_of_the_evaluator_newest_first():
    queue = _queue().execute("ev1")
    assert [record.id for record in queue] == ["r2", "r1", "r3"]


def test_empty_evaluator_has_no_queue():
    assert _queue().execute("") == []


def test_queue_size_is_logged(logging_service):
    _queue(logging_service).execute("ev2")
    assert logging_service.calls == [
        ("info", "1 evaluaciones devueltas para corrección", {"evaluator_id": "ev2"})
    ]
