"""Tests de validación en el borde: documentos del portal a modelos."""

import logging
from datetime import date

import pytest

from evaluation_compliance.core.models import (
    CycleWindow,
    EvaluationRecord,
    ObserverStatus,
    Worker
)
from evaluation_compliance.infrastructure.logging_service import StandardLoggingService


class TestWorkerFromDict:

    def test_portal_document(self):
        worker = Worker.from_dict({
            "id": "abc",
            "fechaIngreso": "10/01/2023",
            "fechaEvaluacionAnual": "",
            "observerEmail": "obs@empresa.com",
            "Status": "active",
            "nombres": "José",
            "apellidos": "Pérez",
            "cedula": 1712345678,
            "liderArea": "lider@empresa.com",
        })
        assert worker.hire_date == "10/01/2023"
        assert worker.annual_anchor_date is None
        assert worker.has_observer
        assert worker.active
        assert worker.national_id == "1712345678"
        assert worker.full_name == "Pérez José"
        assert worker.assigned_evaluator == "lider@empresa.com"

    def test_blank_observer_means_no_observer(self):
        assert not Worker(id="x", hire_date="2023-01-01", observer_email="  ").has_observer

    def test_inactive_status(self):
        assert not Worker.from_dict({"id": "x", "Status": "inactive"}).active

    def test_missing_id(self):
        with pytest.raises(ValueError):
            Worker.from_dict({"fechaIngreso": "2023-01-01"})

    def test_unknown_status(self):
        with pytest.raises(ValueError):
            Worker.from_dict({"id": "x", "Status": "suspendido"})


class TestEvaluationFromDict:

    def test_portal_document(self):
        record = EvaluationRecord.from_dict({
            "id": "e1",
            "workerId": "w1",
            "evaluationDate": "2023-05-01",
            "observerStatus": "review_requested",
            "evaluatorId": "ev1",
            "observerComments": "Falta sustento",
        })
        assert record.observer_status == ObserverStatus.REVIEW_REQUESTED
        assert record.needs_rework

    def test_missing_status_is_none(self):
        record = EvaluationRecord.from_dict({"id": "e1", "workerId": "w1"})
        assert record.observer_status == ObserverStatus.NONE

    def test_unknown_status_is_rejected(self):
        with pytest.raises(ValueError, match="Estado de observador inválido"):
            EvaluationRecord.from_dict({"id": "e1", "workerId": "w1", "observerStatus": "ok"})

    def test_missing_worker(self):
        with pytest.raises(ValueError):
            EvaluationRecord.from_dict({"id": "e1"})

    def test_known_statuses(self):
        assert ObserverStatus.get_all_values() == ["none", "pending", "approved", "review_requested"]


class TestCycleWindow:

    def test_end_before_start_is_rejected(self):
        with pytest.raises(ValueError):
            CycleWindow(date(2023, 2, 1), date(2023, 1, 1))

    def test_span(self):
        assert CycleWindow(date(2023, 1, 10), date(2023, 4, 10)).span_days == 90


class TestStandardLoggingService:

    def test_messages_include_context(self, caplog):
        logger = logging.getLogger("evaluation_compliance.tests")
        service = StandardLoggingService(logger)

        with caplog.at_level(logging.INFO, logger="evaluation_compliance.tests"):
            service.log_info("Listado calculado", {"trabajadores": 3})
            service.log_compliance_computed(3, 1, 2)

        assert "Listado calculado (trabajadores=3)" in caplog.text
        assert "3 trabajadores, 1 pendientes, 2 al día" in caplog.text

    def test_errors_carry_traceback(self, caplog):
        service = StandardLoggingService(logging.getLogger("evaluation_compliance.tests"))
        try:
            raise RuntimeError("falló")
        except RuntimeError as error:
            with caplog.at_level(logging.ERROR, logger="evaluation_compliance.tests"):
                service.log_error("compliance_tracking", error)

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert "Error en compliance_tracking: falló" in record.getMessage()
        assert record.exc_info is not None
