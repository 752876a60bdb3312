"""Tests for registering the API mappers with the service container."""

from __future__ import annotations

import logging

import pytest

from appointment_booking import logging_setup
from appointment_booking.api.models import ApiAppointmentStatus
from appointment_booking.domain.entities import AppointmentStatus
from appointment_booking.infrastructure import di_container
from appointment_booking.infrastructure.di_container import Container, build_container
from appointment_booking.infrastructure.mappers import (
    AppointmentApiMapper,
    StatusTranslationMismatch,
    TreatmentApiMapper,
    appointment_mapper,
)


def test_defaults_register_mapper_singletons() -> None:
    container = build_container()

    appointment_mapper = container.resolve(AppointmentApiMapper)
    treatment_mapper = container.resolve(TreatmentApiMapper)

    assert isinstance(appointment_mapper, AppointmentApiMapper)
    assert isinstance(treatment_mapper, TreatmentApiMapper)
    assert container.resolve(AppointmentApiMapper) is appointment_mapper
    assert container.resolve(TreatmentApiMapper) is treatment_mapper


def test_cached_container_is_shared() -> None:
    di_container.get_container.cache_clear()
    try:
        assert di_container.get_container() is di_container.get_container()
        assert di_container.get_appointment_mapper() is di_container.get_appointment_mapper()
        assert di_container.get_treatment_mapper() is di_container.get_treatment_mapper()
    finally:
        di_container.get_container.cache_clear()


def test_overrides_replace_defaults() -> None:
    stub = TreatmentApiMapper()
    container = build_container({TreatmentApiMapper: stub})

    assert container.resolve(TreatmentApiMapper) is stub


def test_factory_override_is_called_per_resolve() -> None:
    container = build_container({AppointmentApiMapper: AppointmentApiMapper})

    first = container.resolve(AppointmentApiMapper)
    second = container.resolve(AppointmentApiMapper)

    assert isinstance(first, AppointmentApiMapper)
    assert first is not second


def test_unknown_service_raises_key_error() -> None:
    with pytest.raises(KeyError):
        Container().resolve(AppointmentApiMapper)


def test_register_requires_provider() -> None:
    with pytest.raises(ValueError):
        Container().register(AppointmentApiMapper)


def test_status_table_gap_fails_container_build(monkeypatch: pytest.MonkeyPatch) -> None:
    partial_table = {
        AppointmentStatus.SCHEDULED: ApiAppointmentStatus.SCHEDULED,
        AppointmentStatus.CANCELLED: ApiAppointmentStatus.CANCELLED,
    }
    monkeypatch.setattr(appointment_mapper, "_STATUS_TABLE", partial_table)

    with pytest.raises(StatusTranslationMismatch) as excinfo:
        build_container()

    assert excinfo.value.status_name == "COMPLETED"


def test_status_table_with_renamed_target_fails_container_build(monkeypatch: pytest.MonkeyPatch) -> None:
    crossed_table = {
        AppointmentStatus.SCHEDULED: ApiAppointmentStatus.SCHEDULED,
        AppointmentStatus.CANCELLED: ApiAppointmentStatus.COMPLETED,
        AppointmentStatus.COMPLETED: ApiAppointmentStatus.COMPLETED,
    }
    monkeypatch.setattr(appointment_mapper, "_STATUS_TABLE", crossed_table)

    with pytest.raises(StatusTranslationMismatch):
        build_container()


def test_registration_is_logged_with_registry_tag(tmp_path) -> None:
    logging_setup.configure_logging(log_path=tmp_path / "registry.log", force=True)
    records: list[logging.LogRecord] = []

    class _Collect(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            records.append(record)

    base_logger = logging.getLogger(logging_setup.LOGGER_NAME)
    handler = _Collect(level=logging.INFO)
    base_logger.addHandler(handler)
    try:
        build_container()
    finally:
        base_logger.removeHandler(handler)

    assert [r.tag for r in records] == [logging_setup.REGISTRY_TAG]
    assert "AppointmentApiMapper" in records[0].getMessage()
