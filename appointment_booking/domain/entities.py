"""Internal transfer records exchanged with the booking use cases."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class AppointmentStatus(Enum):
    SCHEDULED = "SCHEDULED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


@dataclass(frozen=True)
class BookingIntent:
    """Request to book an appointment, consumed by the booking use case."""

    client_id: int
    treatment_id: int
    specialist_id: int
    date_time: datetime


@dataclass(frozen=True)
class TreatmentCreationIntent:
    """Request to create a treatment offered by a specialist."""

    name: str | None
    duration_minutes: int
    specialist_id: int | None
    description: str


@dataclass(frozen=True)
class ClientRecord:
    id: int


@dataclass(frozen=True)
class SpecializationRecord:
    name: str | None


@dataclass(frozen=True)
class SpecialistRecord:
    id: int | None
    specialization: SpecializationRecord


@dataclass(frozen=True)
class TreatmentRecord:
    id: int | None
    name: str | None
    duration_minutes: int


@dataclass(frozen=True)
class TreatmentComposite:
    """Treatment together with the specialist who offers it."""

    treatment: TreatmentRecord
    specialist: SpecialistRecord


@dataclass(frozen=True)
class AppointmentRecord:
    id: int
    date_time: datetime
    status: AppointmentStatus


@dataclass(frozen=True)
class AppointmentComposite:
    """Appointment joined with its client and treatment for presentation."""

    appointment: AppointmentRecord
    client: ClientRecord
    treatment: TreatmentComposite


__all__ = [
    "AppointmentComposite",
    "AppointmentRecord",
    "AppointmentStatus",
    "BookingIntent",
    "ClientRecord",
    "SpecialistRecord",
    "SpecializationRecord",
    "TreatmentComposite",
    "TreatmentCreationIntent",
    "TreatmentRecord",
]
