"""API models for the appointment booking service.

Inbound requests are parsed with pydantic. Outbound resources carry every
field as a :class:`~appointment_booking.utils.optional.Maybe` because the
response schema allows partial population.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from appointment_booking.utils.converters import format_api_datetime
from appointment_booking.utils.optional import Maybe


# =============================================================================
# Request Models
# =============================================================================


class AppointmentRequest(BaseModel):
    """Request to book a treatment for a client."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    client_id: int = Field(alias="clientId")
    treatment_id: int = Field(alias="treatmentId")
    date_time: datetime = Field(alias="dateTime")


class TreatmentRequest(BaseModel):
    """Request to create a treatment."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str | None = None
    duration: int | None = None
    specialist_id: int | None = Field(default=None, alias="specialistId")


# =============================================================================
# Response Models
# =============================================================================


class ApiAppointmentStatus(Enum):
    SCHEDULED = "SCHEDULED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


def _put(payload: Dict[str, Any], key: str, value: Maybe[Any], render=lambda v: v) -> None:
    if value.is_present:
        payload[key] = render(value.get())


@dataclass(frozen=True)
class Appointment:
    id: Maybe[int] = field(default_factory=Maybe.empty)
    client_id: Maybe[int] = field(default_factory=Maybe.empty)
    treatment_id: Maybe[int] = field(default_factory=Maybe.empty)
    date_time: Maybe[datetime] = field(default_factory=Maybe.empty)
    status: Maybe[ApiAppointmentStatus] = field(default_factory=Maybe.empty)

    def to_payload(self) -> Dict[str, Any]:
        """Return the camelCase wire representation, omitting absent fields."""

        payload: Dict[str, Any] = {}
        _put(payload, "id", self.id)
        _put(payload, "clientId", self.client_id)
        _put(payload, "treatmentId", self.treatment_id)
        _put(payload, "dateTime", self.date_time, format_api_datetime)
        _put(payload, "status", self.status, lambda s: s.name)
        return payload


@dataclass(frozen=True)
class Treatment:
    id: Maybe[int] = field(default_factory=Maybe.empty)
    name: Maybe[str] = field(default_factory=Maybe.empty)
    duration: Maybe[int] = field(default_factory=Maybe.empty)
    specialist_id: Maybe[int] = field(default_factory=Maybe.empty)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        _put(payload, "id", self.id)
        _put(payload, "name", self.name)
        _put(payload, "duration", self.duration)
        _put(payload, "specialistId", self.specialist_id)
        return payload


@dataclass(frozen=True)
class TreatmentDetailsSpecialist:
    """Specialist summary nested inside :class:`TreatmentDetails`."""

    id: Maybe[int] = field(default_factory=Maybe.empty)
    name: Maybe[str] = field(default_factory=Maybe.empty)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        _put(payload, "id", self.id)
        _put(payload, "name", self.name)
        return payload


@dataclass(frozen=True)
class TreatmentDetails(Treatment):
    specialist: Maybe[TreatmentDetailsSpecialist] = field(default_factory=Maybe.empty)

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        _put(payload, "specialist", self.specialist, lambda s: s.to_payload())
        return payload


__all__ = [
    "ApiAppointmentStatus",
    "Appointment",
    "AppointmentRequest",
    "Treatment",
    "TreatmentDetails",
    "TreatmentDetailsSpecialist",
    "TreatmentRequest",
]
