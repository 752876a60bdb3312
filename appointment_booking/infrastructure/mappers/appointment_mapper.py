"""Mapping between appointment API models and booking transfer records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Mapping

from appointment_booking.api.models import (
    ApiAppointmentStatus,
    Appointment,
    AppointmentRequest,
)
from appointment_booking.config import settings
from appointment_booking.domain.entities import (
    AppointmentComposite,
    AppointmentStatus,
    BookingIntent,
)
from appointment_booking.logging_setup import MAPPER_TAG, get_logger
from appointment_booking.utils import converters
from appointment_booking.utils.optional import Maybe

log = get_logger(MAPPER_TAG)

# TODO: drop once BookingIntent.specialist_id is removed; the conflict check
# that reads it can derive the specialist from the treatment instead.
PLACEHOLDER_SPECIALIST_ID = 0

_STATUS_TABLE: Mapping[AppointmentStatus, ApiAppointmentStatus] = {
    AppointmentStatus.SCHEDULED: ApiAppointmentStatus.SCHEDULED,
    AppointmentStatus.CANCELLED: ApiAppointmentStatus.CANCELLED,
    AppointmentStatus.COMPLETED: ApiAppointmentStatus.COMPLETED,
}


class StatusTranslationMismatch(LookupError):
    """Raised when an appointment status has no counterpart in the API vocabulary."""

    def __init__(self, status_name: str) -> None:
        super().__init__(f"no API appointment status matches '{status_name}'")
        self.status_name = status_name


def verify_status_coverage() -> None:
    """Fail fast if an internal status has no same-named entry in the table."""

    for status in AppointmentStatus:
        api_status = _STATUS_TABLE.get(status)
        if api_status is None:
            raise StatusTranslationMismatch(status.name)
        if api_status.name != status.name:
            raise StatusTranslationMismatch(status.name)


def to_api_status(status: AppointmentStatus) -> ApiAppointmentStatus:
    """Translate ``status`` to the API member carrying the same name."""

    try:
        return _STATUS_TABLE[status]
    except (KeyError, TypeError):
        pass
    name = getattr(status, "name", str(status))
    try:
        return ApiAppointmentStatus[name]
    except KeyError:
        log.warning("Cannot translate appointment status '%s' to the API vocabulary", name)
        raise StatusTranslationMismatch(name) from None


@dataclass
class AppointmentApiMapper:
    """Translate booking requests and appointment composites for the API."""

    default_tz: tzinfo | None = None

    def to_booking_intent(self, request: AppointmentRequest | Mapping[str, object]) -> BookingIntent:
        """Build the :class:`BookingIntent` for an inbound booking request."""

        if not isinstance(request, AppointmentRequest):
            request = AppointmentRequest.model_validate(request)

        instant = converters.to_instant(request.date_time, self.default_tz or settings.timezone)
        log.debug(
            "Mapped booking request client=%s treatment=%s at %s",
            request.client_id,
            request.treatment_id,
            instant.isoformat(),
        )
        return BookingIntent(
            client_id=request.client_id,
            treatment_id=request.treatment_id,
            specialist_id=PLACEHOLDER_SPECIALIST_ID,
            date_time=instant,
        )

    def to_api_appointment(self, composite: AppointmentComposite) -> Appointment:
        """Build the outbound :class:`Appointment` for ``composite``."""

        appointment = composite.appointment
        return Appointment(
            id=Maybe.of(appointment.id),
            client_id=Maybe.of(composite.client.id),
            treatment_id=Maybe.of(composite.treatment.treatment.id),
            date_time=Maybe.of(converters.to_api_datetime(appointment.date_time)),
            status=Maybe.of(to_api_status(appointment.status)),
        )
