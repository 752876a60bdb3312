"""Mapping between treatment API models and treatment transfer records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from appointment_booking.api.models import (
    Treatment,
    TreatmentDetails,
    TreatmentDetailsSpecialist,
    TreatmentRequest,
)
from appointment_booking.domain.entities import TreatmentComposite, TreatmentCreationIntent
from appointment_booking.logging_setup import MAPPER_TAG, get_logger
from appointment_booking.utils.optional import Maybe

log = get_logger(MAPPER_TAG)

# Placeholder until treatment requests carry a description of their own.
DEFAULT_DESCRIPTION = "Default description"


@dataclass
class TreatmentApiMapper:
    """Translate treatment requests and treatment composites for the API."""

    def to_creation_intent(self, request: TreatmentRequest | Mapping[str, object]) -> TreatmentCreationIntent:
        if not isinstance(request, TreatmentRequest):
            request = TreatmentRequest.model_validate(request)

        duration = request.duration if request.duration is not None else 0
        log.debug("Mapped treatment request name=%r duration=%s", request.name, duration)
        return TreatmentCreationIntent(
            name=request.name,
            duration_minutes=duration,
            specialist_id=request.specialist_id,
            description=DEFAULT_DESCRIPTION,
        )

    def to_api_treatment(self, composite: TreatmentComposite) -> Treatment:
        """Build the summary :class:`Treatment` for ``composite``."""

        treatment = composite.treatment
        return Treatment(
            id=Maybe.of_nullable(treatment.id),
            name=Maybe.of_nullable(treatment.name),
            duration=Maybe.of(treatment.duration_minutes),
            specialist_id=Maybe.of_nullable(composite.specialist.id),
        )

    def to_api_treatment_details(self, composite: TreatmentComposite) -> TreatmentDetails:
        """Build :class:`TreatmentDetails`, nesting a summary of the specialist."""

        treatment = composite.treatment
        specialist = composite.specialist
        summary = TreatmentDetailsSpecialist(
            id=Maybe.of_nullable(specialist.id),
            name=Maybe.of_nullable(specialist.specialization.name),
        )
        return TreatmentDetails(
            id=Maybe.of_nullable(treatment.id),
            name=Maybe.of_nullable(treatment.name),
            duration=Maybe.of(treatment.duration_minutes),
            specialist_id=Maybe.of_nullable(specialist.id),
            specialist=Maybe.of(summary),
        )
