"""Infrastructure mappers bridging API models and booking transfer records."""

from .appointment_mapper import (
    AppointmentApiMapper,
    StatusTranslationMismatch,
    to_api_status,
    verify_status_coverage,
)
from .treatment_mapper import DEFAULT_DESCRIPTION, TreatmentApiMapper

__all__ = [
    "AppointmentApiMapper",
    "DEFAULT_DESCRIPTION",
    "StatusTranslationMismatch",
    "TreatmentApiMapper",
    "to_api_status",
    "verify_status_coverage",
]
