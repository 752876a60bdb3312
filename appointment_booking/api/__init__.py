"""API-facing request and response models."""

from .models import (
    ApiAppointmentStatus,
    Appointment,
    AppointmentRequest,
    Treatment,
    TreatmentDetails,
    TreatmentDetailsSpecialist,
    TreatmentRequest,
)

__all__ = [
    "ApiAppointmentStatus",
    "Appointment",
    "AppointmentRequest",
    "Treatment",
    "TreatmentDetails",
    "TreatmentDetailsSpecialist",
    "TreatmentRequest",
]
