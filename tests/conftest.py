import os
import sys
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

os.environ.setdefault("APP_LOG_DIR", tempfile.gettempdir())
os.environ.setdefault("APP_LOG_TO_CONSOLE", "false")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from appointment_booking import logging_setup  # noqa: E402
from appointment_booking.domain.entities import (  # noqa: E402
    AppointmentComposite,
    AppointmentRecord,
    AppointmentStatus,
    ClientRecord,
    SpecialistRecord,
    SpecializationRecord,
    TreatmentComposite,
    TreatmentRecord,
)


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logging_setup.reset_logging()


@pytest.fixture
def treatment_composite() -> TreatmentComposite:
    return TreatmentComposite(
        treatment=TreatmentRecord(id=1, name="Massage", duration_minutes=60),
        specialist=SpecialistRecord(id=9, specialization=SpecializationRecord(name="Physio")),
    )


@pytest.fixture
def appointment_composite(treatment_composite: TreatmentComposite) -> AppointmentComposite:
    return AppointmentComposite(
        appointment=AppointmentRecord(
            id=42,
            date_time=datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc),
            status=AppointmentStatus.SCHEDULED,
        ),
        client=ClientRecord(id=7),
        treatment=treatment_composite,
    )
