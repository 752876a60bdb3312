"""Infrastructure adapters for the appointment booking API."""
