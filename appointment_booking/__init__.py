"""API mapping layer for the appointment booking service."""
