"""Domain transfer records for appointment booking."""
