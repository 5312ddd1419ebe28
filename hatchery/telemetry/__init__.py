"""Telemetry events published by the genetics pipeline."""
