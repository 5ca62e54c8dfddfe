"""Recurrence rules, calendar math and domain errors."""
