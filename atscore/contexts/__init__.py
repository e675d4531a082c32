"""Bounded contexts: intake, analysis, scoring, history."""
