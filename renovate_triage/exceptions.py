"""Errors raised by renovate triage."""


class TriageError(RuntimeError):
    """Fatal condition that aborts the whole triage run."""
