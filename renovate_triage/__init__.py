"""Renovate Triage - approve and merge Renovate dependency PRs awaiting your review."""

__version__ = "0.1.0"
