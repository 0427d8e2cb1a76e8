"""Exceptions that abort an audit run.

Per-URL and per-width capture failures never raise past the capture runner;
they are recorded on the CaptureOutcome instead. Only the errors below reach
the CLI.
"""

from __future__ import annotations


class AuditError(Exception):
    """Base class for fatal audit errors."""


class UrlListError(AuditError):
    """The URL list is missing, unreadable or empty."""


class BrowserLaunchError(AuditError):
    """The shared Chromium instance could not be started."""


class TaskListError(AuditError):
    """The analysis task list is missing or malformed."""


class VerdictLoadError(AuditError):
    """The analysis results file is missing or malformed."""
