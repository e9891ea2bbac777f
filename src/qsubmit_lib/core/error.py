# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout qsubmit.

Errors are split by the stage of the submission that failed: opening a scheduler
session, preparing a job template, or submitting the job itself. Invalid input
provided by the caller is reported as a configuration error. Each exception
carries the exit code used by the command line to report the failure.
"""

from .config import CFG


class QSubmitError(Exception):
    """Common exception type for all recoverable qsubmit errors."""

    exit_code = CFG.exit_codes.default


class ConfigurationError(QSubmitError):
    """Raised when the submission options or the script are invalid."""

    exit_code = CFG.exit_codes.configuration


class SessionError(QSubmitError):
    """Raised when a scheduler session cannot be established."""

    pass


class TemplateError(QSubmitError):
    """Raised when a job template cannot be allocated or configured."""

    pass


class SubmissionError(QSubmitError):
    """
    Raised when the scheduler rejects the submitted job.

    Carries the rendered native specification and the requested queues
    so that the failure can be diagnosed without submitting again.
    """

    def __init__(self, message: str, native_spec: str, queues: str = ""):
        super().__init__(message)
        self.native_spec = native_spec
        self.queues = queues


class WorkingDirectoryError(QSubmitError):
    """Raised when the submission cannot be performed from the script's directory."""

    pass
