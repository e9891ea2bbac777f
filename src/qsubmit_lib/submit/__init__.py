# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Utilities for submitting a job to an SGE-family scheduler.

`build_native_spec` translates a `ResourceRequest` into the scheduler's native
specification string, with options rendered in a fixed order.

`SubmissionSession` opens a scheduler session, allocates and configures a job
template, runs it and releases both the template and the session on every exit
path. Failed submissions are turned into diagnostics by `classify_failure`.

`Submitter` ties these together and is the entry point used by the command line.
"""

from .classifier import classify_failure
from .cli import submit
from .native_spec import build_native_spec
from .session import SubmissionSession
from .submitter import Submitter

__all__ = [
    "SubmissionSession",
    "Submitter",
    "build_native_spec",
    "classify_failure",
    "submit",
]
