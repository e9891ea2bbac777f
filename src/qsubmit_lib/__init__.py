# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the qsubmit command-line tool.

This package translates a job request (script, CPUs, memory, queues, project)
into the native specification of an SGE-family scheduler and submits it
through a DRMAA session, releasing all scheduler resources on every exit path.
"""

from .qsubmit import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "core",
    "properties",
    "scheduler",
    "submit",
]
