# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Value objects describing a qsubmit job request.

`ResourceRequest` captures the script, CPUs, memory, queues and accounting
project of one submission. The `queues` module normalizes free-form queue
input into the canonical comma-separated list used by the scheduler.
"""

from .queues import normalize_queues, split_queues
from .request import ResourceRequest

__all__ = ["ResourceRequest", "normalize_queues", "split_queues"]
