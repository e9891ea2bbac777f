# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Abstractions for talking to the grid scheduler.

- `SchedulerClient`: the narrow interface qsubmit requires from a scheduler
  client library: opening and closing a session, allocating and deleting
  job templates, configuring a template and running it.

- `DrmaaClient`: implementation of `SchedulerClient` backed by the DRMAA v1
  Python binding, as provided by SGE-family schedulers via `libdrmaa`.
"""

from .drmaa_client import DrmaaClient
from .interface import SchedulerClient

__all__ = ["DrmaaClient", "SchedulerClient"]
