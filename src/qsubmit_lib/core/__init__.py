# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for qsubmit.

This module collects the configuration, error types and structured logging
used across the qsubmit codebase.
"""
