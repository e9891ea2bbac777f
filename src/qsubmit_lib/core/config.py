# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for qsubmit.

This module defines dataclasses representing all configurable aspects of qsubmit,
including environment variables, the vocabulary of the rendered native
specification, command-line defaults, and exit codes.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class EnvironmentVariables:
    """Environment variable names used by qsubmit."""

    # Enables qsubmit debug mode.
    debug_mode: str = "QSUBMIT_DEBUG"
    # Explicit path to the qsubmit config file.
    config: str = "QSUBMIT_CONFIG"


@dataclass
class NativeSpecSettings:
    """Vocabulary used when rendering the SGE native specification."""

    # Name of the parallel environment used to request CPUs.
    parallel_environment: str = "smp"
    # Flag making the scheduler use the submission directory as the working directory.
    working_dir_flag: str = "-cwd"
    # Binary mode of the submitted command ('n' = run the script through a shell).
    binary_mode: str = "n"
    # Name of the resource used for requested memory.
    memory_resource: str = "vf"
    # Name of the resource used for requested virtual memory.
    virtual_memory_resource: str = "h_vmem"
    # Unit suffix appended to memory values.
    size_unit: str = "g"


@dataclass
class SubmitDefaults:
    """Default values of the submission options."""

    # Number of CPUs requested when not specified.
    cpu_count: int = 1
    # Queue list used when not specified.
    queue: str = "scv.q,sci.q"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by qsubmit.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failed submissions.
    default: int = 91
    # Returned when the provided options or script are invalid.
    configuration: int = 92
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration for qsubmit."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    native_spec: NativeSpecSettings = field(default_factory=NativeSpecSettings)
    defaults: SubmitDefaults = field(default_factory=SubmitDefaults)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    # Name of the qsubmit binary.
    binary_name: str = "qsubmit"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read qsubmit config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path)
            if (env_path := os.getenv(EnvironmentVariables.config))
            else None,
            # 2. Current working directory
            Path.cwd() / "qsubmit_config.toml",
            # 3. XDG config home
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "qsubmit"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Unknown keys are ignored.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        if field_info.name not in data:
            continue

        value = data[field_info.name]
        if is_dataclass(field_info.type) and isinstance(value, dict):
            value = _dict_to_dataclass(field_info.type, value)
        field_values[field_info.name] = value

    return cls(**field_values)


# Global configuration for qsubmit.
CFG = Config.load()
