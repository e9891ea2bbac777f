# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Structured representation of a single job submission request.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Self

from qsubmit_lib.core.config import CFG
from qsubmit_lib.core.error import ConfigurationError

from .queues import normalize_queues, split_queues


@dataclass(frozen=True)
class ResourceRequest:
    """
    Immutable description of one job to submit.

    Memory fields are `None` unless explicitly requested by the caller.
    A value of zero is an explicit request and is kept.
    """

    # Absolute path to the submitted script
    script_path: Path

    # Number of CPU cores to request
    cpu_count: int = CFG.defaults.cpu_count

    # Memory in GiB (None = not requested)
    memory_gib: int | None = None

    # Virtual memory in GiB (None = not requested)
    virtual_memory_gib: int | None = None

    # Queue names in the order they were provided (normalized on construction)
    queues: tuple[str, ...] = ()

    # Accounting project used for resource quota management
    accounting_project: str | None = None

    def __post_init__(self):
        if not self.script_path.is_absolute():
            raise ConfigurationError(
                f"Script path '{self.script_path}' must be absolute."
            )

        if self.cpu_count < 1:
            raise ConfigurationError(
                f"Number of CPUs must be a positive integer, not '{self.cpu_count}'."
            )

        for name, value in (
            ("memory", self.memory_gib),
            ("virtual memory", self.virtual_memory_gib),
        ):
            if value is not None and value < 0:
                raise ConfigurationError(
                    f"Requested {name} must not be negative, not '{value}'."
                )

        if self.accounting_project is not None:
            if not self.accounting_project.strip():
                raise ConfigurationError("Accounting project must not be empty.")
            if any(c.isspace() for c in self.accounting_project):
                raise ConfigurationError(
                    f"Accounting project '{self.accounting_project}' must not contain whitespace."
                )

        # queue names are kept in their canonical form
        object.__setattr__(
            self, "queues", split_queues(normalize_queues(",".join(self.queues)))
        )

    @classmethod
    def fromOptions(
        cls,
        script: Path,
        cpu: int | None = None,
        mem: int | None = None,
        h_vmem: int | None = None,
        queue: str | None = None,
        project: str | None = None,
    ) -> Self:
        """
        Build a request from raw user-provided options.

        Args:
            script (Path): Path to the script; resolved to an absolute path.
            cpu (int | None): Number of CPUs. Uses the configured default if None.
            mem (int | None): Memory in GiB. None if not explicitly requested.
            h_vmem (int | None): Virtual memory in GiB. None if not explicitly requested.
            queue (str | None): Free-form comma-separated list of queues.
            project (str | None): Accounting project. Blank values are ignored.

        Returns:
            ResourceRequest: The normalized request.

        Raises:
            ConfigurationError: If any of the values is invalid.
        """
        project = project.strip() if project else None

        return cls(
            script_path=script.resolve(),
            cpu_count=CFG.defaults.cpu_count if cpu is None else cpu,
            memory_gib=mem,
            virtual_memory_gib=h_vmem,
            queues=split_queues(normalize_queues(queue)),
            accounting_project=project or None,
        )

    @property
    def job_name(self) -> str:
        """Name of the job, i.e. the base name of the script."""
        return self.script_path.name

    @property
    def script_dir(self) -> Path:
        """Directory containing the script."""
        return self.script_path.parent

    @property
    def queue_list(self) -> str:
        """Requested queues as a comma-separated list."""
        return ",".join(self.queues)
