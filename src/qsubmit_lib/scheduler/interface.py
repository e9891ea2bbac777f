# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from abc import ABC
from typing import Any


class SchedulerClient(ABC):
    """
    Abstract base class for scheduler client libraries.

    A client owns at most one session at a time. Job templates are opaque
    handles bound to the open session.

    Implementations should let the errors of the underlying library propagate;
    they are wrapped into qsubmit errors by `SubmissionSession`.
    """

    def openSession(self) -> None:
        """
        Open a session with the scheduler.

        Raises:
            Exception: If no scheduler is reachable.
        """
        raise NotImplementedError(
            "openSession method is not implemented for this scheduler client"
        )

    def closeSession(self) -> None:
        """Close the open session."""
        raise NotImplementedError(
            "closeSession method is not implemented for this scheduler client"
        )

    def allocateJobTemplate(self) -> Any:
        """
        Allocate a new job template within the open session.

        Returns:
            Any: Handle of the allocated template.
        """
        raise NotImplementedError(
            "allocateJobTemplate method is not implemented for this scheduler client"
        )

    def deleteJobTemplate(self, template: Any) -> None:
        """Release a job template allocated by `allocateJobTemplate`."""
        raise NotImplementedError(
            "deleteJobTemplate method is not implemented for this scheduler client"
        )

    def setRemoteCommand(self, template: Any, command: str) -> None:
        """Set the command (script) executed by the job."""
        raise NotImplementedError(
            "setRemoteCommand method is not implemented for this scheduler client"
        )

    def setJobName(self, template: Any, name: str) -> None:
        """Set the name of the job."""
        raise NotImplementedError(
            "setJobName method is not implemented for this scheduler client"
        )

    def setNativeSpecification(self, template: Any, native_spec: str) -> None:
        """Set the scheduler-specific submission options of the job."""
        raise NotImplementedError(
            "setNativeSpecification method is not implemented for this scheduler client"
        )

    def runJob(self, template: Any) -> str:
        """
        Submit the configured template.

        Returns:
            str: Identifier assigned to the job by the scheduler.
        """
        raise NotImplementedError(
            "runJob method is not implemented for this scheduler client"
        )
