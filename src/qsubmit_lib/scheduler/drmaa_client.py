# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from collections.abc import Callable
from typing import Any

from qsubmit_lib.core.logger import get_logger

from .interface import SchedulerClient

logger = get_logger(__name__)


class DrmaaClient(SchedulerClient):
    """
    Scheduler client using the DRMAA v1 Python binding.

    The `drmaa` module locates `libdrmaa` when imported and fails if it is not
    available, so it is only imported once a session is actually opened.
    """

    def __init__(self, session_factory: Callable[[], Any] | None = None):
        """
        Initialize the client.

        Args:
            session_factory (Callable[[], Any] | None): Callable returning a new
                (not yet initialized) DRMAA session. Defaults to `drmaa.Session`.
        """
        self._session_factory = session_factory
        self._session = None

    def openSession(self) -> None:
        if self._session is not None:
            raise RuntimeError("DRMAA session is already open.")

        factory = self._session_factory
        if factory is None:
            import drmaa

            factory = drmaa.Session

        session = factory()
        session.initialize()
        self._session = session
        logger.debug("Opened DRMAA session.")

    def closeSession(self) -> None:
        session = self._requireSession()
        # the session is considered closed even if exiting fails
        self._session = None
        session.exit()
        logger.debug("Closed DRMAA session.")

    def allocateJobTemplate(self) -> Any:
        return self._requireSession().createJobTemplate()

    def deleteJobTemplate(self, template: Any) -> None:
        self._requireSession().deleteJobTemplate(template)

    def setRemoteCommand(self, template: Any, command: str) -> None:
        template.remoteCommand = command

    def setJobName(self, template: Any, name: str) -> None:
        template.jobName = name

    def setNativeSpecification(self, template: Any, native_spec: str) -> None:
        template.nativeSpecification = native_spec

    def runJob(self, template: Any) -> str:
        return self._requireSession().runJob(template)

    def _requireSession(self) -> Any:
        """Return the open session or raise if there is none."""
        if self._session is None:
            raise RuntimeError("No DRMAA session is open.")
        return self._session
