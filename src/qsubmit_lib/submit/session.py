# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Callable, Iterator
from contextlib import ExitStack, chdir, contextmanager
from typing import Any

from qsubmit_lib.core.error import (
    SessionError,
    SubmissionError,
    TemplateError,
    WorkingDirectoryError,
)
from qsubmit_lib.core.logger import get_logger
from qsubmit_lib.properties.request import ResourceRequest
from qsubmit_lib.scheduler.interface import SchedulerClient

from .classifier import classify_failure
from .native_spec import build_native_spec

logger = get_logger(__name__)


class SubmissionSession:
    """
    Submits a single job through a scheduler session.

    Each call to `submit` opens its own session and job template and releases
    both (the template first) before returning, whether the submission
    succeeded or not. Sessions and templates are never reused.
    """

    def __init__(self, client: SchedulerClient):
        """
        Initialize the submission session.

        Args:
            client (SchedulerClient): Client used to talk to the scheduler.
        """
        self._client = client

    def submit(self, request: ResourceRequest, native_spec: str | None = None) -> str:
        """
        Submit the job described by the request.

        The native specification uses the working directory of the submitting
        process, so the submission is performed from the script's directory.
        The original working directory is restored afterwards. This method is
        therefore not thread-safe.

        Args:
            request (ResourceRequest): The job to submit.
            native_spec (str | None): Rendered native specification.
                Rendered from the request if not provided.

        Returns:
            str: Identifier of the submitted job.

        Raises:
            WorkingDirectoryError: If the script's directory cannot be entered.
            SessionError: If the scheduler session cannot be opened.
            TemplateError: If the job template cannot be allocated or configured.
            SubmissionError: If the scheduler rejects the job.
        """
        if native_spec is None:
            native_spec = build_native_spec(request)

        with ExitStack() as stack:
            try:
                stack.enter_context(chdir(request.script_dir))
            except OSError as e:
                raise WorkingDirectoryError(
                    f"Failed to change to script directory '{request.script_dir}': {e}"
                ) from e

            stack.enter_context(self._session())
            template = stack.enter_context(self._jobTemplate())
            self._configure(template, request, native_spec)
            return self._run(template, request, native_spec)

    @contextmanager
    def _session(self) -> Iterator[None]:
        """Open a scheduler session and close it on exit."""
        try:
            self._client.openSession()
        except Exception as e:
            raise SessionError(f"Failed to create a scheduler session: {e}") from e

        logger.debug("Scheduler session opened.")
        try:
            yield
        finally:
            self._release(self._client.closeSession, "scheduler session")

    @contextmanager
    def _jobTemplate(self) -> Iterator[Any]:
        """Allocate a job template and delete it on exit."""
        try:
            template = self._client.allocateJobTemplate()
        except Exception as e:
            raise TemplateError(f"Failed to allocate a job template: {e}") from e

        logger.debug("Job template allocated.")
        try:
            yield template
        finally:
            self._release(
                lambda: self._client.deleteJobTemplate(template), "job template"
            )

    def _configure(
        self, template: Any, request: ResourceRequest, native_spec: str
    ) -> None:
        """Set the command, name and native specification of the job template."""
        try:
            self._client.setRemoteCommand(template, str(request.script_path))
            self._client.setJobName(template, request.job_name)
            self._client.setNativeSpecification(template, native_spec)
        except Exception as e:
            raise TemplateError(f"Failed to configure the job template: {e}") from e

        logger.debug(
            f"Job template configured: command='{request.script_path}', "
            f"name='{request.job_name}', native specification='{native_spec}'."
        )

    def _run(self, template: Any, request: ResourceRequest, native_spec: str) -> str:
        """Submit the configured template and return the job identifier."""
        queues = request.queue_list
        try:
            job_id = self._client.runJob(template)
        except Exception as e:
            raise SubmissionError(
                classify_failure(f"Failed to submit job: {e}", queues),
                native_spec,
                queues,
            ) from e

        if not job_id:
            raise SubmissionError(
                classify_failure(
                    "Failed to submit job: the scheduler returned no job identifier",
                    queues,
                ),
                native_spec,
                queues,
            )

        logger.debug(f"Job submitted with identifier '{job_id}'.")
        return str(job_id)

    @staticmethod
    def _release(release: Callable[[], None], resource: str) -> None:
        """
        Release a scheduler resource. A failure to release is reported
        but never replaces the outcome of the submission.
        """
        try:
            release()
        except Exception as e:
            logger.warning(f"Could not release the {resource}: {e}.")
        else:
            logger.debug(f"Released the {resource}.")
