# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from qsubmit_lib.properties.request import ResourceRequest
from qsubmit_lib.scheduler.drmaa_client import DrmaaClient
from qsubmit_lib.scheduler.interface import SchedulerClient

from .native_spec import build_native_spec
from .session import SubmissionSession


class Submitter:
    """
    Class to submit a single job to an SGE-family scheduler.

    Responsibilities:
        - Render the native specification of the request (exactly once).
        - Submit the job through a `SubmissionSession`.

    The request is expected to be validated by the caller,
    i.e. the script must exist.
    """

    def __init__(self, request: ResourceRequest, client: SchedulerClient | None = None):
        """
        Initialize a Submitter instance.

        Args:
            request (ResourceRequest): The job to submit.
            client (SchedulerClient | None): Client used to talk to the scheduler.
                Defaults to a DRMAA client.
        """
        self._request = request
        self._client = client or DrmaaClient()
        self._native_spec = build_native_spec(request)

    def submit(self) -> str:
        """
        Submit the job to the scheduler.

        Note that this method temporarily changes the current working directory,
        and is therefore not thread-safe.

        Returns:
            str: The job ID of the submitted job.

        Raises:
            SessionError: If no scheduler session could be opened.
            TemplateError: If the job template could not be prepared.
            SubmissionError: If the scheduler rejected the job.
        """
        return SubmissionSession(self._client).submit(self._request, self._native_spec)

    def getNativeSpec(self) -> str:
        """Get the rendered native specification."""
        return self._native_spec

    def getJobName(self) -> str:
        """Get the name of the job."""
        return self._request.job_name
