# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from pathlib import Path
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand
from click_option_group import optgroup

from qsubmit_lib.core.config import CFG
from qsubmit_lib.core.error import ConfigurationError, QSubmitError, SubmissionError
from qsubmit_lib.core.logger import get_logger
from qsubmit_lib.properties.request import ResourceRequest
from qsubmit_lib.submit.submitter import Submitter

logger = get_logger(__name__)


@click.command(
    short_help="Submit a script to the SGE scheduler.",
    help=f"""
Submit a single shell script as a job to an SGE-family scheduler.

{click.style("SCRIPT", fg="green")}   Path to the script to submit.

The job is named after the script and runs in the script's directory,
where the scheduler also places its standard output and error files.
The ID of the submitted job is printed to standard output.
""",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
@click.argument("script", type=str, metavar=click.style("SCRIPT", fg="green"))
@optgroup.group(f"{click.style('General settings', fg='yellow')}")
@optgroup.option(
    "--queue",
    "-q",
    type=str,
    default=CFG.defaults.queue,
    show_default=True,
    help="Comma-separated list of queues to submit the job to. Use an empty string to submit to the default queue.",
)
@optgroup.option(
    "--sge-project",
    "-P",
    type=str,
    default=None,
    help="SGE project used for resource quota management.",
)
@optgroup.group(f"{click.style('Requested resources', fg='yellow')}")
@optgroup.option(
    "--cpu",
    type=click.IntRange(min=1),
    default=CFG.defaults.cpu_count,
    show_default=True,
    help="Number of CPU cores to allocate for the job.",
)
@optgroup.option(
    "--mem",
    type=click.IntRange(min=0),
    default=None,
    help="Memory in GB to allocate for the job. Only requested if explicitly set.",
)
@optgroup.option(
    "--h-vmem",
    "--h_vmem",
    "h_vmem",
    type=click.IntRange(min=0),
    default=None,
    help="Virtual memory in GB to allocate for the job. Only requested if explicitly set.",
)
def submit(
    script: str,
    queue: str,
    sge_project: str | None,
    cpu: int,
    mem: int | None,
    h_vmem: int | None,
) -> NoReturn:
    """
    Submit a single shell script to an SGE-family scheduler.
    """
    try:
        if not (script_path := Path(script)).is_file():
            raise ConfigurationError(
                f"Script '{script}' does not exist or is not a file."
            )

        request = ResourceRequest.fromOptions(
            script_path,
            cpu=cpu,
            mem=mem,
            h_vmem=h_vmem,
            queue=queue,
            project=sge_project,
        )
        submitter = Submitter(request)
        logger.debug(f"Native specification: {submitter.getNativeSpec()}")
        job_id = submitter.submit()

        logger.info(
            f"Job '{submitter.getJobName()}' submitted successfully as '{job_id}'."
        )
        click.echo(job_id)
        sys.exit(0)
    except SubmissionError as e:
        logger.error(e)
        logger.error(f"Native specification: {e.native_spec}")
        sys.exit(e.exit_code)
    except QSubmitError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)
