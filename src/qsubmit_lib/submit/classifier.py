# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


def classify_failure(error: BaseException | str, queues: str) -> str:
    """
    Build a diagnostic message for a failed job submission.

    If queues were explicitly requested, the most likely cause is an unknown,
    disabled or misconfigured queue, so tips for inspecting the queues are
    appended. Otherwise the original error message is returned unchanged.

    Args:
        error (BaseException | str): The error reported by the scheduler.
        queues (str): Normalized list of the requested queues.

    Returns:
        str: The diagnostic message.
    """
    message = str(error)
    if not queues:
        return message

    tips = [
        "Check if the queue exists: qconf -sql",
        "Check the queue status: qstat -g c",
        f"Check the queue configuration: qconf -sq {queues}",
        "Try submitting without the --queue option to use the default queue",
    ]

    lines = [message, f"Queue specified: {queues}", "Troubleshooting tips:"]
    lines.extend(f"  {i}. {tip}" for i, tip in enumerate(tips, start=1))
    return "\n".join(lines)
