# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import patch

from click.testing import CliRunner

from qsubmit_lib.core.config import CFG
from qsubmit_lib.core.error import SessionError, SubmissionError
from qsubmit_lib.submit import submit


def _make_script(tmp_path):
    script = tmp_path / "script.sh"
    script.write_text("#!/bin/bash\n")
    return script


def test_submit_successful(tmp_path):
    script = _make_script(tmp_path)
    runner = CliRunner()

    with (
        patch("qsubmit_lib.submit.cli.Submitter") as mock_submitter_cls,
        patch("qsubmit_lib.submit.cli.logger") as mock_logger,
    ):
        mock_submitter_cls.return_value.submit.return_value = "job123"
        mock_submitter_cls.return_value.getJobName.return_value = "script.sh"
        mock_submitter_cls.return_value.getNativeSpec.return_value = (
            "-pe smp 1 -cwd -b n -q scv.q,sci.q"
        )
        result = runner.invoke(submit, [str(script)])

        assert result.exit_code == 0
        assert "job123" in result.output

        request = mock_submitter_cls.call_args.args[0]
        assert request.script_path == script.resolve()
        assert request.cpu_count == CFG.defaults.cpu_count
        assert request.memory_gib is None
        assert request.virtual_memory_gib is None
        assert request.queue_list == CFG.defaults.queue
        assert request.accounting_project is None

        info_messages = [call.args[0] for call in mock_logger.info.call_args_list]
        assert any("job123" in msg for msg in info_messages)
        assert any("script.sh" in msg for msg in info_messages)

        debug_messages = [call.args[0] for call in mock_logger.debug.call_args_list]
        assert any("-pe smp 1 -cwd -b n -q scv.q,sci.q" in msg for msg in debug_messages)


def test_submit_passes_all_options(tmp_path):
    script = _make_script(tmp_path)
    runner = CliRunner()

    with (
        patch("qsubmit_lib.submit.cli.Submitter") as mock_submitter_cls,
        patch("qsubmit_lib.submit.cli.logger"),
    ):
        mock_submitter_cls.return_value.submit.return_value = "1"
        result = runner.invoke(
            submit,
            [
                str(script),
                "--cpu",
                "4",
                "--mem",
                "0",
                "--h_vmem",
                "10",
                "--queue",
                " q1 , q2,, ",
                "-P",
                " proj ",
            ],
        )

        assert result.exit_code == 0
        request = mock_submitter_cls.call_args.args[0]
        assert request.cpu_count == 4
        assert request.memory_gib == 0
        assert request.virtual_memory_gib == 10
        assert request.queues == ("q1", "q2")
        assert request.accounting_project == "proj"


def test_submit_h_vmem_dash_alias(tmp_path):
    script = _make_script(tmp_path)
    runner = CliRunner()

    with (
        patch("qsubmit_lib.submit.cli.Submitter") as mock_submitter_cls,
        patch("qsubmit_lib.submit.cli.logger"),
    ):
        mock_submitter_cls.return_value.submit.return_value = "1"
        result = runner.invoke(submit, [str(script), "--h-vmem", "3", "-q", ""])

        assert result.exit_code == 0
        request = mock_submitter_cls.call_args.args[0]
        assert request.virtual_memory_gib == 3
        assert request.memory_gib is None
        assert request.queues == ()


def test_submit_script_does_not_exist(tmp_path):
    runner = CliRunner()
    missing_script = tmp_path / "missing.sh"

    with (
        patch("qsubmit_lib.submit.cli.Submitter") as mock_submitter_cls,
        patch("qsubmit_lib.submit.cli.logger") as mock_logger,
    ):
        result = runner.invoke(submit, [str(missing_script)])

        assert result.exit_code == CFG.exit_codes.configuration
        mock_submitter_cls.assert_not_called()
        error_messages = [call.args[0] for call in mock_logger.error.call_args_list]
        assert any("does not exist" in str(msg) for msg in error_messages)


def test_submit_invalid_cpu_is_rejected_by_click(tmp_path):
    script = _make_script(tmp_path)
    runner = CliRunner()

    with patch("qsubmit_lib.submit.cli.Submitter") as mock_submitter_cls:
        result = runner.invoke(submit, [str(script), "--cpu", "0"])

        assert result.exit_code == 2
        mock_submitter_cls.assert_not_called()


def test_submit_submission_error_logs_native_spec(tmp_path):
    script = _make_script(tmp_path)
    runner = CliRunner()

    with (
        patch("qsubmit_lib.submit.cli.Submitter") as mock_submitter_cls,
        patch("qsubmit_lib.submit.cli.logger") as mock_logger,
    ):
        mock_submitter_cls.return_value.submit.side_effect = SubmissionError(
            "Failed to submit job: rejected", "-pe smp 1 -cwd -b n"
        )
        result = runner.invoke(submit, [str(script)])

        assert result.exit_code == CFG.exit_codes.default
        error_messages = [str(call.args[0]) for call in mock_logger.error.call_args_list]
        assert any("rejected" in msg for msg in error_messages)
        assert any("-pe smp 1 -cwd -b n" in msg for msg in error_messages)


def test_submit_session_error(tmp_path):
    script = _make_script(tmp_path)
    runner = CliRunner()

    with (
        patch("qsubmit_lib.submit.cli.Submitter") as mock_submitter_cls,
        patch("qsubmit_lib.submit.cli.logger") as mock_logger,
    ):
        mock_submitter_cls.return_value.submit.side_effect = SessionError(
            "Failed to create a scheduler session: no daemon"
        )
        result = runner.invoke(submit, [str(script)])

        assert result.exit_code == CFG.exit_codes.default
        mock_logger.error.assert_called_once()


def test_submit_unexpected_exception(tmp_path):
    script = _make_script(tmp_path)
    runner = CliRunner()

    with (
        patch("qsubmit_lib.submit.cli.Submitter") as mock_submitter_cls,
        patch("qsubmit_lib.submit.cli.logger") as mock_logger,
    ):
        mock_submitter_cls.return_value.submit.side_effect = RuntimeError("boom")
        result = runner.invoke(submit, [str(script)])

        assert result.exit_code == CFG.exit_codes.unexpected_error
        mock_logger.critical.assert_called_once()


def test_submit_project_with_whitespace_is_rejected(tmp_path):
    script = _make_script(tmp_path)
    runner = CliRunner()

    with (
        patch("qsubmit_lib.submit.cli.Submitter") as mock_submitter_cls,
        patch("qsubmit_lib.submit.cli.logger") as mock_logger,
    ):
        result = runner.invoke(submit, [str(script), "-P", "my proj"])

        assert result.exit_code == CFG.exit_codes.configuration
        mock_submitter_cls.assert_not_called()
        error_messages = [str(call.args[0]) for call in mock_logger.error.call_args_list]
        assert any("must not contain whitespace" in msg for msg in error_messages)
