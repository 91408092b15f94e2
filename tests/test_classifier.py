"""Tests for exit code and process status classification."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Any

import pytest

from sysexit.classifier import (
    classify_code,
    classify_signal,
    classify_status,
    describe_status,
    is_error,
    is_reserved,
    is_success,
    is_valid,
)
from sysexit.codes import Code, Unknown
from sysexit.errors import OutOfRangeError, StatusError
from sysexit.status import ProcessStatus


def test_classify_code_is_total_over_valid_range() -> None:
    """Verify every valid value classifies and keeps its numeric value."""
    for n in range(256):
        code = classify_code(n)
        assert isinstance(code, (Code, Unknown))
        assert code.value == n
        assert str(code).endswith(f"({n})")


def test_classify_code_names_only_listed_values() -> None:
    """Verify the named ranges and the Unknown fallback."""
    named = {0, *range(64, 79), *range(126, 166)}

    for n in range(256):
        assert isinstance(classify_code(n), Code) is (n in named)


def test_classify_code_returns_named_members() -> None:
    """Verify representative values from each family."""
    assert classify_code(0) is Code.SUCCESS
    assert classify_code(64) is Code.USAGE
    assert classify_code(74) is Code.IOERR
    assert classify_code(78) is Code.CONFIG
    assert classify_code(126) is Code.NOT_EXECUTABLE
    assert classify_code(127) is Code.NOT_FOUND
    assert classify_code(128) is Code.INVALID_EXIT
    assert classify_code(137) is Code.SIGKILL
    assert classify_code(165) is Code.SIGRTMIN_3


def test_classify_code_wraps_unnamed_values() -> None:
    """Verify unnamed in-range values become Unknown with the raw value."""
    assert classify_code(1) == Unknown(1)
    assert classify_code(2) == Unknown(2)
    assert classify_code(125) == Unknown(125)
    assert classify_code(166) == Unknown(166)
    assert classify_code(255) == Unknown(255)


@pytest.mark.parametrize("value", [-1, 256, 1000, -255])
def test_classify_code_rejects_out_of_range(value: int) -> None:
    """Verify values outside 0-255 fail instead of being clamped."""
    with pytest.raises(OutOfRangeError) as excinfo:
        classify_code(value)

    assert excinfo.value.value == value
    assert isinstance(excinfo.value, ValueError)


def test_classify_code_rejects_non_integers() -> None:
    """Verify non-integer input is a type error, not a range error."""
    with pytest.raises(TypeError):
        classify_code(74.0)  # type: ignore[arg-type]


def test_is_valid_matches_exit_status_range() -> None:
    """Verify validity for negative, in-range and oversized values."""
    for n in range(-256, 512):
        assert is_valid(n) is (0 <= n <= 255)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (124, False),
        (125, True),
        (128, True),
        (129, True),
        (154, True),
        (155, True),
        (165, True),
        (166, False),
        (0, False),
        (74, False),
        (-1, False),
        (300, False),
    ],
)
def test_is_reserved_boundaries(value: int, expected: bool) -> None:
    """Verify both reserved ranges at and around their edges."""
    assert is_reserved(value) is expected


def test_is_reserved_agrees_with_signal_table() -> None:
    """Verify every signal code is reserved and nothing above the table is."""
    for code in Code:
        if code.is_signal:
            assert is_reserved(code.value)
    assert not any(is_reserved(n) for n in range(166, 512))


def test_classify_status_success() -> None:
    """Verify a zero exit classifies as success."""
    status = ProcessStatus.exited(0)

    assert classify_status(status) is Code.SUCCESS
    assert is_success(status) is True
    assert is_error(status) is False


def test_classify_status_io_error_renders_label() -> None:
    """Verify exit 74 classifies and renders as an i/o error."""
    code = classify_status(ProcessStatus.exited(74))

    assert code is Code.IOERR
    assert str(code) == "i/o error (74)"


def test_classify_status_hangup_signal() -> None:
    """Verify termination by SIGHUP maps to code 129."""
    code = classify_status(ProcessStatus.signaled(1))

    assert code is Code.SIGHUP
    assert "(129)" in str(code)


def test_classify_status_unnamed_signal_is_unknown() -> None:
    """Verify signals past the named table classify as Unknown."""
    assert classify_status(ProcessStatus.signaled(38)) == Unknown(166)
    assert classify_status(ProcessStatus.signaled(127)) == Unknown(255)


def test_classify_status_unrepresentable_signal(caplog: Any) -> None:
    """Verify signal values above 255 stay unclamped and are logged."""
    with caplog.at_level("WARNING"):
        code = classify_status(ProcessStatus.signaled(200))

    assert code == Unknown(328)
    assert code.is_representable is False
    assert not is_valid(code.value)
    assert "cannot be represented" in caplog.text


def test_classify_status_oversized_exit_code_raises() -> None:
    """Verify a normal exit above 255 is a range violation."""
    with pytest.raises(OutOfRangeError):
        classify_status(ProcessStatus.exited(300))


def test_classify_status_accepts_returncodes() -> None:
    """Verify subprocess-style return codes are classified directly."""
    assert classify_status(65) is Code.DATAERR
    assert classify_status(-15) is Code.SIGTERM
    assert classify_status(subprocess.CompletedProcess(args=[], returncode=127)) is Code.NOT_FOUND


def test_classify_signal_rejects_non_positive_signals() -> None:
    """Verify signal 0 is not mistaken for the invalid-exit status."""
    with pytest.raises(StatusError):
        classify_signal(0)


def test_success_and_error_are_exclusive_and_exhaustive() -> None:
    """Verify exactly one predicate holds for every status."""
    statuses = [ProcessStatus.exited(n) for n in range(256)]
    statuses += [ProcessStatus.signaled(s) for s in range(1, 200)]

    for status in statuses:
        assert is_success(status) != is_error(status)
    assert [status for status in statuses if is_success(status)] == [ProcessStatus.exited(0)]


def test_describe_status_for_exit_and_signal() -> None:
    """Verify diagnostic lines for normal exits and signal terminations."""
    assert describe_status(ProcessStatus.exited(74)) == "exited: i/o error (74)"
    assert (
        describe_status(ProcessStatus.signaled(15))
        == "killed by SIGTERM: termination signal (143)"
    )
    assert describe_status(ProcessStatus.signaled(64)) == "killed by signal 64: unknown error (192)"


@pytest.mark.skipif(os.name != "posix", reason="signal termination is POSIX-specific")
def test_classify_real_child_processes() -> None:
    """Verify classification of statuses produced by real child processes."""
    exited = subprocess.run([sys.executable, "-c", "import sys; sys.exit(70)"], check=False)
    killed = subprocess.run(
        [sys.executable, "-c", "import os, signal; os.kill(os.getpid(), signal.SIGTERM)"],
        check=False,
    )

    assert classify_status(exited) is Code.SOFTWARE
    assert classify_status(killed) is Code.SIGTERM
    assert is_error(killed)
