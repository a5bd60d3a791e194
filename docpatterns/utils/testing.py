"""Utility functions for testing purposes"""
from contextlib import contextmanager
from typing import List

import pytest


@contextmanager
def no_exception():
    """Context manager to assert that a block does not raise any exception"""
    try:
        yield

    except Exception as error:
        raise AssertionError(f"Unexpected exception raised: {error!r}")


def output_lines(capsys: pytest.CaptureFixture) -> List[str]:
    """Returns the lines written to stdout since last capture, without trailing newlines"""
    captured = capsys.readouterr()
    return captured.out.splitlines()
