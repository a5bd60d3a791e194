import pytest

from docpatterns.core.config import DemoConfiguration


@pytest.fixture
def config():
    """Default demo configuration, without final pause"""
    return DemoConfiguration(pause=False)


@pytest.fixture
def expected_default_output():
    return [
        "[Chain] Checking format of PDF...",
        "[Chain] Security check passed for PDF.",
        "[Strategy] Printing PDF document...",
        "------------------------",
        "[Visitor] Displaying PDF content.",
        "[Visitor] Displaying TXT content.",
    ]
