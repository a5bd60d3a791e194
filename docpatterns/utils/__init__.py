"""Helper functions and logging setup shared by docpatterns modules.
"""
from .logging import LogLevel, set_log
from .helpers import check_arg

try:
    import pytest
except ModuleNotFoundError:
    pass
else:
    pytest.register_assert_rewrite("docpatterns.utils.testing")

__all__ = [
    "LogLevel",
    "set_log",
    "check_arg",
]
