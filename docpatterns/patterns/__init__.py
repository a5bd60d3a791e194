from .visitor import Visitor, Component, send as send_visitor
from .strategy import (
    ProcessingStrategy,
    PrintStrategy,
    SaveStrategy,
    DocumentProcessor,
    make_strategy,
)
from .chain import Handler, FormatChecker, SecurityChecker, build_chain

__all__ = [
    "Visitor",
    "Component",
    "send_visitor",
    "ProcessingStrategy",
    "PrintStrategy",
    "SaveStrategy",
    "DocumentProcessor",
    "make_strategy",
    "Handler",
    "FormatChecker",
    "SecurityChecker",
    "build_chain",
]
