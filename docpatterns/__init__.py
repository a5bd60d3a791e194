"""Strategy, chain of responsibility and visitor patterns applied to toy document processing."""
from .patterns import (
    Visitor,
    ProcessingStrategy,
    PrintStrategy,
    SaveStrategy,
    DocumentProcessor,
    Handler,
    FormatChecker,
    SecurityChecker,
    build_chain,
)
from .documents import (
    PDFDocument,
    TXTDocument,
    DOCXDocument,
    DocumentStructure,
    DisplayVisitor,
)
from .core import DemoConfiguration

__version__ = "0.1.0"

__all__ = [
    "Visitor",
    "ProcessingStrategy",
    "PrintStrategy",
    "SaveStrategy",
    "DocumentProcessor",
    "Handler",
    "FormatChecker",
    "SecurityChecker",
    "build_chain",
    "PDFDocument",
    "TXTDocument",
    "DOCXDocument",
    "DocumentStructure",
    "DisplayVisitor",
    "DemoConfiguration",
]
