from .document import (
    Document,
    PDFDocument,
    TXTDocument,
    DOCXDocument,
    DOCUMENT_TYPES,
    make_document,
)
from .structure import DocumentStructure
from .display import DisplayVisitor

__all__ = [
    "Document",
    "PDFDocument",
    "TXTDocument",
    "DOCXDocument",
    "DOCUMENT_TYPES",
    "make_document",
    "DocumentStructure",
    "DisplayVisitor",
]
