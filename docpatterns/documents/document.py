"""Document variants, identified by their type label."""
from typing import ClassVar, Dict, Type

from docpatterns.patterns.visitor import Component, Visitor
from docpatterns.utils.helpers import check_arg


class Document(Component):
    """Base class for stateless document variants.

    Each variant carries a fixed type label, defined at class level.
    Documents of the same variant are interchangeable.
    """
    __slots__ = ()

    TYPE: ClassVar[str] = ""

    def get_type(self) -> str:
        """Returns the document type label"""
        return self.TYPE

    @property
    def type(self) -> str:
        """str: document type label"""
        return self.TYPE

    def __eq__(self, other) -> bool:
        if isinstance(other, Document):
            return type(self) is type(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PDFDocument(Document):
    __slots__ = ()
    TYPE = "PDF"

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_pdf(self)


class TXTDocument(Document):
    __slots__ = ()
    TYPE = "TXT"

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_txt(self)


class DOCXDocument(Document):
    __slots__ = ()
    TYPE = "DOCX"

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_docx(self)


DOCUMENT_TYPES: Dict[str, Type[Document]] = {
    cls.TYPE: cls for cls in (PDFDocument, TXTDocument, DOCXDocument)
}


def make_document(doc_type: str) -> Document:
    """Create a document from its type label.

    Raises
    ------
    TypeError
        If `doc_type` is not a string
    ValueError
        If `doc_type` matches no known document variant
    """
    check_arg(doc_type, "doc_type", str)
    try:
        factory = DOCUMENT_TYPES[doc_type]
    except KeyError:
        known = ", ".join(map(repr, DOCUMENT_TYPES))
        raise ValueError(f"Unknown document type {doc_type!r}; expected one of {known}")
    return factory()
