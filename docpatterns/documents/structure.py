import logging
from typing import Iterator, List, Tuple

from docpatterns.documents.document import Document
from docpatterns.patterns.visitor import Visitor, send
from docpatterns.utils.helpers import check_arg

logger = logging.getLogger(__name__)


class DocumentStructure:
    """Ordered collection of documents, which can be sent visitors."""

    def __init__(self):
        self._documents: List[Document] = list()

    def add(self, document: Document) -> None:
        """Append `document` at the end of the collection"""
        check_arg(document, "document", Document)
        self._documents.append(document)
        logger.debug(f"Added {document!r} at position #{len(self._documents) - 1}")

    def process(self, visitor: Visitor) -> None:
        """Send `visitor` to all documents, in insertion order"""
        logger.debug(f"Sending {type(visitor).__name__} to {len(self)} document(s)")
        send(visitor, self._documents)

    def get_all(self) -> Tuple[Document, ...]:
        """Returns a read-only snapshot of the documents in the collection"""
        return tuple(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.get_all())
