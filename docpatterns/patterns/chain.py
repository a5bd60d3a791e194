"""
Chain of responsibility: a sequence of checks
a document type must pass before being processed.
"""
import abc
import logging
from typing import Collection, FrozenSet, Optional

from docpatterns.utils.helpers import check_arg

logger = logging.getLogger(__name__)


SUPPORTED_FORMATS: FrozenSet[str] = frozenset(["PDF", "TXT", "DOCX"])


class Handler(abc.ABC):
    """Link of a chain of responsibility.

    Each link performs a local check on the request; if the check
    succeeds, the request is forwarded to the next link, if any.
    Cyclic chains are not detected, and must be avoided by the caller.
    """
    def __init__(self):
        self._next: Optional[Handler] = None

    @property
    def next(self) -> Optional["Handler"]:
        """Handler or None: next link in the chain"""
        return self._next

    def set_next(self, handler: Optional["Handler"]) -> Optional["Handler"]:
        """Set (or replace) the next link in the chain.

        Parameters
        ----------
        handler : Handler or None
            Successor; if None, current link becomes terminal.

        Returns
        -------
        Handler or None
            Handler passed as argument, to allow
            `first.set_next(second).set_next(third)`.
        """
        check_arg(handler, "handler", (Handler, type(None)))
        self._next = handler
        return handler

    @abc.abstractmethod
    def check(self, doc_type: str) -> bool:
        """Local verdict of the link on `doc_type`"""
        pass

    def handle(self, doc_type: str) -> bool:
        """Run the chain from current link.

        Returns
        -------
        bool
            True if all links from current one accept `doc_type`, False otherwise.
        """
        if not self.check(doc_type):
            logger.debug(f"{type(self).__name__} rejected {doc_type!r}")
            return False
        if self._next is None:
            return True
        return self._next.handle(doc_type)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FormatChecker(Handler):
    """Accepts document types within a set of supported formats.

    Parameters
    ----------
    supported : Collection[str], optional
        Supported format labels; default `SUPPORTED_FORMATS`
    """
    def __init__(self, supported: Collection[str] = SUPPORTED_FORMATS):
        super().__init__()
        check_arg(
            supported, "supported", (list, tuple, set, frozenset),
            lambda labels: all(isinstance(label, str) for label in labels),
        )
        self.__supported = frozenset(supported)

    @property
    def supported(self) -> FrozenSet[str]:
        """FrozenSet[str]: supported format labels"""
        return self.__supported

    def check(self, doc_type: str) -> bool:
        print(f"[Chain] Checking format of {doc_type}...")
        if doc_type in self.__supported:
            return True
        print("Format not supported.")
        return False


class SecurityChecker(Handler):
    """Security check stage; all documents pass for now"""

    def check(self, doc_type: str) -> bool:
        print(f"[Chain] Security check passed for {doc_type}.")
        return True


def build_chain(*handlers: Handler) -> Handler:
    """Link `handlers` in the given order, and return the head of the chain."""
    if not handlers:
        raise ValueError("At least one handler is required to build a chain")
    for i, handler in enumerate(handlers):
        check_arg(handler, f"handlers[{i}]", Handler)
    for current, successor in zip(handlers, handlers[1:]):
        current.set_next(successor)
    return handlers[0]
