"""
Strategy pattern: interchangeable processing behaviors
applied to a document type label.
"""
import abc
import logging
from typing import Dict, Optional, Type

from docpatterns.utils.helpers import check_arg

logger = logging.getLogger(__name__)


class ProcessingStrategy(abc.ABC):
    """Generic interface for document processing behaviors"""

    @abc.abstractmethod
    def process(self, doc_type: str) -> None:
        """Process a document of type `doc_type`"""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PrintStrategy(ProcessingStrategy):
    def process(self, doc_type: str) -> None:
        print(f"[Strategy] Printing {doc_type} document...")


class SaveStrategy(ProcessingStrategy):
    def process(self, doc_type: str) -> None:
        print(f"[Strategy] Saving {doc_type} document...")


STRATEGIES: Dict[str, Type[ProcessingStrategy]] = {
    "print": PrintStrategy,
    "save": SaveStrategy,
}


def make_strategy(name: str) -> ProcessingStrategy:
    """Create a processing strategy from its registered name.

    Parameters
    ----------
    name : str
        Strategy name; one of the keys of `STRATEGIES`

    Returns
    -------
    ProcessingStrategy
        New strategy instance

    Raises
    ------
    ValueError
        If `name` is not a registered strategy
    """
    check_arg(name, "name", str)
    try:
        factory = STRATEGIES[name]
    except KeyError:
        known = ", ".join(map(repr, STRATEGIES))
        raise ValueError(f"Unknown strategy {name!r}; expected one of {known}")
    return factory()


class DocumentProcessor:
    """Context holding at most one active processing strategy.

    Parameters
    ----------
    strategy : ProcessingStrategy, optional
        Initial strategy; default None (no strategy selected)
    """
    def __init__(self, strategy: Optional[ProcessingStrategy] = None):
        self._strategy: Optional[ProcessingStrategy] = None
        if strategy is not None:
            self.set_strategy(strategy)

    @property
    def strategy(self) -> Optional[ProcessingStrategy]:
        """ProcessingStrategy or None: currently active strategy"""
        return self._strategy

    def set_strategy(self, strategy: Optional[ProcessingStrategy]) -> None:
        """Replace the active strategy; None disables processing"""
        check_arg(strategy, "strategy", (ProcessingStrategy, type(None)))
        logger.debug(f"Strategy changed from {self._strategy!r} to {strategy!r}")
        self._strategy = strategy

    def execute_strategy(self, doc_type: str) -> None:
        """Delegate processing of `doc_type` to the active strategy, if any"""
        if self._strategy is None:
            print("No strategy selected.")
        else:
            self._strategy.process(doc_type)
