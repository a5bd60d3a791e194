"""
Demonstration of the strategy, chain of responsibility
and visitor patterns on a toy document processing scenario.
"""
import logging
from typing import Optional

from docpatterns.core.config import DemoConfiguration
from docpatterns.documents import DisplayVisitor, DocumentStructure, make_document
from docpatterns.patterns.chain import FormatChecker, SecurityChecker, build_chain
from docpatterns.patterns.strategy import DocumentProcessor, make_strategy

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 24
EXIT_PROMPT = "\nPress Enter to exit..."


def run_chain_and_strategy(config: DemoConfiguration) -> bool:
    """Check `config.doc_type` through the chain, then process it if accepted.

    Returns
    -------
    bool
        Was the document type accepted by the chain?
    """
    chain = build_chain(
        FormatChecker(config.supported_formats),
        SecurityChecker(),
    )
    accepted = chain.handle(config.doc_type)
    if accepted:
        processor = DocumentProcessor()
        if config.strategy is not None:
            processor.set_strategy(make_strategy(config.strategy))
        processor.execute_strategy(config.doc_type)
    else:
        logger.info(f"Document type {config.doc_type!r} rejected; processing skipped")
    return accepted


def run_visitor(config: DemoConfiguration) -> DocumentStructure:
    """Build a document structure from `config.documents` and display its content."""
    structure = DocumentStructure()
    for doc_type in config.documents:
        structure.add(make_document(doc_type))
    structure.process(DisplayVisitor())
    return structure


def run_demo(config: Optional[DemoConfiguration] = None) -> None:
    """Run the whole demo, without the final pause."""
    if config is None:
        config = DemoConfiguration()
    run_chain_and_strategy(config)
    print(SEPARATOR)
    run_visitor(config)


def main(config: Optional[DemoConfiguration] = None) -> int:
    """Entry point of the demo; always returns 0."""
    if config is None:
        config = DemoConfiguration()
    run_demo(config)
    if config.pause:
        try:
            input(EXIT_PROMPT)
        except EOFError:
            # stdin closed: nothing to wait for
            print()
    return 0
