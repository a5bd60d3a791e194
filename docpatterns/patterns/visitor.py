import abc
from typing import Iterable


class Visitor(metaclass=abc.ABCMeta):
    """Base class for document visitors.

    Visitors declare one method per known document variant.
    Adding a new variant requires a new `visit_*` method here,
    which every concrete visitor must then implement.
    """
    @abc.abstractmethod
    def visit_pdf(self, document) -> None:
        pass

    @abc.abstractmethod
    def visit_txt(self, document) -> None:
        pass

    @abc.abstractmethod
    def visit_docx(self, document) -> None:
        pass


class Component(metaclass=abc.ABCMeta):
    """Abstract Base Class for visited components"""
    __slots__ = ()

    @abc.abstractmethod
    def accept(self, visitor: Visitor) -> None:
        """Determines class-dependent course of action when visited by `visitor`"""
        pass


def send(visitor: Visitor, components: Iterable[Component]):
    """Send a visitor to a list of generic components"""
    for component in components:
        component.accept(visitor)
