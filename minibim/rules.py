"""Rules that decorate building elements with extra constraints."""

from __future__ import annotations

from abc import abstractmethod

from .elements import Element


class ElementDecorator(Element):
    """An element that wraps another one and forwards its identity."""

    def __init__(self, base_element: Element) -> None:
        self.base_element = base_element

    @property
    def name(self) -> str:
        return self.base_element.name

    @property
    def element_type(self) -> str:
        return self.base_element.element_type

    def describe(self, level: int) -> list[str]:
        lines = self.base_element.describe(level)
        lines.append(f"{' ' * (level * 3)}avec [{self.element_type}]")
        return lines

    def clone(self) -> Element:
        return ElementDecorator(self.base_element.clone())


class Rule(ElementDecorator):
    """A named rule attached to an element."""

    _clone_label: str | None = None

    @property
    @abstractmethod
    def description(self) -> str:
        """The rule's description."""

    def decorate(self) -> Rule:
        """Return a fresh rule of the same kind around the same base element."""
        return type(self)(self.base_element)

    def describe(self, level: int) -> list[str]:
        return [
            f"{'  ' * level}- {self.element_type} ({self.base_element.name})"
            f" avec [{self.description}]"
        ]

    def clone(self) -> Rule:
        if self._clone_label is not None:
            print(f"[clone] Clonage de {self._clone_label}")
        return type(self)(self.base_element.clone())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.base_element!r})"


class ChargeRule(Rule):
    """Load-bearing constraint."""

    _clone_label = "ChargeRule"

    @property
    def description(self) -> str:
        return "Contrainte de charge"


class CostEstimationRule(Rule):
    """Cost estimation."""

    _clone_label = "CostRule"

    @property
    def description(self) -> str:
        return "Estimation des couts"


class EnergyPerformanceRule(Rule):
    """Energy performance simulation."""

    _clone_label = "EnergyRule"

    @property
    def description(self) -> str:
        return "Simulation de performance energetique"

    def decorate(self) -> Rule:
        base = self.base_element
        print(
            f"Regle [{self.description}] est ajoute a l'element "
            f"{base.element_type} ({base.name})"
        )
        return EnergyPerformanceRule(base)


class IsolationRule(Rule):
    """Insulation."""

    @property
    def description(self) -> str:
        return "Isolation"