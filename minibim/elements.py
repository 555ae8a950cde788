"""Building elements: simple parts and composites that group them."""

from __future__ import annotations

from abc import ABC, abstractmethod

_INDENT = "  "


class Element(ABC):
    """Something that can be placed in a building model."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The element's name."""

    @property
    @abstractmethod
    def element_type(self) -> str:
        """The element's kind, as shown in descriptions."""

    @abstractmethod
    def describe(self, level: int) -> list[str]:
        """Return the description lines of this element at the given depth."""

    def show_description(self, level: int = 0) -> None:
        """Print the description of this element at the given depth."""
        for line in self.describe(level):
            print(line)

    @abstractmethod
    def clone(self) -> Element:
        """Return a deep copy of this element."""


class SimpleElement(Element):
    """A single, indivisible building element."""

    element_label = "Element"
    _type_name = "Element"

    def __init__(self, name: str) -> None:
        self._name = name
        print(f"Element {self.element_label} ({name}) est cree !")

    @property
    def name(self) -> str:
        return self._name

    @property
    def element_type(self) -> str:
        return self._type_name

    def describe(self, level: int) -> list[str]:
        return [f"{_INDENT * level}- {self.element_type} ({self.name})"]

    def clone(self) -> SimpleElement:
        return type(self)(self.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Wall(SimpleElement):
    """A wall."""

    element_label = "Wall"
    _type_name = "Wall"


class Door(SimpleElement):
    """A door."""

    element_label = "Door"
    _type_name = "Door"


class Window(SimpleElement):
    """A window."""

    element_label = "Window"
    _type_name = "Window"


class HeatingFloor(SimpleElement):
    """A heated floor."""

    element_label = "Plancher chauffant"
    _type_name = "Heating Floor"


class CompositeElement(Element):
    """An element made of other elements, simple or composite."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._components: list[Element] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def element_type(self) -> str:
        return "Combinaison"

    @property
    def components(self) -> list[Element]:
        """A copy of the list of direct children."""
        return list(self._components)

    def add(self, element: Element) -> None:
        """Append a child element."""
        self._components.append(element)

    def remove(self, element: Element) -> None:
        """Remove the first occurrence of this very element, if present."""
        for position, component in enumerate(self._components):
            if component is element:
                del self._components[position]
                return

    def describe(self, level: int) -> list[str]:
        lines = [f"{_INDENT * level}- {self.element_type} ({self.name})"]
        for component in self._components:
            lines.extend(component.describe(level + 1))
        return lines

    def clone(self) -> CompositeElement:
        copy = CompositeElement(self.name)
        for component in self._components:
            copy.add(component.clone())
        return copy

    def __repr__(self) -> str:
        return f"CompositeElement({self.name!r}, {self._components!r})"