"""A building project: its members, its model elements and its history."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .commands import CommandManager
from .elements import CompositeElement, Element
from .rules import ElementDecorator, Rule

if TYPE_CHECKING:
    from .proposal import ModificationProposal
    from .users import User


class Project:
    """A named model that users follow and commands modify."""

    def __init__(self, name: str) -> None:
        self._setup(name)
        print(f"Projet {name} est cree")

    def _setup(self, name: str) -> None:
        self.name = name
        self._users: list[User] = []
        self._elements: list[Element] = []
        self._observers: list[User] = []
        self.proposals: list[ModificationProposal] = []
        self.command_manager = CommandManager()

    def copy(self, name: str) -> Project:
        """Return a new project named `name` holding clones of this one's elements."""
        duplicate = Project.__new__(Project)
        duplicate._setup(name)
        print(f"Projet {name} est cree par copie")
        duplicate._elements = [element.clone() for element in self._elements]
        return duplicate

    @property
    def users(self) -> list[User]:
        """A copy of the project's members."""
        return list(self._users)

    @property
    def elements(self) -> list[Element]:
        """A copy of the top-level elements of the model."""
        return list(self._elements)

    @property
    def observers(self) -> list[User]:
        """A copy of the users who receive notifications."""
        return list(self._observers)

    def show_command_history(self) -> None:
        """Print every executed command with the proposal it came from."""
        print(f"Historique du projet '{self.name}' :")
        for command in self.command_manager.history:
            print(f"  [{command.proposal_name}] {command.description}")

    def show_elements(self) -> None:
        """Print the model's element tree."""
        print("Elements dans la maquette :")
        for element in self._elements:
            element.show_description(0)

    def add_user(self, user: User) -> None:
        """Add a member and subscribe them to notifications."""
        self._users.append(user)
        self.attach(user)
        print(f"{user.name} est ajoute au projet {self.name}")

    def remove_user(self, user: User) -> None:
        """Remove a member and unsubscribe them."""
        _remove_first(self._users, user)
        self.detach(user)

    def add_element(self, element: Element) -> None:
        """Add an element at the top level unless it is already there."""
        if not _contains(self._elements, element):
            self._elements.append(element)

    def remove_element(self, element: Element) -> None:
        """Remove every top-level occurrence of this very element."""
        self._elements = [e for e in self._elements if e is not element]

    def undo_last_command(self) -> None:
        """Undo the most recently executed command."""
        self.command_manager.undo_last_command()

    def replace_element_in_hierarchy(
        self, current: Element, target: Element, replacement: Element
    ) -> Element | None:
        """Return what should stand in place of `current`, or None if `target` is absent.

        When `current` is `target` the replacement is returned. When `target`
        lies somewhere inside a composite, that composite is returned as is.
        """
        if current is target:
            return replacement
        if isinstance(current, CompositeElement):
            for child in current.components:
                if self.replace_element_in_hierarchy(child, target, replacement) is not None:
                    return current
        return None

    def find_element_by_name(self, name: str) -> Element | None:
        """Return the first top-level element with this name, or None."""
        return next((e for e in self._elements if e.name == name), None)

    def add_rule(self, rule: Rule) -> Element | None:
        """Decorate the rule's base element in the model and return the decorated element."""
        decorated = rule.decorate()
        target = rule.base_element
        replaced = False
        updated: list[Element] = []
        for element in self._elements:
            result = self.replace_element_in_hierarchy(element, target, decorated)
            if result is None:
                updated.append(element)
            else:
                updated.append(result)
                replaced = True
        self._elements = updated
        if replaced:
            return decorated
        print("Element non trouve dans le projet.")
        return None

    def remove_rule(self, rule: Rule) -> Element | None:
        """Strip `rule` from the top-level element it is and return the element beneath."""
        position = next(
            (i for i, element in enumerate(self._elements) if element is rule), None
        )
        if position is None:
            print("Element non trouvé dans le projet.")
            return None

        current: Element = self._elements[position]
        previous: ElementDecorator | None = None
        while isinstance(current, ElementDecorator):
            if isinstance(current, Rule) and current.description == rule.description:
                new_base = current.base_element
                if previous is not None:
                    previous.base_element = new_base
                else:
                    self._elements[position] = new_base
                print(
                    f"Regle [{current.description}] retiree de l'element "
                    f"{new_base.element_type} ({new_base.name}) !"
                )
                return new_base
            previous = current
            current = current.base_element

        print("La regle n'a pas ete trouvee parmi les decorateurs.")
        return None

    def attach(self, observer: User) -> None:
        """Subscribe a user to notifications, once."""
        if not _contains(self._observers, observer):
            self._observers.append(observer)

    def detach(self, observer: User) -> None:
        """Unsubscribe a user from notifications."""
        _remove_first(self._observers, observer)

    def notify_all(self, message: str) -> None:
        """Send a message to every subscribed user."""
        for observer in self._observers:
            observer.update(message)

    def __repr__(self) -> str:
        return f"Project({self.name!r})"


def _contains(items: list, item: object) -> bool:
    return any(existing is item for existing in items)


def _remove_first(items: list, item: object) -> None:
    for position, existing in enumerate(items):
        if existing is item:
            del items[position]
            return