"""Undoable commands that change a project, and the manager that runs them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .elements import CompositeElement, Element
    from .project import Project
    from .rules import Rule


class Command(ABC):
    """An action on a project that can be executed and undone."""

    def __init__(self, project: Project) -> None:
        self.project = project
        self.proposal_name = ""

    @abstractmethod
    def execute(self) -> None:
        """Apply the command to its project."""

    @abstractmethod
    def undo(self) -> None:
        """Revert what execute did."""

    @property
    @abstractmethod
    def description(self) -> str:
        """A one-line human description of the command."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.description}>"


class CommandManager:
    """Runs commands and keeps the history needed to undo them."""

    def __init__(self) -> None:
        self._history: list[Command] = []

    @property
    def history(self) -> list[Command]:
        """A copy of the executed commands, oldest first."""
        return list(self._history)

    def execute_command(self, command: Command) -> None:
        """Execute a command and record it."""
        command.execute()
        self._history.append(command)

    def undo_last_command(self) -> Command | None:
        """Undo the most recent command and return it, or None if there is none."""
        if not self._history:
            print("Aucune commande à annuler.")
            return None
        command = self._history[-1]
        command.undo()
        self._history.pop()
        return command


class AddElementCommand(Command):
    """Adds an element to the project."""

    def __init__(self, project: Project, element: Element) -> None:
        super().__init__(project)
        self.element = element

    def execute(self) -> None:
        self.project.add_element(self.element)

    def undo(self) -> None:
        self.project.remove_element(self.element)

    @property
    def description(self) -> str:
        return f"Ajout : {self.element.element_type} ({self.element.name})"


class DeleteElementCommand(Command):
    """Removes an element from the project."""

    def __init__(self, project: Project, element: Element) -> None:
        super().__init__(project)
        self.element = element

    def execute(self) -> None:
        self.project.remove_element(self.element)

    def undo(self) -> None:
        self.project.add_element(self.element)

    @property
    def description(self) -> str:
        return f"Retrait : {self.element.element_type} ({self.element.name})"


class CombineElementsCommand(Command):
    """Groups two elements into a composite that replaces them in the project."""

    def __init__(
        self,
        project: Project,
        element1: Element,
        element2: Element,
        composite: CompositeElement,
    ) -> None:
        super().__init__(project)
        self.element1 = element1
        self.element2 = element2
        self.composite = composite
        composite.add(element1)
        composite.add(element2)
        self._combined_name = composite.name

    def execute(self) -> None:
        self.project.add_element(self.composite)
        self.project.remove_element(self.element1)
        self.project.remove_element(self.element2)
        print(f"Combinaison {self.composite.name} cree.")

    def undo(self) -> None:
        self.project.add_element(self.element1)
        self.project.add_element(self.element2)
        self.project.remove_element(self.composite)

    @property
    def description(self) -> str:
        return f"Combinaison en : {self._combined_name}"


class DissociateElementsCommand(Command):
    """Takes an element out of a composite and puts it back in the project."""

    def __init__(
        self, project: Project, element: Element, composite: CompositeElement
    ) -> None:
        super().__init__(project)
        self.element = element
        self.composite = composite

    def execute(self) -> None:
        self.composite.remove(self.element)
        self.project.add_element(self.element)

    def undo(self) -> None:
        self.composite.add(self.element)
        self.project.remove_element(self.element)

    @property
    def description(self) -> str:
        return (
            f"Dissociation de : {self.element.element_type}"
            f" depuis : ({self.composite.name})"
        )


class AddRuleCommand(Command):
    """Attaches a rule to the element it wraps."""

    def __init__(self, project: Project, rule: Rule) -> None:
        super().__init__(project)
        self.rule = rule
        self.original_element = rule.base_element
        self.decorated_element: Element | None = None

    def execute(self) -> None:
        self.decorated_element = self.project.add_rule(self.rule)

    def undo(self) -> None:
        if self.decorated_element is not None:
            if self.project.remove_rule(self.rule) is not None:
                self.decorated_element = None

    @property
    def description(self) -> str:
        return (
            f"Ajout de [{self.rule.description}] a: "
            f"{self.original_element.element_type} ({self.original_element.name})"
        )


class RemoveRuleCommand(Command):
    """Detaches a rule from an element."""

    def __init__(self, project: Project, element_with_rule: Element, rule: Rule) -> None:
        super().__init__(project)
        self.rule = rule
        self.decorated_element: Element | None = element_with_rule
        self.restored_element: Element | None = None

    def execute(self) -> None:
        self.restored_element = self.project.remove_rule(self.rule)

    def undo(self) -> None:
        if self.restored_element is not None:
            self.decorated_element = self.project.add_rule(self.rule)

    @property
    def description(self) -> str:
        name = self.decorated_element.name if self.decorated_element else ""
        return f"Retrait de : {self.rule.description} a {name}"