"""Proposals: batches of commands that a manager accepts or rejects."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .commands import Command
    from .project import Project
    from .users import User


class ProposalStatus(Enum):
    """Where a proposal stands."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class ModificationProposal:
    """A titled set of changes to a project, submitted by a user."""

    def __init__(self, project: Project, submitter: User, title: str) -> None:
        self.project = project
        self.submitter = submitter
        self.title = title
        self.status = ProposalStatus.PENDING
        self._commands: list[Command] = []

    @property
    def commands(self) -> list[Command]:
        """A copy of the proposal's commands, in order."""
        return list(self._commands)

    def add_command(self, command: Command) -> None:
        """Append a command and tag it with this proposal's title."""
        command.proposal_name = self.title
        self._commands.append(command)

    def request_validation(self) -> None:
        """Tell the project's followers that validation is requested."""
        self.project.notify_all(
            f"{self.submitter.name} a demande la validation de la proposition."
        )

    def accept(self, manager: User) -> None:
        """Run all commands on the project; ignored unless pending."""
        if self.status is not ProposalStatus.PENDING:
            return
        self.project.notify_all(
            f"Le manager {manager.name} a accepte la modification du project "
            f"{self.project.name}."
        )
        for command in self._commands:
            self.project.command_manager.execute_command(command)
        self.status = ProposalStatus.ACCEPTED

    def reject(self, manager: User) -> None:
        """Reject the proposal; ignored unless pending."""
        if self.status is not ProposalStatus.PENDING:
            return
        self.project.notify_all(
            f"Le manager {manager.name} a rejete la modification du project "
            f"{self.project.name}."
        )
        self.status = ProposalStatus.REJECTED

    def show_commands(self) -> None:
        """Print the proposal's commands."""
        print(f"Proposition '{self.title}' contient :")
        for command in self._commands:
            print(f"  - {command.description}")

    def __repr__(self) -> str:
        return f"ModificationProposal({self.title!r}, {self.status.name})"