"""Project members and the roles they can play."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .proposal import ModificationProposal


class User:
    """A person who receives notifications from the projects they follow."""

    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, message: str) -> None:
        """Receive a notification."""
        print(f"{self.name} a recu une notification : {message}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Architect(User):
    """An architect."""


class Engineer(User):
    """An engineer, who may ask for a proposal to be validated."""

    def request_validation(self, proposal: ModificationProposal) -> None:
        """Ask the project to validate a proposal."""
        proposal.request_validation()


class Manager(User):
    """A manager, who accepts or rejects proposals."""

    def accept_proposal(self, proposal: ModificationProposal) -> None:
        """Accept a proposal."""
        proposal.accept(self)

    def reject_proposal(self, proposal: ModificationProposal) -> None:
        """Reject a proposal."""
        proposal.reject(self)


class UserType(Enum):
    """The roles a user can be created with."""

    ARCHITECT = "architect"
    ENGINEER = "engineer"
    MANAGER = "manager"


_ROLES: dict[UserType, type[User]] = {
    UserType.ARCHITECT: Architect,
    UserType.ENGINEER: Engineer,
    UserType.MANAGER: Manager,
}


def create_user(user_type: UserType, name: str) -> User:
    """Create a user with the given role."""
    try:
        role = _ROLES[user_type]
    except (KeyError, TypeError):
        raise ValueError(f"unknown user type: {user_type!r}") from None
    return role(name)