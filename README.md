# minibim

A small in-memory building-information model. A project holds building
elements and a history of the commands that changed them. Project members
propose changes, and a manager accepts or rejects them.

The package prints its messages in French to standard output. Examples
include "Projet ProjectAlpha est cree" and
"Alice Dupont a recu une notification : ...".

## Modules

- `minibim.elements` defines the building elements:
  - `Element` is the abstract base.
  - `SimpleElement` is the base for single parts: `Wall`, `Door`, `Window` and
    `HeatingFloor`. Each prints a line when it is created.
  - `CompositeElement` groups other elements.

  Every element has `name`, `element_type`, `describe(level)` (which returns
  lines), `show_description(level)` (which prints them) and `clone()` (a deep
  copy).
- `minibim.rules` defines the decorators that attach a rule to an element:
  - `ElementDecorator` is the base decorator.
  - `Rule` adds `description` and `decorate()`.
  - The rules are `ChargeRule` ("Contrainte de charge"), `CostEstimationRule`
    ("Estimation des couts"), `EnergyPerformanceRule` ("Simulation de
    performance energetique") and `IsolationRule` ("Isolation").
- `minibim.commands` defines the undoable commands:
  - The abstract `Command` has `execute()`, `undo()`, `description` and
    `proposal_name`.
  - `CommandManager` has `execute_command`, `undo_last_command` and `history`.
  - The concrete commands are `AddElementCommand`, `DeleteElementCommand`,
    `CombineElementsCommand`, `DissociateElementsCommand`, `AddRuleCommand` and
    `RemoveRuleCommand`.
- `minibim.users` defines the people who work on a project:
  - `User` receives notifications through `update(message)`.
  - The roles are `Architect`, `Engineer` (which has `request_validation`) and
    `Manager` (which has `accept_proposal` and `reject_proposal`).
  - `create_user(user_type, name)` builds a user from a `UserType`. It raises
    `ValueError` for an unknown type.
- `minibim.project` defines `Project`. A project holds users and observers,
  top-level elements and a `command_manager`. It also provides:
  - `add_rule` and `remove_rule`
  - `find_element_by_name`
  - `show_elements` and `show_command_history`
  - `undo_last_command`
  - `copy(name)`
- `minibim.proposal` defines `ModificationProposal` and `ProposalStatus`
  (`PENDING`, `ACCEPTED`, `REJECTED`).
- `minibim.demo` runs a scripted session.

## How a proposal works

1. `add_command` tags each command with the proposal's title.
2. `request_validation()` notifies every observer of the project.
3. `accept(manager)` notifies the observers, runs each command through the
   project's command manager and marks the proposal as accepted.
4. `reject(manager)` notifies the observers and marks the proposal as rejected.

`accept` and `reject` do nothing unless the proposal is still pending.

## Installation

```
pip install .
```

## Quick start

```python
from minibim.project import Project
from minibim.users import UserType, create_user
from minibim.elements import Wall, Door
from minibim.commands import AddElementCommand, AddRuleCommand
from minibim.rules import IsolationRule
from minibim.proposal import ModificationProposal

alpha = Project("ProjectAlpha")
alice = create_user(UserType.ARCHITECT, "Alice Dupont")
charlie = create_user(UserType.MANAGER, "Charlie Durand")
alpha.add_user(alice)
alpha.add_user(charlie)

wall = Wall("Mur1")
door = Door("Porte1")

proposal = ModificationProposal(alpha, alice, "Initial additions")
proposal.add_command(AddElementCommand(alpha, wall))
proposal.add_command(AddElementCommand(alpha, door))
proposal.request_validation()
charlie.accept_proposal(proposal)

isolation = ModificationProposal(alpha, alice, "Door isolation")
isolation.add_command(AddRuleCommand(alpha, IsolationRule(door)))
isolation.request_validation()
charlie.accept_proposal(isolation)

alpha.show_elements()
alpha.show_command_history()
```

## Behaviour worth knowing

- `Project.copy(name)` makes a new project from clones of this project's
  top-level elements. The new project starts with no users, no observers and
  no history.
- `Project.add_element` ignores an element that is already at the top level.
  `remove_element` removes every top-level occurrence. Elements are compared
  by identity throughout.
- `CombineElementsCommand` adds its two elements to the composite when the
  command is *constructed*, not when it is executed.
- `Project.add_rule(rule)` replaces the rule's base element with
  `rule.decorate()`. This works at the top level and inside composites.
  `add_rule` returns the decorated element, or `None` (after printing a
  message) if the base element is not in the project.
- `Project.remove_rule(rule)` strips a rule only when the rule object itself
  is a top-level element. `add_rule` inserts a freshly decorated copy, so
  undoing an `AddRuleCommand` prints "Element non trouvé dans le projet." and
  leaves the model unchanged. `undo_last_command` still drops the command from
  the history.
- `undo_last_command` on an empty history prints a message and returns
  `None`.

## Demo

The package includes a scripted scenario. It runs the following steps:

- two projects
- a copied project
- several proposals, one of them rejected
- nested combinations of elements
- rules on elements

To run it:

```
minibim-demo
```

## What it does not do

- The model lives only in memory. There is no saving or loading, and no
  import or export of building files.
- Output goes to standard output through `print`. There is no logging
  configuration and no other user interface.

## Tests

```
pip install .[test]
pytest
```