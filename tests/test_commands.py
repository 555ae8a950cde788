import pytest

from minibim.commands import (
    AddElementCommand,
    AddRuleCommand,
    CombineElementsCommand,
    CommandManager,
    DeleteElementCommand,
    DissociateElementsCommand,
    RemoveRuleCommand,
)
from minibim.elements import CompositeElement, Door, HeatingFloor, Wall
from minibim.rules import IsolationRule


class FakeProject:
    def __init__(self):
        self.elements = []
        self.added_rules = []
        self.removed_rules = []
        self.add_rule_result = "decorated"
        self.remove_rule_result = "restored"

    def add_element(self, element):
        if not any(e is element for e in self.elements):
            self.elements.append(element)

    def remove_element(self, element):
        self.elements = [e for e in self.elements if e is not element]

    def add_rule(self, rule):
        self.added_rules.append(rule)
        return self.add_rule_result

    def remove_rule(self, rule):
        self.removed_rules.append(rule)
        return self.remove_rule_result


@pytest.fixture
def project():
    return FakeProject()


def test_add_element_execute_and_undo(project):
    wall = Wall("Mur1")
    command = AddElementCommand(project, wall)
    command.execute()
    assert project.elements == [wall]
    command.undo()
    assert project.elements == []


def test_add_element_description(project):
    assert AddElementCommand(project, Wall("Mur1")).description == "Ajout : Wall (Mur1)"


def test_delete_element_round_trip(project):
    door = Door("Porte2")
    project.add_element(door)
    command = DeleteElementCommand(project, door)
    command.execute()
    assert project.elements == []
    command.undo()
    assert project.elements == [door]
    assert command.description == "Retrait : Door (Porte2)"


def test_combine_builds_composite_at_construction(project):
    wall, other = Wall("Mur1"), Wall("Mur4")
    composite = CompositeElement("Cloisonnement")
    command = CombineElementsCommand(project, wall, other, composite)
    assert composite.components == [wall, other]
    assert command.description == "Combinaison en : Cloisonnement"


def test_combine_execute_and_undo(project, capsys):
    wall, other = Wall("Mur1"), Wall("Mur4")
    project.add_element(wall)
    project.add_element(other)
    composite = CompositeElement("Cloisonnement")
    command = CombineElementsCommand(project, wall, other, composite)
    capsys.readouterr()
    command.execute()
    assert project.elements == [composite]
    assert capsys.readouterr().out == "Combinaison Cloisonnement cree.\n"
    command.undo()
    assert project.elements == [wall, other]


def test_dissociate_execute_and_undo(project):
    floor, wall = HeatingFloor("Plancher1"), Wall("Mur1")
    composite = CompositeElement("Salle1")
    composite.add(wall)
    composite.add(floor)
    project.add_element(composite)
    command = DissociateElementsCommand(project, floor, composite)
    command.execute()
    assert composite.components == [wall]
    assert project.elements == [composite, floor]
    command.undo()
    assert composite.components == [wall, floor]
    assert project.elements == [composite]
    assert command.description == "Dissociation de : Heating Floor depuis : (Salle1)"


def test_add_rule_execute_and_undo(project):
    door = Door("Porte1")
    rule = IsolationRule(door)
    command = AddRuleCommand(project, rule)
    assert command.description == "Ajout de [Isolation] a: Door (Porte1)"
    command.execute()
    assert project.added_rules == [rule]
    assert command.decorated_element == "decorated"
    command.undo()
    assert project.removed_rules == [rule]
    assert command.decorated_element is None


def test_add_rule_undo_without_execute_does_nothing(project):
    command = AddRuleCommand(project, IsolationRule(Door("Porte1")))
    command.undo()
    assert project.removed_rules == []


def test_add_rule_undo_keeps_decoration_when_removal_fails(project):
    command = AddRuleCommand(project, IsolationRule(Door("Porte1")))
    command.execute()
    project.remove_rule_result = None
    command.undo()
    assert command.decorated_element == "decorated"


def test_remove_rule_undo_skipped_when_nothing_restored(project):
    rule = IsolationRule(Door("Porte1"))
    project.remove_rule_result = None
    command = RemoveRuleCommand(project, rule, rule)
    command.execute()
    command.undo()
    assert project.added_rules == []


def test_manager_records_and_undoes_in_order(project):
    manager = CommandManager()
    first = AddElementCommand(project, Wall("Mur1"))
    second = AddElementCommand(project, Door("Porte1"))
    manager.execute_command(first)
    manager.execute_command(second)
    assert manager.history == [first, second]
    assert manager.undo_last_command() is second
    assert manager.history == [first]
    assert len(project.elements) == 1


def test_manager_history_is_a_copy(project):
    manager = CommandManager()
    manager.execute_command(AddElementCommand(project, Wall("Mur1")))
    manager.history.clear()
    assert len(manager.history) == 1


def test_manager_undo_on_empty_history(capsys):
    manager = CommandManager()
    assert manager.undo_last_command() is None
    assert capsys.readouterr().out == "Aucune commande à annuler.\n"


def test_proposal_name_can_be_set(project):
    command = AddElementCommand(project, Wall("Mur1"))
    assert command.proposal_name == ""
    command.proposal_name = "Ajouts"
    assert command.proposal_name == "Ajouts"