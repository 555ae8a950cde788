"""A scripted session showing projects, proposals, rules and composites."""

from __future__ import annotations

import argparse

from .commands import (
    AddElementCommand,
    AddRuleCommand,
    CombineElementsCommand,
    DeleteElementCommand,
    DissociateElementsCommand,
)
from .elements import CompositeElement, Door, HeatingFloor, Wall, Window
from .project import Project
from .proposal import ModificationProposal
from .rules import ChargeRule, CostEstimationRule, EnergyPerformanceRule, IsolationRule
from .users import User, UserType, create_user


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration session."""
    argparse.ArgumentParser(
        prog="minibim", description="Run a demonstration building-model session."
    ).parse_args(argv)

    alpha = Project("ProjectAlpha")
    beta = Project("ProjectBeta")

    alice = create_user(UserType.ARCHITECT, "Alice Dupont")
    bob = create_user(UserType.ENGINEER, "Bob Matrin")
    charlie = create_user(UserType.MANAGER, "Charlie Durand")
    eva = User("Eva Moreau")
    david = create_user(UserType.MANAGER, "David Leroy")
    fiona = create_user(UserType.ARCHITECT, "Fiona Leclerc")
    greg = create_user(UserType.ENGINEER, "Greg Morel")

    for user in (alice, bob, charlie):
        alpha.add_user(user)
    for user in (alice, bob, david):
        beta.add_user(user)

    print()

    mur1 = Wall("Mur1")
    porte1 = Door("Porte1")
    porte2 = Door("Porte2")

    prop1 = ModificationProposal(alpha, alice, "Ajouts Initiaux Alpha")
    for element in (mur1, porte1, porte2):
        prop1.add_command(AddElementCommand(alpha, element))
    prop1.request_validation()
    charlie.accept_proposal(prop1)

    prop2 = ModificationProposal(alpha, bob, "Isolation porte1")
    prop2.add_command(AddRuleCommand(alpha, IsolationRule(porte1)))
    prop2.request_validation()
    charlie.accept_proposal(prop2)

    print()

    mur2 = Wall("Mur2")
    porte3 = Door("Porte3")
    fenetre1 = Window("Fenetre1")

    prop3 = ModificationProposal(beta, alice, "Ajouts Initiaux Beta")
    for element in (mur2, porte3, fenetre1):
        prop3.add_command(AddElementCommand(beta, element))
    prop3.request_validation()
    david.accept_proposal(prop3)

    beta.add_user(eva)
    beta.detach(alice)

    prop4 = ModificationProposal(beta, bob, "Charge Mur2")
    prop4.add_command(AddRuleCommand(beta, ChargeRule(mur2)))
    prop4.show_commands()
    prop4.request_validation()
    david.reject_proposal(prop4)

    beta.show_command_history()

    print()

    alpha_copy = alpha.copy("ProjectAlphaCopy")
    for user in (charlie, fiona, greg):
        alpha_copy.add_user(user)

    mur3 = Wall("Mur3")

    prop5 = ModificationProposal(alpha_copy, fiona, "Ajout Mur 3")
    prop5.add_command(AddElementCommand(alpha_copy, mur3))
    prop5.request_validation()
    charlie.accept_proposal(prop5)

    prop6 = ModificationProposal(alpha_copy, greg, "Estimation couts")
    prop6.add_command(
        AddRuleCommand(alpha_copy, CostEstimationRule(alpha_copy.elements[0]))
    )
    prop6.request_validation()
    charlie.accept_proposal(prop6)

    alpha_copy.show_elements()
    alpha_copy.undo_last_command()
    alpha_copy.show_elements()

    alpha.show_command_history()

    plancher1 = HeatingFloor("Plancher1")
    mur4 = Wall("Mur4")
    cloisonnement = CompositeElement("Cloisonnement")
    structure_murale = CompositeElement("Structure murale")
    salle1 = CompositeElement("Salle1")

    prop7 = ModificationProposal(alpha, fiona, "Niveaux d'architecture")
    prop7.add_command(AddElementCommand(alpha, plancher1))
    prop7.add_command(AddElementCommand(alpha, mur4))
    prop7.add_command(DeleteElementCommand(alpha, porte2))
    prop7.add_command(CombineElementsCommand(alpha, mur1, mur4, cloisonnement))
    prop7.add_command(
        CombineElementsCommand(alpha, cloisonnement, porte1, structure_murale)
    )
    prop7.add_command(DissociateElementsCommand(alpha, plancher1, structure_murale))
    prop7.add_command(CombineElementsCommand(alpha, structure_murale, plancher1, salle1))

    prop7.show_commands()
    prop7.request_validation()
    charlie.accept_proposal(prop7)

    print()

    prop8 = ModificationProposal(alpha, bob, "PerformancePlancher")
    prop8.add_command(AddRuleCommand(alpha, EnergyPerformanceRule(plancher1)))
    prop8.request_validation()
    charlie.accept_proposal(prop8)

    alpha.show_elements()

    print()

    alpha.show_command_history()

    plancher1.show_description(0)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())