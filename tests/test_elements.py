import pytest

from minibim.elements import (
    CompositeElement,
    Door,
    Element,
    HeatingFloor,
    Wall,
    Window,
)


def test_wall_creation_message(capsys):
    wall = Wall("Mur1")
    assert capsys.readouterr().out == "Element Wall (Mur1) est cree !\n"
    assert wall.name == "Mur1"
    assert wall.element_type == "Wall"


@pytest.mark.parametrize(
    "cls, label, kind",
    [
        (Door, "Door", "Door"),
        (Window, "Window", "Window"),
        (HeatingFloor, "Plancher chauffant", "Heating Floor"),
    ],
)
def test_element_kinds(capsys, cls, label, kind):
    element = cls("X")
    assert capsys.readouterr().out == f"Element {label} (X) est cree !\n"
    assert element.element_type == kind


def test_simple_describe_indentation():
    door = Door("Porte1")
    assert door.describe(0) == ["- Door (Porte1)"]
    assert door.describe(2) == ["    - Door (Porte1)"]


def test_show_description_prints(capsys):
    floor = HeatingFloor("Plancher1")
    capsys.readouterr()
    floor.show_description(0)
    assert capsys.readouterr().out == "- Heating Floor (Plancher1)\n"


def test_simple_clone_is_new_object(capsys):
    wall = Wall("Mur1")
    copy = wall.clone()
    assert copy is not wall
    assert isinstance(copy, Wall)
    assert copy.name == wall.name
    # the clone goes through creation again
    assert capsys.readouterr().out.count("est cree !") == 2


def test_composite_add_remove_identity():
    wall_a = Wall("Mur")
    wall_b = Wall("Mur")
    group = CompositeElement("Cloisonnement")
    group.add(wall_a)
    group.add(wall_b)
    group.remove(wall_b)
    assert group.components == [wall_a]
    assert group.components[0] is wall_a
    group.remove(wall_b)
    assert len(group.components) == 1


def test_composite_components_is_a_copy():
    group = CompositeElement("G")
    group.add(Wall("Mur"))
    snapshot = group.components
    snapshot.clear()
    assert len(group.components) == 1


def test_composite_describe_nested():
    inner = CompositeElement("Cloisonnement")
    inner.add(Wall("Mur1"))
    inner.add(Wall("Mur4"))
    outer = CompositeElement("Structure murale")
    outer.add(inner)
    outer.add(Door("Porte1"))
    assert outer.element_type == "Combinaison"
    assert outer.describe(0) == [
        "- Combinaison (Structure murale)",
        "  - Combinaison (Cloisonnement)",
        "    - Wall (Mur1)",
        "    - Wall (Mur4)",
        "  - Door (Porte1)",
    ]


def test_composite_creation_prints_nothing(capsys):
    CompositeElement("Salle1")
    assert capsys.readouterr().out == ""


def test_composite_clone_is_deep():
    wall = Wall("Mur1")
    group = CompositeElement("G")
    group.add(wall)
    copy = group.clone()
    assert copy is not group
    assert copy.describe(0) == group.describe(0)
    assert copy.components[0] is not wall


def test_element_is_abstract():
    with pytest.raises(TypeError):
        Element()