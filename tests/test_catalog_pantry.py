from cntshop.catalog_fresh import fresh_entries
from cntshop.catalog_pantry import pantry_entries

_DEPARTMENTS = {"congelados", "mercearias", "bebidas", "biologicos"}


def _by_id():
    return {cgid: (name, parent) for cgid, name, parent in pantry_entries()}


def test_first_entry_is_frozen_fruit_and_vegetables():
    assert pantry_entries()[0] == ("congelados-vegetais", "Frutas e Legumes", "congelados")


def test_last_entry_is_lactose_free():
    assert pantry_entries()[-1] == ("bio-sem-lactose", "Sem Lactose", "biologicos")


def test_entry_count():
    assert len(pantry_entries()) == 76


def test_cgids_are_unique():
    ids = [cgid for cgid, _, _ in pantry_entries()]
    assert len(ids) == len(set(ids))


def test_no_overlap_with_fresh_entries():
    fresh_ids = {cgid for cgid, _, _ in fresh_entries()}
    pantry_ids = {cgid for cgid, _, _ in pantry_entries()}
    assert fresh_ids.isdisjoint(pantry_ids)


def test_every_entry_has_a_parent():
    orphans = [cgid for cgid, _, parent in pantry_entries() if parent is None]
    assert orphans == []


def test_parents_precede_children_or_are_departments():
    seen: set[str] = set()
    for cgid, _, parent in pantry_entries():
        assert parent in _DEPARTMENTS or parent in seen
        seen.add(cgid)


def test_departments_are_top_level_in_fresh_catalog():
    top_level = {cgid for cgid, _, parent in fresh_entries() if parent is None}
    assert _DEPARTMENTS <= top_level


def test_every_department_is_used():
    parents = {parent for _, _, parent in pantry_entries()}
    assert _DEPARTMENTS <= parents


def test_children_of_frozen_fish_branch():
    children = [cgid for cgid, _, parent in pantry_entries() if parent == "congelados-peixe"]
    assert children == [
        "congelados-peixe-congelado",
        "congelados-peixe-marisco",
        "congelados-peixe-bacalhau",
        "congelados-peixe-polvo",
        "congelados-carne",
    ]


def test_coffee_capsules_under_coffee_branch():
    assert _by_id()["mercearia-cha-cafe-achocolatados-cafe-capsulas"] == (
        "Cafe em Capsulas",
        "mercearias-cafe-cha",
    )


def test_water_children():
    names = [name for _, name, parent in pantry_entries() if parent == "bebidas-agua"]
    assert names == ["Agua sem Gas", "Agua com Gas", "Agua Tonica e Ginger Ale", "Agua com Sabor"]


def test_leaf_branch_has_no_children():
    assert not any(parent == "congelados-pizzas" for _, _, parent in pantry_entries())
    assert _by_id()["congelados-pizzas"] == ("Pizzas", "congelados")


def test_result_is_stable_between_calls():
    first = pantry_entries()
    second = pantry_entries()
    expected = ("congelados-vegetais-batatas", "Batata Frita e Pure", "congelados")
    assert first[4] == expected
    assert second[4] == expected
    assert len(first) == len(second) == 76


def test_names_are_non_empty():
    assert all(name.strip() for _, name, _ in pantry_entries())