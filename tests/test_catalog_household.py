from cntshop.catalog_fresh import fresh_entries
from cntshop.catalog_household import household_entries


def _top_level_ids():
    return {cgid for cgid, _, parent in fresh_entries() if parent is None}


def test_first_entry_is_laundry():
    assert household_entries()[0] == ("limpeza-roupa", "Roupa", "limpeza")


def test_last_entry_is_lego():
    assert household_entries()[-1] == ("brinquedos-construcoes-lego-1", "LEGO", "brinquedos")


def test_every_parent_is_a_top_level_department():
    top = _top_level_ids()
    assert all(parent in top for _, _, parent in household_entries())


def test_covers_the_household_departments():
    parents = {parent for _, _, parent in household_entries()}
    assert parents == {"limpeza", "bebe", "higiene-beleza", "animais", "casa", "brinquedos"}


def test_cgids_are_unique():
    ids = [cgid for cgid, _, _ in household_entries()]
    assert len(ids) == len(set(ids))


def test_cgids_start_with_a_department_prefix():
    prefixes = ("limpeza-", "bebe-", "higiene-beleza-", "animais-", "casa-", "brinquedos-")
    assert all(cgid.startswith(prefixes) for cgid, _, _ in household_entries())


def test_no_overlap_with_fresh_entries():
    fresh_ids = {cgid for cgid, _, _ in fresh_entries()}
    assert fresh_ids.isdisjoint(cgid for cgid, _, _ in household_entries())


def test_names_are_non_empty():
    assert all(name.strip() for _, name, _ in household_entries())