from cntshop.catalog_fresh import fresh_entries


def _by_id():
    return {cgid: (name, parent) for cgid, name, parent in fresh_entries()}


def test_starts_with_top_level_departments():
    entries = fresh_entries()
    top = [cgid for cgid, _, parent in entries if parent is None]
    assert top[0] == "frescos"
    assert top[-1] == "novidades"
    assert len(top) == 14
    # Top-level entries come first, before any child.
    assert [cgid for cgid, _, _ in entries[: len(top)]] == top


def test_cgids_are_unique():
    ids = [cgid for cgid, _, _ in fresh_entries()]
    assert len(ids) == len(set(ids))


def test_every_parent_is_defined_earlier():
    seen = set()
    for cgid, _, parent in fresh_entries():
        if parent is not None:
            assert parent in seen, cgid
        seen.add(cgid)


def test_sub_categories_descend_from_fresh_or_dairy():
    index = _by_id()
    for cgid, (_, parent) in index.items():
        if parent is None:
            continue
        root = cgid
        while index[root][1] is not None:
            root = index[root][1]
        assert root in {"frescos", "laticinios"}, cgid


def test_known_entries():
    index = _by_id()
    assert index["laticinios-ovos"] == ("Ovos", "laticinios")
    assert index["refeicoes-faceis"] == ("Take-Away", "frescos")
    assert index["frescos-queijos-tabuas"] == (
        "Tabuas e Aperitivos",
        "charcutaria-queijo-queijos",
    )
    assert index["laticinios"] == ("Laticinios e Ovos", None)


def test_children_follow_their_branch_in_order():
    ids = [cgid for cgid, _, _ in fresh_entries()]
    assert ids.index("peixaria-e-talho-peixaria") < ids.index(
        "peixaria-e-talho-peixaria-filetes"
    )
    assert ids.index("laticinios-sobremesas-mousses") == len(ids) - 1


def test_stable_across_calls():
    assert fresh_entries() == fresh_entries()
    assert all(len(entry) == 3 for entry in fresh_entries())