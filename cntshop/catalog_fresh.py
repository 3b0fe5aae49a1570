"""Category entries for the top-level departments and the fresh and dairy aisles."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

Entry = tuple[str, str, str | None]

# Child keys are appended to the branch stem; a key starting with "~" is a
# complete identifier that does not share the stem.
ABSOLUTE_MARK = "~"

_TOP_LEVEL: tuple[tuple[str, str], ...] = (
    ("frescos", "Frescos"),
    ("laticinios", "Laticinios e Ovos"),
    ("congelados", "Congelados"),
    ("mercearias", "Mercearia"),
    ("bebidas", "Bebidas e Garrafeira"),
    ("biologicos", "Bio e Saudavel"),
    ("limpeza", "Limpeza"),
    ("bebe", "Bebe"),
    ("higiene-beleza", "Beleza e Higiene"),
    ("animais", "Animais"),
    ("casa", "Casa, Bricolage e Jardim"),
    ("brinquedos", "Brinquedos e Jogos"),
    ("oportunidades", "Oportunidades"),
    ("novidades", "Novidades"),
)

Branch = tuple[str, str, str, str, tuple[tuple[str, str], ...]]

# Each branch: (cgid, name, parent, stem of child ids, children as (key, name)).
_BRANCHES: tuple[Branch, ...] = (
    ("peixaria-e-talho-peixaria", "Peixaria", "frescos", "peixaria-e-talho-peixaria-", (
        ("filetes", "Filetes, Lombos e Postas"),
        ("fresco", "Peixe Fresco"),
        ("congelado", "Peixe Congelado"),
        ("bacalhau", "Bacalhau"),
        ("polvo", "Polvo, Lulas e Chocos"),
        ("marisco", "Marisco"),
        ("salmao", "Salmao Fumado e Especialidades"),
    )),
    ("peixaria-e-talho-talho", "Talho", "frescos", "peixaria-e-talho-talho-", (
        ("pronto", "Pronto a Cozinhar"),
        ("novilho", "Novilho, Vitela e Vitelao"),
        ("frango", "Frango e Peru"),
        ("porco", "Porco"),
        ("pato", "Pato e Coelho"),
        ("cabrito", "Cabrito e Borrego"),
    )),
    ("frutas-legumes-frutas", "Frutas", "frescos", "frutas-legumes-", (
        ("sazonais", "Frutas da Epoca"),
        ("frutas-banana", "Banana, Maca e Pera"),
        ("frutas-laranja", "Laranja, Clementina e Limao"),
        ("frutas-melao", "Melancia, Melao e Meloa"),
        ("frutas-pessego", "Pessego, Ameixa e Kiwi"),
        ("frutas-morango", "Morango e Frutos Vermelhos"),
        ("frutas-tropicais", "Uvas e Tropicais"),
        ("secos", "Frutos Secos, Desidratados e Sementes"),
        ("sumos-naturais", "Sumos Espremidos na Hora"),
        ("cabazes", "Cabazes de Frutas e Legumes"),
    )),
    ("frutas-legumes-legumes", "Legumes", "frescos", "frutas-legumes-", (
        ("legumes-batatas", "Batata, Batata Doce e Mandioca"),
        ("legumes-alhos", "Cebola, Alho e Nabo"),
        ("legumes-cenoura", "Cenoura, Abobora e Beterraba"),
        ("legumes-nabo", "Curgete, Beringela e Feijao Verde"),
        ("legumes-couves", "Couves, Brocolos e Espinafres"),
        ("legumes-alface", "Alface, Tomate, Pepino e Pimento"),
        ("legumes-sopas", "Saladas, Sopas e Salteados"),
        ("legumes-cogumelos", "Cogumelos, Espargos e Exoticos"),
        ("ervas", "Ervas Aromaticas e Especiarias"),
        ("tremocos-azeitonas", "Tremocos e Azeitonas"),
    )),
    ("charcutaria-queijo-queijos", "Queijos", "frescos", "charcutaria-queijo-queijos-", (
        ("fatiado", "Fatiado e Bolas"),
        ("ralado", "Ralado"),
        ("fresco", "Fresco, Requeijao e Mozzarella"),
        ("snacks", "Snacks e Barrar"),
        ("amanteigado", "Amanteigado"),
        ("curado", "Curado"),
        ("mundo", "Queijos do Mundo"),
        ("~frescos-queijos-tabuas", "Tabuas e Aperitivos"),
    )),
    ("charcutaria-queijo-charcutaria", "Charcutaria", "frescos", "charcutaria-queijo-", (
        ("charcutaria-fiambre", "Fiambre, Mortadela e Salame"),
        ("charcutaria-presunto", "Presunto"),
        ("charcutaria-salpicao", "Salpicao, Paio e Fuet"),
        ("charcutaria-alheiras", "Alheira e Farinheira"),
        ("charcutaria-chouricos", "Chourico e Morcela"),
        ("charcutaria-bacon", "Bacon e Fumados"),
        ("charcutaria-linguicas", "Salsichas e Linguicas"),
        ("salmao", "Salmao Fumado e Especialidades"),
        ("~destaques-charcutaria-tabuas-aperitivos", "Tabuas e Aperitivos"),
    )),
    ("padaria-e-pastelaria", "Padaria e Pastelaria", "frescos", "padaria-e-pastelaria-", (
        ("padaria-fresco", "Pao do Dia e Broa"),
        ("padaria-forma", "Pao de Forma e Embalado"),
        ("padaria-hamburguer", "Pao de Hamburguer, Cachorro e Wraps"),
        ("padaria-tostas", "Tostas, Gressinos e Croutons"),
        ("pastelaria-croissants", "Croissants e Paes de Leite"),
        ("pastelaria-biscoitos", "Biscoitos"),
        ("pastelaria-sortida", "Pastelaria Sortida"),
        ("pastelaria-bolos", "Bolos e Sobremesas"),
        ("pastelaria-massas", "Massas para Culinaria"),
    )),
    ("refeicoes-faceis", "Take-Away", "frescos", "refeicoes-faceis-", (
        ("entradas-salgados", "Entradas e Salgados"),
        ("sopas", "Sopas"),
        ("pizzas", "Pizzas"),
        ("massas", "Massas Frescas"),
        ("grab-go", "Grab&Go"),
        ("refeicoes-prontas", "Refeicoes Prontas"),
        ("refeicoes-vegetarianas", "Vegetariano e Vegan"),
        ("sobremesas", "Sobremesas"),
    )),
    ("laticinios-leite", "Leite", "laticinios", "laticinios-leite-", (
        ("magro", "Leite Magro"),
        ("meio-gordo", "Leite Meio Gordo"),
        ("gordo", "Leite Inteiro"),
        ("achocolatado-aromatizado", "Leite Achocolatado e Aromatizado"),
        ("sem-lactose", "Leite sem Lactose"),
    )),
    ("laticinios-iogurtes", "Iogurtes", "laticinios", "laticinios-", (
        ("iogurtes-liquidos", "Iogurtes Liquidos"),
        ("iogurtes-aromas-naturais", "Iogurtes Aromas e Naturais"),
        ("iogurtes-magros", "Iogurtes Magros"),
        ("iogurtes-bifidus", "Iogurtes Bifidus"),
        ("iogurtes-skir-kefir", "Iogurtes Proteina"),
        ("iogurtes-peda", "Iogurtes Pedacos"),
        ("iogurtes-kefir", "Iogurtes Kefir"),
        ("iogurtes-gregos", "Iogurtes Gregos"),
        ("iogurtes-bebe", "Iogurtes Bebe"),
        ("iogurtes-infantis", "Iogurtes Infantis"),
        ("iogurtes-sem-lactose", "Iogurtes sem Lactose"),
        ("vegegurtes-yofu", "Vegegurtes e Yofu"),
    )),
    ("laticinios-ovos", "Ovos", "laticinios", "", ()),
    ("laticinios-manteigas-cremes-vegetais", "Manteigas e Cremes para Barrar", "laticinios",
     "laticinios-", (
        ("manteigas", "Manteigas"),
        ("cremes-para-barrar", "Cremes para Barrar"),
        ("cremes-culinarios", "Cremes Culinarios"),
    )),
    ("laticinios-natas-bechamel-chantilly", "Natas e Bechamel", "laticinios", "laticinios-", (
        ("natas-frescas", "Natas para Bater e Chantilly"),
        ("natas-culin", "Natas Culinarias"),
        ("natas-cremes-vegetais", "Cremes Vegetais"),
        ("molho-bechamel", "Molho Bechamel"),
    )),
    ("laticinios-ovos-bebidas-vegetais", "Bebidas Vegetais", "laticinios",
     "laticinios-ovos-bebidas-", (
        ("soja", "Bebida Soja"),
        ("aveia", "Bebida Aveia"),
        ("amendoa", "Bebida Amendoa"),
        ("arroz", "Bebida Arroz"),
        ("outras", "Outras Bebidas Vegetais"),
    )),
    ("laticinios-sobremesas", "Sobremesas", "laticinios", "laticinios-sobremesas-", (
        ("gelatinas", "Gelatinas"),
        ("mousses", "Mousses e Pudins"),
    )),
)


def expand_child_id(stem: str, key: str) -> str:
    """Return the full category id for a child key written against ``stem``."""
    if key.startswith(ABSOLUTE_MARK):
        return key[len(ABSOLUTE_MARK):]
    return stem + key


def expand_branches(branches: Iterable[Branch]) -> Iterator[Entry]:
    """Yield each branch followed by its children, in order."""
    for cgid, name, parent, stem, children in branches:
        yield cgid, name, parent
        for key, child_name in children:
            yield expand_child_id(stem, key), child_name, cgid


def _build() -> tuple[Entry, ...]:
    top = ((cgid, name, None) for cgid, name in _TOP_LEVEL)
    entries = (*top, *expand_branches(_BRANCHES))
    ids = [cgid for cgid, _, _ in entries]
    if len(ids) != len(set(ids)):
        raise ValueError("duplicate category id in fresh catalogue")
    return entries


_ENTRIES = _build()


def fresh_entries() -> tuple[Entry, ...]:
    """Top-level departments followed by the fresh and dairy sub-categories.

    Each entry is a ``(cgid, name, parent)`` tuple; ``parent`` is ``None``
    for top-level departments. The order is the catalogue order.
    """
    return _ENTRIES