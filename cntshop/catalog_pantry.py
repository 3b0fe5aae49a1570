"""Category entries for the frozen, grocery, drinks and health-food aisles."""

from __future__ import annotations

from cntshop.catalog_fresh import Entry

# Each branch: (cgid, name, parent of the branch, children as (cgid, name)).
_BRANCHES: tuple[tuple[str, str, str, tuple[tuple[str, str], ...]], ...] = (
    # Congelados
    ("congelados-vegetais", "Frutas e Legumes", "congelados", (
        ("congelados-vegetais-legumes-congelados", "Legumes"),
        ("congelados-vegetais-mistura-vegetais", "Misturas de Legumes"),
        ("congelados-vegetais-frutas", "Frutas"),
    )),
    ("congelados-vegetais-batatas", "Batata Frita e Pure", "congelados", ()),
    ("congelados-douradinhos", "Nuggets e Crocantes", "congelados", ()),
    ("congelados-douradinhos-barrinhas", "Douradinhos e Filetes", "congelados", ()),
    ("congelados-refeicoes-hamburguer", "Hamburgueres e Almondegas", "congelados", ()),
    ("congelados-peixe", "Peixe, Marisco e Carne", "congelados", (
        ("congelados-peixe-congelado", "Peixe"),
        ("congelados-peixe-marisco", "Marisco"),
        ("congelados-peixe-bacalhau", "Bacalhau"),
        ("congelados-peixe-polvo", "Polvo, Lulas e Chocos"),
        ("congelados-carne", "Carne"),
    )),
    ("congelados-pizzas", "Pizzas", "congelados", ()),
    ("congelados-refeicoes-massa-refeicoes", "Refeicoes Prontas", "congelados", (
        ("congelados-refeicoes-massa-refeicoes-carne", "Carne"),
        ("congelados-refeicoes-massa-refeicoes-peixe", "Peixe"),
        ("congelados-refeicoes-massa-refeicoes-gnochis", "Massas e Gnocchis"),
        ("congelados-refeicoes-massa-refeicoes-misturas", "Salteados e Sopas"),
    )),
    ("congelados-salgados-folhados", "Salgados, Folhados e Pastelaria", "congelados", (
        ("congelados-salgados-folhados-salgados", "Salgados"),
        ("congelados-salgados-folhados-folhados", "Folhados"),
        ("congelados-pastelaria", "Pastelaria Doce"),
        ("congelados-salgados-folhados-pao", "Pao de Alho e Pao de Queijo"),
    )),
    ("congelados-vegetariano-vegan", "Vegetariano e Vegan", "congelados", (
        ("congelados-vegetariano-vegan-hamburgueres", "Hamburgueres e Almondegas"),
        ("congelados-vegetariano-vegan-nuggets-panados", "Nuggets e Panados"),
        ("congelados-vegetariano-vegan-pizzas-falafel", "Refeicoes, Pizzas e Falafel"),
    )),
    ("congelados-gelados", "Gelados", "congelados", (
        ("congelados-gelados-cone", "Gelados de Cone"),
        ("congelados-gelados-pauzinho", "Gelados de Pauzinho"),
        ("congelados-gelados-familiares", "Gelados Familiares"),
        ("congelados-gelados-americanos", "Gelados Americanos"),
        ("congelados-gelados-bites", "Mini Bites e Sandwich"),
        ("congelados-gelados-tartes", "Tartes Geladas e Viennettas"),
        ("congelados-gelados-infantis", "Gelados Infantis"),
        ("congelados-gelados-vegan", "Gelados Vegan"),
    )),
    ("congelados-sobremesas", "Sobremesas", "congelados", (
        ("congelados-sobremesas-bolos-congelados", "Bolos Congelados"),
        ("congelados-sobremesas-crepes-petit", "Crepes e Petit Gateau"),
    )),
    # Mercearia
    ("mercearias-cafe-cha", "Cafe, Cha e Bebidas Soluveis", "mercearias", (
        ("mercearia-cha-cafe-achocolatados-cafe-capsulas", "Cafe em Capsulas"),
        ("mercearia-cha-cafe-achocolatados-cafe-torrado", "Cafe Torrado"),
        ("mercearia-cha-cafe-achocolatados-cafe-soluvel", "Cafe Soluvel"),
        ("mercearia-cha-cafe-achocolatados-chas", "Chas e Infusoes"),
        ("mercearia-cha-cafe-achocolatados-achocolatados", "Chocolate Soluvel"),
        ("mercearia-cha-cafe-achocolatados-bebidas", "Bebidas de Cereais"),
    )),
    ("mercearias-cereais-barras", "Cereais e Barras", "mercearias", ()),
    ("mercearias-bolachas-biscoitos", "Bolachas, Biscoitos e Tostas", "mercearias", ()),
    ("mercearias-chocolate", "Chocolate, Gomas e Rebucados", "mercearias", ()),
    ("mercearias-arroz-massa", "Arroz, Massa e Farinha", "mercearias", ()),
    ("mercearias-azeite-oleo-vinagre", "Azeite, Oleo e Vinagre", "mercearias", ()),
    ("mercearias-conservas", "Conservas", "mercearias", ()),
    ("mercearias-molhos-temperos", "Molhos, Temperos e Sal", "mercearias", ()),
    ("mercearias-snacks", "Snacks e Batatas Fritas", "mercearias", ()),
    ("mercearias-compotas", "Compotas, Cremes e Mel", "mercearias", ()),
    ("mercearias-acucar", "Acucar e Sobremesas", "mercearias", ()),
    ("mercearias-alimentacao-infantil", "Alimentacao Infantil", "mercearias", ()),
    # Bebidas e Garrafeira
    ("bebidas-sumos-refrigerantes", "Sumos e Refrigerantes", "bebidas", ()),
    ("bebidas-agua", "Agua", "bebidas", (
        ("bebidas-agua-sem-gas", "Agua sem Gas"),
        ("bebidas-agua-com-gas", "Agua com Gas"),
        ("bebidas-agua-tonica", "Agua Tonica e Ginger Ale"),
        ("bebidas-agua-sabor", "Agua com Sabor"),
    )),
    ("bebidas-bebidas-energeticas", "Bebidas Energeticas e Isotonicas", "bebidas", ()),
    ("bebidas-cervejas-sidras", "Cervejas e Sidras", "bebidas", ()),
    ("bebidas-vinho", "Vinhos", "bebidas", ()),
    ("bebidas-espirituosas", "Bebidas Espirituosas", "bebidas", ()),
    ("bebidas-champanhe-espumante", "Champanhe e Espumante", "bebidas", ()),
    # Bio e Saudavel
    ("bio-suplementos", "Suplementos e Vitaminas", "biologicos", ()),
    ("bio-nutricao-desportiva", "Nutricao Desportiva", "biologicos", ()),
    ("bio-vegetariano-vegan", "Vegetariano e Vegan", "biologicos", ()),
    ("bio-biologicos", "Biologicos", "biologicos", ()),
    ("bio-sem-gluten", "Sem Gluten", "biologicos", ()),
    ("bio-sem-lactose", "Sem Lactose", "biologicos", ()),
)


def _flatten() -> tuple[Entry, ...]:
    entries: list[Entry] = []
    for cgid, name, parent, children in _BRANCHES:
        entries.append((cgid, name, parent))
        entries.extend((child_id, child_name, cgid) for child_id, child_name in children)
    return tuple(entries)


_ENTRIES = _flatten()


def pantry_entries() -> tuple[Entry, ...]:
    """Frozen, grocery, drinks and health-food sub-categories.

    Each entry is a ``(cgid, name, parent)`` tuple in catalogue order. Every
    parent is either a top-level department or an earlier entry.
    """
    return _ENTRIES