"""Category entries for the cleaning, baby, beauty, pets, home and toys aisles."""

from __future__ import annotations

from cntshop.catalog_fresh import Entry

# Each department with its sub-categories as (id suffix, name); the full id is
# the department id, a dash and the suffix.
_DEPARTMENTS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    ("limpeza", (
        ("roupa", "Roupa"),
        ("cozinha", "Cozinha"),
        ("wc", "Casa de Banho"),
        ("geral", "Chao e Superficies"),
        ("produtos-papel", "Guardanapos e Rolos"),
        ("ambientadores", "Velas e Ambientadores"),
        ("baldes-ecopontos-sacos", "Sacos e Baldes do Lixo"),
        ("panos-baldes-vassouras", "Mopas, Esfregonas e Vassouras"),
        ("panos-esfregoes-luvas", "Panos, Esfregoes e Luvas"),
        ("inseticidas", "Inseticidas e Desumidificadores"),
        ("auto-motos", "Limpeza Auto e Motos"),
    )),
    ("bebe", (
        ("alimentacao-infantil", "Alimentacao Infantil"),
        ("fraldas-toalhitas", "Fraldas e Toalhitas"),
        ("banho-higiene", "Banho e Higiene"),
        ("auto-passeio", "Cadeiras Auto e Carrinhos"),
        ("cadeiras-acessorios", "Cadeiras e Acessorios de Refeicao"),
        ("mobiliario-colchoes", "Mobiliario e Colchoes"),
        ("banheiras-acessorios", "Banheiras e Complementos"),
        ("textil", "Textil de Bebe"),
        ("chupetas-mordedores", "Chupetas e Mordedores"),
        ("brinquedos", "Brinquedos e Livros"),
    )),
    ("higiene-beleza", (
        ("cabelo", "Cabelo"),
        ("corpo", "Corpo"),
        ("rosto", "Rosto"),
        ("maquilhagem", "Maquilhagem"),
        ("oral", "Higiene Oral"),
        ("intima", "Higiene Intima"),
        ("homem", "Homem"),
        ("preservativos", "Preservativos e Estimuladores"),
        ("lencos-saude", "Lencos e Cuidados de Saude"),
        ("papel-lencos", "Papel Higienico"),
        ("solares", "Solares e Bronzeadores"),
        ("perfumes-conjuntos", "Coffrets e Presentes"),
    )),
    ("animais", (
        ("cao", "Cao"),
        ("gato", "Gato"),
        ("outros-animais", "Outros Animais"),
    )),
    ("casa", (
        ("mobiliario-colchoes", "Mobiliario e Colchoes"),
        ("textil-lar", "Textil Lar"),
        ("decoracao-banho", "Decoracao"),
        ("cozinha", "Cozinha"),
        ("mesa", "Mesa"),
        ("eletrodomesticos", "Eletrodomesticos"),
        ("lavandaria-organiza", "Lavandaria e Organizacao"),
        ("festa", "Festa"),
        ("jardim", "Jardim"),
        ("pilhas-lampadas", "Pilhas e Lampadas"),
        ("bricolage", "Bricolage"),
    )),
    ("brinquedos", (
        ("construcoes-lego-1", "LEGO"),
    )),
)


def _build() -> tuple[Entry, ...]:
    entries = tuple(
        (f"{department}-{suffix}", name, department)
        for department, children in _DEPARTMENTS
        for suffix, name in children
    )
    ids = [cgid for cgid, _, _ in entries]
    if len(ids) != len(set(ids)):
        raise ValueError("duplicate category id in household catalogue")
    return entries


_ENTRIES = _build()


def household_entries() -> tuple[Entry, ...]:
    """Cleaning, baby, beauty, pets, home and toys sub-categories.

    Each entry is a ``(cgid, name, parent)`` tuple in catalogue order; every
    parent is a top-level department.
    """
    return _ENTRIES