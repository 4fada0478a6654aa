# tests/test_determiners.py
"""Determiner tables: fixed article forms, possessives, der-words, totality."""
import pytest

from languages.german.determiners import (
    DEFAULT_REFERENCE_PAIRING,
    DETERMINER_TABLES,
    ReferencePairing,
    _freeze_table,
    build_possessive_form,
)
from languages.types import (
    DeclensionSlot as Slot,
    DeterminerType as Det,
    GrammaticalCase as Case,
    GrammaticalNumber as Number,
    Person,
)

CASES = [Case.NOMINATIVE, Case.ACCUSATIVE, Case.DATIVE, Case.GENITIVE]


@pytest.mark.parametrize("slot, expected", [
    (Slot.MASCULINE, ["der", "den", "dem", "des"]),
    (Slot.FEMININE, ["die", "die", "der", "der"]),
    (Slot.NEUTER, ["das", "das", "dem", "des"]),
    (Slot.PLURAL, ["die", "die", "den", "der"]),
])
def test_definite_articles(slot, expected):
    assert [DETERMINER_TABLES.lookup(Det.DEFINITE, slot, c) for c in CASES] == expected


def test_indefinite_has_no_plural():
    assert DETERMINER_TABLES.column(Det.INDEFINITE, Slot.PLURAL) == {c: None for c in CASES}
    assert not DETERMINER_TABLES.is_available(Det.INDEFINITE, Number.PLURAL)
    assert Det.INDEFINITE not in DETERMINER_TABLES.available_types(Number.PLURAL)
    assert DETERMINER_TABLES.available_types(Number.SINGULAR) == list(Det)


def test_negation_singular_is_k_plus_indefinite():
    for slot in (Slot.MASCULINE, Slot.FEMININE, Slot.NEUTER):
        for case in CASES:
            indefinite = DETERMINER_TABLES.lookup(Det.INDEFINITE, slot, case)
            assert DETERMINER_TABLES.lookup(Det.NEGATION, slot, case) == "k" + indefinite


def test_negation_plural_row():
    assert [DETERMINER_TABLES.lookup(Det.NEGATION, Slot.PLURAL, c) for c in CASES] == [
        "keine", "keine", "keinen", "keiner",
    ]


def test_possessive_defaults_to_first_person():
    assert DETERMINER_TABLES.lookup(Det.POSSESSIVE, Slot.MASCULINE, Case.ACCUSATIVE) == "meinen"


@pytest.mark.parametrize("person, slot, case, expected", [
    (Person.SECOND_SINGULAR, Slot.FEMININE, Case.DATIVE, "deiner"),
    (Person.THIRD_SINGULAR_FEMININE, Slot.NEUTER, Case.NOMINATIVE, "ihr"),
    (Person.FIRST_PLURAL, Slot.PLURAL, Case.GENITIVE, "unserer"),
    (Person.FORMAL, Slot.MASCULINE, Case.DATIVE, "Ihrem"),
    (Person.SECOND_PLURAL, Slot.MASCULINE, Case.NOMINATIVE, "euer"),
    (Person.SECOND_PLURAL, Slot.PLURAL, Case.DATIVE, "euren"),
    (Person.SECOND_PLURAL, Slot.FEMININE, Case.NOMINATIVE, "eure"),
])
def test_possessive_forms(person, slot, case, expected):
    assert DETERMINER_TABLES.lookup(Det.POSSESSIVE, slot, case, person) == expected


def test_euer_contracts_only_before_an_ending():
    assert build_possessive_form("euer", "") == "euer"
    assert build_possessive_form("euer", "en") == "euren"
    assert build_possessive_form("unser", "en") == "unseren"


@pytest.mark.parametrize("det, stem", [(Det.DEMONSTRATIVE, "dies"), (Det.INTERROGATIVE, "welch")])
def test_der_words(det, stem):
    assert [DETERMINER_TABLES.lookup(det, Slot.NEUTER, c) for c in CASES] == [
        f"{stem}es", f"{stem}es", f"{stem}em", f"{stem}es",
    ]
    assert DETERMINER_TABLES.lookup(det, Slot.PLURAL, Case.DATIVE) == f"{stem}en"


def test_every_cell_is_defined_except_indefinite_plural():
    for det in Det:
        for slot in Slot:
            for case in CASES:
                form = DETERMINER_TABLES.lookup(det, slot, case)
                if det is Det.INDEFINITE and slot is Slot.PLURAL:
                    assert form is None
                else:
                    assert form


def test_incomplete_table_is_rejected():
    with pytest.raises(ValueError, match="missing slots"):
        _freeze_table("broken", {Slot.MASCULINE: ("a", "b", "c", "d")})
    with pytest.raises(ValueError, match="needs 4 cases"):
        _freeze_table("short", {slot: ("a", "b") for slot in Slot})


@pytest.mark.parametrize("active, number, expected", [
    (Det.DEFINITE, Number.SINGULAR, Det.INDEFINITE),
    (Det.INDEFINITE, Number.SINGULAR, Det.DEFINITE),
    (Det.NEGATION, Number.SINGULAR, Det.INDEFINITE),
    (Det.NEGATION, Number.PLURAL, Det.DEFINITE),
    (Det.POSSESSIVE, Number.SINGULAR, Det.NEGATION),
    (Det.DEMONSTRATIVE, Number.PLURAL, Det.DEFINITE),
    (Det.INTERROGATIVE, Number.SINGULAR, Det.DEFINITE),
])
def test_default_reference_pairing(active, number, expected):
    assert DEFAULT_REFERENCE_PAIRING.reference_for(active, number) is expected


def test_reference_pairing_is_replaceable():
    pairing = ReferencePairing(singular={Det.DEFINITE: Det.NEGATION}, plural_overrides={})
    assert pairing.reference_for(Det.DEFINITE, Number.PLURAL) is Det.NEGATION
    assert pairing.reference_for(Det.POSSESSIVE, Number.SINGULAR) is Det.DEFINITE
