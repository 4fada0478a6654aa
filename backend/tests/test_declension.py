# tests/test_declension.py
"""Noun declension: noun endings, determiner dispatch, gaps and invalid input."""
import pytest

from core.errors import ErrorCode
from languages.german.declension import citation_form, dative_plural, genitive_singular
from languages.types import DeterminerType as Det, FormStatus, GrammaticalCase as Case, GrammaticalNumber as Number


@pytest.mark.parametrize("lemma, expected", [
    ("Hund", "Hundes"),
    ("Auto", "Autos"),
    ("Kino", "Kinos"),
    ("Büro", "Büros"),
    ("Haus", "Hauses"),
])
def test_genitive_singular(lemma, expected):
    assert genitive_singular(lemma) == expected


@pytest.mark.parametrize("plural, expected", [
    ("Hunde", "Hunden"),
    ("Frauen", "Frauen"),
    ("Autos", "Autos"),
    ("Kinder", "Kindern"),
])
def test_dative_plural(plural, expected):
    assert dative_plural(plural) == expected


def test_citation_form(hund, frau):
    assert citation_form(hund) == "der Hund"
    assert citation_form(frau) == "die Frau"


def test_definite_singular_table(noun_resolver, hund):
    forms = noun_resolver.decline_table(hund, Det.DEFINITE, Number.SINGULAR).unwrap()
    assert [f.spoken_form for f in forms] == ["der Hund", "den Hund", "dem Hund", "des Hundes"]
    assert all(f.selectable for f in forms)


def test_feminine_genitive_keeps_lemma(noun_resolver, frau):
    form = noun_resolver.resolve(frau, Case.GENITIVE, Number.SINGULAR, Det.DEFINITE).unwrap()
    assert form.spoken_form == "der Frau"


def test_neuter_genitive_after_vowel(noun_resolver, auto):
    form = noun_resolver.resolve(auto, Case.GENITIVE, Number.SINGULAR, Det.INDEFINITE).unwrap()
    assert form.spoken_form == "eines Autos"


def test_plural_dative_adds_n(noun_resolver, hund):
    forms = noun_resolver.decline_table(hund, Det.DEFINITE, Number.PLURAL).unwrap()
    assert [f.spoken_form for f in forms] == ["die Hunde", "die Hunde", "den Hunden", "der Hunde"]


def test_indefinite_plural_is_unavailable(noun_resolver, hund):
    forms = noun_resolver.decline_table(hund, Det.INDEFINITE, Number.PLURAL).unwrap()
    assert len(forms) == 4
    for form in forms:
        assert form.status is FormStatus.UNAVAILABLE_COMBINATION
        assert not form.selectable
        assert form.partial
        assert form.determiner is None
    assert forms[2].spoken_form == "Hunden"


def test_missing_plural_uses_placeholder(noun_resolver, obst):
    form = noun_resolver.resolve(obst, Case.NOMINATIVE, Number.PLURAL, Det.DEFINITE).unwrap()
    assert form.status is FormStatus.MISSING_DATA
    assert form.noun == "—"
    assert form.determiner == "die"
    assert not form.selectable


def test_missing_plural_is_not_spoken(noun_resolver, obst):
    form = noun_resolver.resolve(obst, Case.DATIVE, Number.PLURAL, Det.DEFINITE).unwrap()
    assert form.status is FormStatus.MISSING_DATA
    assert form.spoken_form == ""


def test_missing_singular_data_does_not_affect_singular(noun_resolver, obst):
    form = noun_resolver.resolve(obst, Case.DATIVE, Number.SINGULAR, Det.DEFINITE).unwrap()
    assert form.spoken_form == "dem Obst"
    assert form.status is FormStatus.AVAILABLE


def test_possessive_with_person(noun_resolver, hund):
    form = noun_resolver.resolve(hund, Case.ACCUSATIVE, Number.SINGULAR, Det.POSSESSIVE, "du").unwrap()
    assert form.spoken_form == "deinen Hund"
    assert form.person.value == "2sg"


def test_possessive_default_person(noun_resolver, frau):
    form = noun_resolver.resolve(frau, Case.NOMINATIVE, Number.SINGULAR, "poss").unwrap()
    assert form.spoken_form == "meine Frau"


def test_person_ignored_for_non_possessives(noun_resolver, hund):
    form = noun_resolver.resolve(hund, Case.NOMINATIVE, Number.SINGULAR, Det.DEFINITE, "du").unwrap()
    assert form.person is None
    assert form.spoken_form == "der Hund"


def test_string_aliases_are_accepted(noun_resolver, hund):
    form = noun_resolver.resolve(hund, "dat", "pl", "kein").unwrap()
    assert form.spoken_form == "keinen Hunden"


def test_demonstrative_and_interrogative(noun_resolver, auto):
    assert noun_resolver.resolve(auto, "gen", "sg", "dies").unwrap().spoken_form == "dieses Autos"
    assert noun_resolver.resolve(auto, "dat", "pl", "welch").unwrap().spoken_form == "welchen Autos"


@pytest.mark.parametrize("case, number, det, parameter", [
    ("instrumental", "sg", "def", "case"),
    ("nom", "dual", "def", "number"),
    ("nom", "sg", "jeder", "determiner_type"),
])
def test_invalid_parameters_return_err(noun_resolver, hund, case, number, det, parameter):
    result = noun_resolver.resolve(hund, case, number, det)
    assert result.is_err()
    error = result.unwrap_err()
    assert error.code is ErrorCode.E2030_INVALID_GRAMMAR_PARAMETER
    assert error.metadata["field"] == parameter


def test_invalid_person_returns_err(noun_resolver, hund):
    result = noun_resolver.resolve(hund, "nom", "sg", "poss", "4sg")
    assert result.is_err()
    assert result.unwrap_err().metadata["field"] == "person"


def test_resolution_is_deterministic(noun_resolver, hund):
    first = noun_resolver.decline_table(hund, Det.NEGATION, Number.PLURAL).unwrap()
    second = noun_resolver.decline_table(hund, Det.NEGATION, Number.PLURAL).unwrap()
    assert first == second
