# tests/conftest.py
import pytest
from unittest.mock import MagicMock

from core.logging import configure_logging
from languages.german.conjugation import VerbFormResolver
from languages.german.declension import NounDeclensionResolver
from languages.german.entries import NounEntry, VerbEntry
from languages.types import Auxiliary, Gender, IrregularType, Person, Tense

PLACEHOLDER = "—"


def _grid(tense: Tense, forms: dict[Person, str]) -> dict[tuple[Tense, Person], str]:
    return {(tense, person): form for person, form in forms.items()}


@pytest.fixture(scope="session", autouse=True)
def logging_configured():
    """Structured JSON logs so test output stays greppable."""
    configure_logging(level="DEBUG", json_logs=True)


@pytest.fixture
def noun_resolver():
    return NounDeclensionResolver(placeholder=PLACEHOLDER)


@pytest.fixture
def verb_resolver():
    return VerbFormResolver(placeholder=PLACEHOLDER)


# --- Nouns ---

@pytest.fixture
def hund():
    return NounEntry(lemma="Hund", gender=Gender.MASCULINE, plural_lemma="Hunde")


@pytest.fixture
def frau():
    return NounEntry(lemma="Frau", gender=Gender.FEMININE, plural_lemma="Frauen")


@pytest.fixture
def auto():
    return NounEntry(lemma="Auto", gender=Gender.NEUTER, plural_lemma="Autos")


@pytest.fixture
def obst():
    """Noun without a plural in the source data."""
    return NounEntry(lemma="Obst", gender=Gender.NEUTER)


# --- Verbs ---

@pytest.fixture
def aufstehen():
    """Separable verb whose present forms arrive glued for 'ich'."""
    return VerbEntry(
        lemma="aufstehen",
        separable=True,
        auxiliary=Auxiliary.SEIN,
        irregular=IrregularType.STRONG,
        raw_forms={
            **_grid(Tense.PRESENT, {
                Person.FIRST_SINGULAR: "aufstehe",
                Person.SECOND_SINGULAR: "stehst auf",
                Person.THIRD_SINGULAR_MASCULINE: "steht auf",
            }),
            **_grid(Tense.PERFECT, {
                Person.FIRST_SINGULAR: "bin aufgestanden",
            }),
        },
    )


@pytest.fixture
def vorbereiten():
    """Separable and reflexive."""
    return VerbEntry(
        lemma="sich vorbereiten",
        separable=True,
        reflexive=True,
        auxiliary=Auxiliary.HABEN,
        raw_forms={
            **_grid(Tense.PRESENT, {
                Person.FIRST_SINGULAR: "bereite vor",
                Person.SECOND_SINGULAR: "bereitest vor",
                Person.THIRD_PLURAL: "bereiten vor",
                Person.FORMAL: "bereiten vor",
            }),
            **_grid(Tense.PERFECT, {
                Person.FIRST_SINGULAR: "habe vorbereitet",
            }),
        },
    )


@pytest.fixture
def freuen():
    return VerbEntry(
        lemma="sich freuen",
        reflexive=True,
        auxiliary=Auxiliary.HABEN,
        raw_forms={
            **_grid(Tense.PRESENT, {Person.FIRST_SINGULAR: "freue"}),
            **_grid(Tense.PERFECT, {
                Person.FIRST_SINGULAR: "habe gefreut",
                Person.SECOND_SINGULAR: "hast dich gefreut",
            }),
        },
    )


@pytest.fixture
def waschen():
    """Reflexive verb whose source already carries the pronoun."""
    return VerbEntry(
        lemma="sich waschen",
        reflexive=True,
        raw_forms=_grid(Tense.PRESENT, {Person.FIRST_SINGULAR: "wasche mich"}),
    )


# --- Sinks ---

@pytest.fixture
def speak():
    """Pronunciation sink."""
    return MagicMock()


@pytest.fixture
def override():
    """Headword-override sink."""
    return MagicMock()
