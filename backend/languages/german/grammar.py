"""German grammar configuration for the word card."""
from languages.base import (
    CaseConfig,
    DeterminerConfig,
    GenderConfig,
    GrammarConfig,
    NumberConfig,
    PersonConfig,
    TenseConfig,
)
from languages.types import ConjugationSlot, Person

# Case configurations with question hints and colors, in table order
CASE_CONFIGS = [
    CaseConfig(
        id="nominative",
        label="Nominativ",
        hint="Wer? Was?",
        color_bg="bg-blue-50",
        color_text="text-blue-700",
        color_border="border-blue-300",
    ),
    CaseConfig(
        id="accusative",
        label="Akkusativ",
        hint="Wen? Was?",
        color_bg="bg-purple-50",
        color_text="text-purple-700",
        color_border="border-purple-300",
    ),
    CaseConfig(
        id="dative",
        label="Dativ",
        hint="Wem?",
        color_bg="bg-orange-50",
        color_text="text-orange-700",
        color_border="border-orange-300",
    ),
    CaseConfig(
        id="genitive",
        label="Genitiv",
        hint="Wessen?",
        color_bg="bg-green-50",
        color_text="text-green-700",
        color_border="border-green-300",
    ),
]

GENDER_CONFIGS = [
    GenderConfig(id="masculine", label="der", short="m"),
    GenderConfig(id="feminine", label="die", short="f"),
    GenderConfig(id="neuter", label="das", short="n"),
]

NUMBER_CONFIGS = [
    NumberConfig(id="singular", label="Singular"),
    NumberConfig(id="plural", label="Plural"),
]

DETERMINER_CONFIGS = [
    DeterminerConfig(id="definite", label="Bestimmter Artikel", example="der"),
    DeterminerConfig(id="indefinite", label="Unbestimmter Artikel", example="ein", plural=False),
    DeterminerConfig(id="negation", label="Negation", example="kein"),
    DeterminerConfig(id="possessive", label="Possessivartikel", example="mein"),
    DeterminerConfig(id="demonstrative", label="Demonstrativ", example="dieser"),
    DeterminerConfig(id="interrogative", label="Fragewort", example="welcher"),
]

PERSON_LABELS = {
    Person.FIRST_SINGULAR: "ich",
    Person.SECOND_SINGULAR: "du",
    Person.THIRD_SINGULAR_MASCULINE: "er",
    Person.THIRD_SINGULAR_FEMININE: "sie",
    Person.THIRD_SINGULAR_NEUTER: "es",
    Person.FIRST_PLURAL: "wir",
    Person.SECOND_PLURAL: "ihr",
    Person.THIRD_PLURAL: "sie",
    Person.FORMAL: "Sie",
}

PERSON_CONFIGS = [
    PersonConfig(id=person.value, label=label, slot=ConjugationSlot.of(person).value)
    for person, label in PERSON_LABELS.items()
]

TENSE_CONFIGS = [
    TenseConfig(id="present", label="Präsens"),
    TenseConfig(id="preterite", label="Präteritum"),
    TenseConfig(id="perfect", label="Perfekt"),
]

GERMAN_GRAMMAR_CONFIG = GrammarConfig(
    cases=CASE_CONFIGS,
    genders=GENDER_CONFIGS,
    numbers=NUMBER_CONFIGS,
    determiners=DETERMINER_CONFIGS,
    persons=PERSON_CONFIGS,
    tenses=TENSE_CONFIGS,
    has_declension=True,
    has_conjugation=True,
)
