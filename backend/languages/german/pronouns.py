"""German personal, reflexive and possessive pronoun stems by person."""
from types import MappingProxyType

from languages.types import Person

# Subject pronoun used in the spoken form of a conjugated verb
SUBJECT_PRONOUNS = MappingProxyType({
    Person.FIRST_SINGULAR: "ich",
    Person.SECOND_SINGULAR: "du",
    Person.THIRD_SINGULAR_MASCULINE: "er",
    Person.THIRD_SINGULAR_FEMININE: "sie",
    Person.THIRD_SINGULAR_NEUTER: "es",
    Person.FIRST_PLURAL: "wir",
    Person.SECOND_PLURAL: "ihr",
    Person.THIRD_PLURAL: "sie",
    Person.FORMAL: "Sie",
})

# Accusative reflexive pronoun agreeing with the subject
REFLEXIVE_PRONOUNS = MappingProxyType({
    Person.FIRST_SINGULAR: "mich",
    Person.SECOND_SINGULAR: "dich",
    Person.THIRD_SINGULAR_MASCULINE: "sich",
    Person.THIRD_SINGULAR_FEMININE: "sich",
    Person.THIRD_SINGULAR_NEUTER: "sich",
    Person.FIRST_PLURAL: "uns",
    Person.SECOND_PLURAL: "euch",
    Person.THIRD_PLURAL: "sich",
    Person.FORMAL: "sich",
})

# Possessive determiner stems (mein-, dein-, ...)
POSSESSIVE_STEMS = MappingProxyType({
    Person.FIRST_SINGULAR: "mein",
    Person.SECOND_SINGULAR: "dein",
    Person.THIRD_SINGULAR_MASCULINE: "sein",
    Person.THIRD_SINGULAR_FEMININE: "ihr",
    Person.THIRD_SINGULAR_NEUTER: "sein",
    Person.FIRST_PLURAL: "unser",
    Person.SECOND_PLURAL: "euer",
    Person.THIRD_PLURAL: "ihr",
    Person.FORMAL: "Ihr",
})

for _table in (SUBJECT_PRONOUNS, REFLEXIVE_PRONOUNS, POSSESSIVE_STEMS):
    _missing = set(Person) - set(_table)
    if _missing:
        raise ValueError(f"Pronoun table is missing persons: {sorted(p.value for p in _missing)}")
