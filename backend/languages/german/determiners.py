"""German determiner morphology as closed lookup tables.

Every table is indexed as ``table[slot][case]`` where the slot is one of the
three genders or the plural. Tables are frozen and checked for totality when
this module is imported, so a gap in the rules fails at import time instead
of rendering an empty string later.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from languages.types import (
    DeclensionSlot as Slot,
    DeterminerType,
    GrammaticalCase as Case,
    GrammaticalNumber,
    Person,
)
from .pronouns import POSSESSIVE_STEMS

Row = Mapping[Case, str | None]
Table = Mapping[Slot, Row]

DEFAULT_POSSESSIVE_PERSON = Person.FIRST_SINGULAR


def _freeze_table(name: str, rows: dict[Slot, tuple]) -> Table:
    """Freeze a slot x case table given as (nom, acc, dat, gen) tuples."""
    missing = set(Slot) - set(rows)
    if missing:
        raise ValueError(f"{name} table is missing slots: {sorted(s.value for s in missing)}")

    frozen: dict[Slot, Row] = {}
    for slot, forms in rows.items():
        if len(forms) != len(Case):
            raise ValueError(f"{name} table row '{slot.value}' needs {len(Case)} cases, got {len(forms)}")
        frozen[slot] = MappingProxyType(dict(zip(Case, forms)))
    return MappingProxyType(frozen)


# Case order in every row: nominative, accusative, dative, genitive

DEFINITE_ARTICLES = _freeze_table("definite", {
    Slot.MASCULINE: ("der", "den", "dem", "des"),
    Slot.FEMININE: ("die", "die", "der", "der"),
    Slot.NEUTER: ("das", "das", "dem", "des"),
    Slot.PLURAL: ("die", "die", "den", "der"),
})

# None marks a combination German does not have
INDEFINITE_ARTICLES = _freeze_table("indefinite", {
    Slot.MASCULINE: ("ein", "einen", "einem", "eines"),
    Slot.FEMININE: ("eine", "eine", "einer", "einer"),
    Slot.NEUTER: ("ein", "ein", "einem", "eines"),
    Slot.PLURAL: (None, None, None, None),
})

NEGATION_ARTICLES = _freeze_table("negation", {
    **{
        slot: tuple(f"k{form}" for form in INDEFINITE_ARTICLES[slot].values())
        for slot in (Slot.MASCULINE, Slot.FEMININE, Slot.NEUTER)
    },
    Slot.PLURAL: ("keine", "keine", "keinen", "keiner"),
})

# ein-word endings shared by the possessive determiners
POSSESSIVE_ENDINGS = _freeze_table("possessive endings", {
    Slot.MASCULINE: ("", "en", "em", "es"),
    Slot.FEMININE: ("e", "e", "er", "er"),
    Slot.NEUTER: ("", "", "em", "es"),
    Slot.PLURAL: ("e", "e", "en", "er"),
})

# der-word endings (dieser, welcher, ...)
DER_WORD_ENDINGS = _freeze_table("der-word endings", {
    Slot.MASCULINE: ("er", "en", "em", "es"),
    Slot.FEMININE: ("e", "e", "er", "er"),
    Slot.NEUTER: ("es", "es", "em", "es"),
    Slot.PLURAL: ("e", "e", "en", "er"),
})

DER_WORD_STEMS = MappingProxyType({
    DeterminerType.DEMONSTRATIVE: "dies",
    DeterminerType.INTERROGATIVE: "welch",
})

_FIXED_TABLES: Mapping[DeterminerType, Table] = MappingProxyType({
    DeterminerType.DEFINITE: DEFINITE_ARTICLES,
    DeterminerType.INDEFINITE: INDEFINITE_ARTICLES,
    DeterminerType.NEGATION: NEGATION_ARTICLES,
})

_covered = set(_FIXED_TABLES) | set(DER_WORD_STEMS) | {DeterminerType.POSSESSIVE}
if _covered != set(DeterminerType):
    raise ValueError(f"Determiner types without rules: {sorted(t.value for t in set(DeterminerType) - _covered)}")


def build_possessive_form(stem: str, ending: str) -> str:
    """Join a possessive stem and ending; euer contracts to eur- before an ending."""
    if not ending:
        return stem
    if stem == "euer":
        return "eur" + ending
    return stem + ending


class DeterminerRuleTables:
    """Read-only access to the determiner tables."""

    __slots__ = ()

    def lookup(
        self,
        determiner_type: DeterminerType,
        slot: Slot,
        case: Case,
        person: Person | None = None,
    ) -> str | None:
        """Surface form of one determiner, or None when the combination does not exist."""
        if determiner_type in _FIXED_TABLES:
            return _FIXED_TABLES[determiner_type][slot][case]

        if determiner_type is DeterminerType.POSSESSIVE:
            stem = POSSESSIVE_STEMS[person or DEFAULT_POSSESSIVE_PERSON]
            return build_possessive_form(stem, POSSESSIVE_ENDINGS[slot][case])

        return DER_WORD_STEMS[determiner_type] + DER_WORD_ENDINGS[slot][case]

    def column(
        self,
        determiner_type: DeterminerType,
        slot: Slot,
        person: Person | None = None,
    ) -> dict[Case, str | None]:
        """All four cases of one determiner for a slot."""
        return {case: self.lookup(determiner_type, slot, case, person) for case in Case}

    @staticmethod
    def is_available(determiner_type: DeterminerType, number: GrammaticalNumber) -> bool:
        """Whether a determiner type has any realization in the given number."""
        return not (
            determiner_type is DeterminerType.INDEFINITE
            and number is GrammaticalNumber.PLURAL
        )

    def available_types(self, number: GrammaticalNumber) -> list[DeterminerType]:
        return [t for t in DeterminerType if self.is_available(t, number)]


DETERMINER_TABLES = DeterminerRuleTables()


@dataclass(frozen=True, slots=True)
class ReferencePairing:
    """Which determiner type is shown beside the active one for comparison.

    The default mapping is the one learners see in the word card; it is kept
    as data so it can be replaced without touching the resolvers.
    """
    singular: Mapping[DeterminerType, DeterminerType] = field(default_factory=lambda: MappingProxyType({
        DeterminerType.DEFINITE: DeterminerType.INDEFINITE,
        DeterminerType.INDEFINITE: DeterminerType.DEFINITE,
        DeterminerType.NEGATION: DeterminerType.INDEFINITE,
        DeterminerType.POSSESSIVE: DeterminerType.NEGATION,
        DeterminerType.DEMONSTRATIVE: DeterminerType.DEFINITE,
        DeterminerType.INTERROGATIVE: DeterminerType.DEFINITE,
    }))
    plural_overrides: Mapping[DeterminerType, DeterminerType] = field(default_factory=lambda: MappingProxyType({
        DeterminerType.NEGATION: DeterminerType.DEFINITE,
    }))
    fallback: DeterminerType = DeterminerType.DEFINITE

    def reference_for(self, active: DeterminerType, number: GrammaticalNumber) -> DeterminerType:
        if number is GrammaticalNumber.PLURAL and active in self.plural_overrides:
            return self.plural_overrides[active]
        return self.singular.get(active, self.fallback)


DEFAULT_REFERENCE_PAIRING = ReferencePairing()
