"""German verb surface forms from externally supplied raw conjugations.

Nothing here conjugates a verb. The raw per-person forms come from the
dictionary entry; this module only puts their parts in the right order:

- a detached separable prefix goes to the end of the clause
  ("aufstehe" -> "stehe auf"),
- a reflexive pronoun goes after the finite verb and before the prefix
  ("bereitest vor" -> "bereitest dich vor"),
- in the perfect, the reflexive pronoun follows the auxiliary
  ("habe gefreut" -> "habe mich gefreut").

A pronoun already present in the raw form is never inserted a second time.
"""
import re
from dataclasses import dataclass
from typing import Mapping

from core.config import settings
from core.errors import AppError, Err, Ok, Result, sequence_results
from core.logging import engine_logger
from languages.types import (
    Auxiliary,
    ConjugationSlot,
    FormStatus,
    IrregularType,
    Person,
    Tense,
    VerbSubtype,
)
from .entries import REFLEXIVE_MARKER, VerbEntry
from .maps import PERSON_MAP, TENSE_MAP, coerce
from .pronouns import REFLEXIVE_PRONOUNS, SUBJECT_PRONOUNS

log = engine_logger()

ORIGIN = "german.conjugation"

SEPARABLE_PREFIXES = (
    "ab", "an", "auf", "aus", "bei", "ein", "fest", "fort", "her", "hin",
    "los", "mit", "nach", "nieder", "vor", "weg", "weiter", "zu", "zurück",
    "zusammen",
)
# Longest match first: "weiter" before "weg", "zurück"/"zusammen" before "zu"
_PREFIXES_BY_LENGTH = tuple(sorted(SEPARABLE_PREFIXES, key=len, reverse=True))

_NON_WORD = re.compile(r"[^\w]")


def detect_separable_prefix(lemma: str) -> str:
    """Separable prefix of a lemma, or '' when none is recognised.

    A leading "sich " is ignored and only the last word is inspected. At least
    two letters must follow the prefix so that e.g. "an" alone never matches.
    """
    word = (lemma or "").strip().lower()
    if word.startswith(REFLEXIVE_MARKER):
        word = word[len(REFLEXIVE_MARKER):].strip()
    if not word:
        return ""
    last = word.split()[-1]

    for prefix in _PREFIXES_BY_LENGTH:
        if last.startswith(prefix) and len(last) > len(prefix) + 1:
            return prefix
    return ""


def _normalize_token(token: str) -> str:
    return _NON_WORD.sub("", token.lower())


def contains_token(text: str, word: str) -> bool:
    """Whether ``word`` occurs in ``text`` as a standalone token (case and punctuation ignored)."""
    target = _normalize_token(word)
    if not target:
        return False
    return any(_normalize_token(token) == target for token in text.split())


def compose_perfect(raw: str, pronoun: str | None) -> str:
    """Insert the reflexive pronoun right after the auxiliary of a perfect form."""
    parts = raw.split()
    if not pronoun or not parts or contains_token(raw, pronoun):
        return " ".join(parts)
    if len(parts) == 1:
        return f"{parts[0]} {pronoun}"
    return " ".join([parts[0], pronoun, *parts[1:]])


def split_separable(raw: str, prefix: str) -> tuple[str, str]:
    """Split a finite form into (core, detached prefix).

    "stehe auf" is already in clause order; "aufstehe" is the glued form some
    sources deliver and gets its prefix moved out.
    """
    text = " ".join(raw.split())
    if not text or not prefix:
        return text, ""

    tokens = text.split(" ")
    if len(tokens) > 1 and _normalize_token(tokens[-1]) == prefix:
        return " ".join(tokens[:-1]), prefix

    if text.lower().startswith(prefix) and len(text) > len(prefix):
        core = text[len(prefix):].strip()
        if core:
            return core, prefix

    return text, ""


def compose_finite(raw: str, prefix: str, pronoun: str | None) -> str:
    """Present/preterite surface: core [pronoun] [prefix]."""
    core, suffix = split_separable(raw, prefix)
    if pronoun and any(contains_token(part, pronoun) for part in (core, suffix, raw)):
        pronoun = None
    return " ".join(part for part in (core, pronoun, suffix) if part)


@dataclass(frozen=True, slots=True)
class VerbForm:
    """One resolved cell of the conjugation grid."""
    display: str
    status: FormStatus
    tense: Tense
    person: Person
    raw: str

    @property
    def selectable(self) -> bool:
        return self.status.selectable


@dataclass(frozen=True, slots=True)
class VerbSummary:
    """Metadata shown next to the conjugation grid."""
    lemma: str
    infinitive: str
    verb_subtype: VerbSubtype
    auxiliary: Auxiliary | None
    reflexive: bool
    separable: bool
    separable_prefix: str
    irregular: IrregularType | None
    irregular_badge_visible: bool


class VerbFormResolver:
    """Recomposes raw conjugated forms into clause order."""

    __slots__ = ("_placeholder",)

    def __init__(self, placeholder: str | None = None):
        self._placeholder = settings.MISSING_FORM_PLACEHOLDER if placeholder is None else placeholder

    @staticmethod
    def effective_prefix(entry: VerbEntry) -> str:
        """Detected prefix when the entry is flagged separable, else ''.

        The upstream separable flag is unreliable, so it only counts when the
        lemma really starts with a known prefix.
        """
        prefix = detect_separable_prefix(entry.lemma)
        return prefix if entry.separable and prefix else ""

    def resolve(
        self,
        entry: VerbEntry,
        tense: Tense | str,
        person: Person | str,
    ) -> Result[VerbForm, AppError]:
        parsed = sequence_results([
            coerce(Tense, tense, "tense", TENSE_MAP, ORIGIN),
            coerce(Person, person, "person", PERSON_MAP, ORIGIN),
        ])
        match parsed:
            case Err(error):
                log.warning("verb_parameter_invalid", lemma=entry.lemma, error=error.message)
                return Err(error)
            case Ok([tense_, person_]):
                return Ok(self._resolve(entry, tense_, person_))

    def _resolve(self, entry: VerbEntry, tense: Tense, person: Person) -> VerbForm:
        raw = entry.raw_form(tense, person)
        if not raw:
            log.debug("verb_form_missing", lemma=entry.lemma, tense=tense.value, person=person.value)
            return VerbForm(
                display=self._placeholder,
                status=FormStatus.MISSING_DATA,
                tense=tense,
                person=person,
                raw="",
            )

        pronoun = REFLEXIVE_PRONOUNS[person] if entry.reflexive else None
        if tense is Tense.PERFECT:
            display = compose_perfect(raw, pronoun)
        else:
            display = compose_finite(raw, self.effective_prefix(entry), pronoun)

        log.debug(
            "verb_resolved",
            lemma=entry.lemma,
            tense=tense.value,
            person=person.value,
            raw=raw,
            display=display,
        )
        return VerbForm(
            display=display,
            status=FormStatus.AVAILABLE,
            tense=tense,
            person=person,
            raw=raw,
        )

    def spoken_form(
        self,
        entry: VerbEntry,
        tense: Tense | str,
        person: Person | str,
        subject_pronoun: str | None = None,
    ) -> Result[str, AppError]:
        """Subject pronoun + display form, e.g. "ich bereite mich vor".

        Empty when the entry has no raw form for this cell.
        """
        match self.resolve(entry, tense, person):
            case Err(error):
                return Err(error)
            case Ok(form):
                if not form.selectable:
                    return Ok("")
                subject = (subject_pronoun or SUBJECT_PRONOUNS[form.person]).strip()
                return Ok(f"{subject} {form.display}" if subject else form.display)

    def conjugation_table(
        self,
        entry: VerbEntry,
        tense: Tense | str,
        variants: Mapping[ConjugationSlot, Person] | None = None,
    ) -> Result[list[VerbForm], AppError]:
        """The six grid cells for one tense.

        Shared slots resolve to the person picked in ``variants``, or to the
        first person of the slot.
        """
        variants = variants or {}
        return sequence_results([
            self.resolve(entry, tense, variants.get(slot, slot.persons[0]))
            for slot in ConjugationSlot
        ])

    def summarize(self, entry: VerbEntry, show_irregular_badge: bool | None = None) -> VerbSummary:
        if show_irregular_badge is None:
            show_irregular_badge = settings.SHOW_IRREGULAR_BADGE
        prefix = self.effective_prefix(entry)
        return VerbSummary(
            lemma=entry.lemma,
            infinitive=entry.infinitive,
            verb_subtype=entry.verb_subtype,
            auxiliary=entry.auxiliary,
            reflexive=entry.reflexive,
            separable=bool(prefix),
            separable_prefix=prefix,
            irregular=entry.irregular,
            irregular_badge_visible=bool(show_irregular_badge and entry.irregular),
        )
