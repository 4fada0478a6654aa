"""Dictionary record parsing.

Records arrive as JSON-shaped dicts with camelCase keys. They are validated
once here and turned into the immutable entries the resolvers consume; the
resolvers never look at a raw record.
"""
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from core.errors import (
    AppError,
    Err,
    Ok,
    Result,
    ValidationErrorMapper,
    required_field,
    unsupported_part_of_speech,
)
from core.logging import record_logger
from languages.types import (
    Auxiliary,
    ConjugationSlot,
    Gender,
    IrregularType,
    PartOfSpeech,
    Tense,
    VerbSubtype,
)
from .entries import NounEntry, VerbEntry
from .maps import AUXILIARY_MAP, GENDER_MAP, IRREGULAR_MAP, POS_MAP, TENSE_MAP, VERB_SUBTYPE_MAP, coerce

log = record_logger()

ORIGIN = "german.record"

# Only the definite articles are trusted as gender markers in records
_ARTICLE_GENDERS = {article: GENDER_MAP[article] for article in ("der", "die", "das")}
# Separators that betray a list of alternatives packed into one plural string
_LIST_SEPARATORS = (",", "，", "、")

_mapper: ValidationErrorMapper = ValidationErrorMapper(origin=ORIGIN)


def _irregular_type(explicit: Any, flag: Any) -> IrregularType | None:
    """Read the irregular classification from its several record shapes.

    ``irregularType: "strong"``, ``irregular: {"type": "mixed"}``,
    ``irregular: {"enabled": true}`` and ``irregular: true`` are all accepted.
    """
    nested = flag.get("type") if isinstance(flag, Mapping) else None
    for candidate in (explicit, nested):
        if isinstance(candidate, str) and candidate.strip():
            return IRREGULAR_MAP.get(candidate.strip().lower(), IrregularType.UNSPECIFIED)

    enabled = flag.get("enabled") if isinstance(flag, Mapping) else flag
    return IrregularType.UNSPECIFIED if enabled is True else None


class DictionaryRecord(BaseModel):
    """A dictionary entry as delivered by the lookup service."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    part_of_speech: PartOfSpeech = Field(default=PartOfSpeech.UNKNOWN, alias="partOfSpeech")
    base_form: str = Field(alias="baseForm", min_length=1)
    gender: Gender | None = None
    plural: str | None = None
    verb_subtype: VerbSubtype = Field(default=VerbSubtype.FULL, alias="verbSubtype")
    separable: bool = False
    reflexive: bool = False
    auxiliary: Auxiliary | None = None
    irregular: IrregularType | None = None
    conjugation: dict[Tense, dict[ConjugationSlot, str]] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def collect_irregular(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        data["irregular"] = _irregular_type(data.pop("irregularType", None), data.get("irregular"))
        return data

    @field_validator("base_form", mode="before")
    @classmethod
    def strip_base_form(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("part_of_speech", mode="before")
    @classmethod
    def normalize_part_of_speech(cls, v: Any) -> Any:
        if isinstance(v, PartOfSpeech):
            return v
        if not isinstance(v, str):
            return PartOfSpeech.UNKNOWN
        return POS_MAP.get(v.strip().lower(), PartOfSpeech.UNKNOWN)

    @field_validator("gender", mode="before")
    @classmethod
    def normalize_gender(cls, v: Any) -> Any:
        if isinstance(v, Gender):
            return v
        if isinstance(v, str):
            return _ARTICLE_GENDERS.get(v.strip().lower())
        return None

    @field_validator("plural", mode="before")
    @classmethod
    def normalize_plural(cls, v: Any) -> Any:
        # Lists and joined alternatives cannot be attributed to one plural form
        if not isinstance(v, str):
            return None
        v = v.strip()
        if not v or any(sep in v for sep in _LIST_SEPARATORS):
            return None
        return v

    @field_validator("verb_subtype", mode="before")
    @classmethod
    def normalize_verb_subtype(cls, v: Any) -> Any:
        match coerce(VerbSubtype, v, "verb_subtype", VERB_SUBTYPE_MAP, ORIGIN):
            case Ok(value):
                return value
            case Err(_):
                return VerbSubtype.FULL

    @field_validator("auxiliary", mode="before")
    @classmethod
    def normalize_auxiliary(cls, v: Any) -> Any:
        if isinstance(v, Auxiliary):
            return v
        if isinstance(v, str):
            return AUXILIARY_MAP.get(v.strip().lower())
        return None

    @field_validator("conjugation", mode="before")
    @classmethod
    def normalize_conjugation(cls, v: Any) -> Any:
        if not isinstance(v, Mapping):
            return {}
        slots = {slot.value: slot for slot in ConjugationSlot}
        tenses = {**{t.value: t for t in Tense}, **TENSE_MAP}
        grid: dict[Tense, dict[ConjugationSlot, str]] = {}
        for tense_key, row in v.items():
            if isinstance(tense_key, Tense):
                tense = tense_key
            else:
                tense = tenses.get(str(tense_key).strip().lower())
            if tense is None or not isinstance(row, Mapping):
                continue
            grid[tense] = {
                slots[slot_key]: form.strip()
                for slot_key, form in row.items()
                if slot_key in slots and isinstance(form, str) and form.strip()
            }
        return grid


def parse_record(data: Mapping[str, Any]) -> Result[DictionaryRecord, AppError]:
    """Validate a raw record. Malformed records become a single validation error."""
    try:
        record = DictionaryRecord.model_validate(data)
    except ValidationError as exc:
        error = _mapper.map_pydantic_exception(exc, exc.errors())
        log.warning("record_invalid", error_count=exc.error_count(), error=error.message)
        return Err(error)

    log.debug("record_parsed", base_form=record.base_form, part_of_speech=record.part_of_speech.value)
    return Ok(record)


def to_noun_entry(record: DictionaryRecord) -> Result[NounEntry, AppError]:
    if record.part_of_speech is not PartOfSpeech.NOUN:
        return unsupported_part_of_speech(record.part_of_speech.value, PartOfSpeech.NOUN.value, ORIGIN)
    if record.gender is None:
        return required_field("gender", ORIGIN)
    return Ok(NounEntry(
        lemma=record.base_form,
        gender=record.gender,
        plural_lemma=record.plural,
    ))


def to_verb_entry(record: DictionaryRecord) -> Result[VerbEntry, AppError]:
    """Build a verb entry; shared grid cells are copied to every person they cover."""
    if record.part_of_speech is not PartOfSpeech.VERB:
        return unsupported_part_of_speech(record.part_of_speech.value, PartOfSpeech.VERB.value, ORIGIN)

    raw_forms = {
        (tense, person): form
        for tense, row in record.conjugation.items()
        for slot, form in row.items()
        for person in slot.persons
    }
    return Ok(VerbEntry(
        lemma=record.base_form,
        verb_subtype=record.verb_subtype,
        separable=record.separable,
        reflexive=record.reflexive,
        auxiliary=record.auxiliary,
        irregular=record.irregular,
        raw_forms=raw_forms,
    ))


def entry_from_record(data: Mapping[str, Any]) -> Result[NounEntry | VerbEntry, AppError]:
    """Parse a raw record straight into a noun or verb entry."""
    def convert(record: DictionaryRecord) -> Result[NounEntry | VerbEntry, AppError]:
        match record.part_of_speech:
            case PartOfSpeech.NOUN:
                return to_noun_entry(record)
            case PartOfSpeech.VERB:
                return to_verb_entry(record)
            case other:
                return unsupported_part_of_speech(other.value, "noun or verb", ORIGIN)

    return parse_record(data).and_then(convert)
