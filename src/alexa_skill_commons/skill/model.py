"""Interaction model document, one per locale.

See https://developer.amazon.com/en-US/docs/alexa/smapi/interaction-model-schema.html
"""

from __future__ import annotations

from enum import Enum

from alexa_skill_commons.schema import FrozenCamelModel


class DelegationStrategy(str, Enum):
    ALWAYS = "ALWAYS"
    SKILL_RESPONSE = "SKILL_RESPONSE"


class ValidationType(str, Enum):
    """Slot validation rules.

    See https://developer.amazon.com/docs/custom-skills/validate-slot-values.html#validation-rules
    """

    HAS_ENTITY_RESOLUTION_MATCH = "hasEntityResolutionMatch"
    IS_IN_SET = "isInSet"
    IS_NOT_IN_SET = "isNotInSet"
    IS_GREATER_THAN = "isGreaterThan"
    IS_GREATER_THAN_OR_EQUAL_TO = "isGreaterThanOrEqualTo"
    IS_LESS_THAN = "isLessThan"
    IS_LESS_THAN_OR_EQUAL_TO = "isLessThanOrEqualTo"
    IS_IN_DURATION = "isInDuration"
    IS_NOT_IN_DURATION = "isNotInDuration"

    @property
    def requires_values(self) -> bool:
        return self in (ValidationType.IS_IN_SET, ValidationType.IS_NOT_IN_SET)


class VariationType(str, Enum):
    PLAIN_TEXT = "PlainText"
    SSML = "SSML"


class ModelSlot(FrozenCamelModel):
    name: str
    type: str
    samples: list[str] | None = None


class ModelIntent(FrozenCamelModel):
    name: str
    samples: list[str] | None = None
    slots: list[ModelSlot] | None = None


class NameValue(FrozenCamelModel):
    value: str
    synonyms: list[str] | None = None


class TypeValue(FrozenCamelModel):
    id: str | None = None
    name: NameValue


class ModelType(FrozenCamelModel):
    name: str
    values: list[TypeValue]


class LanguageModel(FrozenCamelModel):
    invocation_name: str
    intents: list[ModelIntent]
    types: list[ModelType] | None = None


class SlotPrompts(FrozenCamelModel):
    elicitation: str | None = None
    confirmation: str | None = None


class IntentPrompts(FrozenCamelModel):
    confirmation: str | None = None


class SlotValidation(FrozenCamelModel):
    type: ValidationType
    prompt: str
    values: list[str] | None = None


class DialogIntentSlot(FrozenCamelModel):
    name: str
    type: str
    confirmation_required: bool
    elicitation_required: bool
    prompts: SlotPrompts | None = None
    validations: list[SlotValidation] | None = None


class DialogIntent(FrozenCamelModel):
    name: str
    confirmation_required: bool
    delegation_strategy: DelegationStrategy | None = None
    prompts: IntentPrompts | None = None
    slots: list[DialogIntentSlot] | None = None


class Dialog(FrozenCamelModel):
    delegation_strategy: DelegationStrategy
    intents: list[DialogIntent] | None = None


class PromptVariation(FrozenCamelModel):
    type: VariationType
    value: str


class ModelPrompt(FrozenCamelModel):
    id: str
    variations: list[PromptVariation]


class InteractionModel(FrozenCamelModel):
    language_model: LanguageModel
    dialog: Dialog | None = None
    prompts: list[ModelPrompt] | None = None


class Model(FrozenCamelModel):
    """Root of an interaction model file (``models/<locale>.json``)."""

    interaction_model: InteractionModel
