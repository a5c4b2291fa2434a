"""Response envelope returned to Alexa and the builder that assembles it."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Self

from pydantic import Field

from .l10n import substitute
from .request import Intent
from .schema import CamelModel

if TYPE_CHECKING:
    from .application import ApplicationResponse

RESPONSE_VERSION = "1.0"


class SpeechType(str, Enum):
    PLAIN_TEXT = "PlainText"
    SSML = "SSML"


class CardType(str, Enum):
    SIMPLE = "Simple"
    STANDARD = "Standard"


class DirectiveType(str, Enum):
    DIALOG_DELEGATE = "Dialog.Delegate"
    DIALOG_ELICIT_SLOT = "Dialog.ElicitSlot"
    DIALOG_CONFIRM_SLOT = "Dialog.ConfirmSlot"
    DIALOG_CONFIRM_INTENT = "Dialog.ConfirmIntent"


class Stream(CamelModel):
    token: str | None = None
    url: str | None = None
    offset_in_milliseconds: int | None = None


class AudioItem(CamelModel):
    stream: Stream | None = None


class Directive(CamelModel):
    type: DirectiveType | None = None
    slot_to_elicit: str | None = None
    updated_intent: Intent | None = None
    play_behavior: str | None = None
    audio_item: AudioItem | None = None


class OutputSpeech(CamelModel):
    type: SpeechType
    text: str | None = None
    ssml: str | None = None
    play_behavior: str | None = None

    @classmethod
    def from_text(cls, text: str) -> OutputSpeech:
        """PlainText speech, or SSML if text is wrapped in <speak>...</speak>."""
        if text.startswith("<speak>") and text.endswith("</speak>"):
            return cls(type=SpeechType.SSML, ssml=text)
        return cls(type=SpeechType.PLAIN_TEXT, text=text)


class Image(CamelModel):
    small_image_url: str | None = None
    large_image_url: str | None = None


class Card(CamelModel):
    type: CardType
    title: str | None = None
    text: str | None = None
    content: str | None = None
    image: Image | None = None


class Reprompt(CamelModel):
    output_speech: OutputSpeech | None = None


class CanFulfillSlot(CamelModel):
    can_understand: str
    can_fulfill: str


class CanFulfillIntent(CamelModel):
    can_fulfill: str
    slots: dict[str, CanFulfillSlot] = Field(default_factory=dict)


class ResponseBody(CamelModel):
    output_speech: OutputSpeech | None = None
    card: Card | None = None
    reprompt: Reprompt | None = None
    directives: list[Directive] | None = None
    should_end_session: bool = False
    can_fulfill_intent: CanFulfillIntent | None = None


class ResponseEnvelope(CamelModel):
    version: str = RESPONSE_VERSION
    session_attributes: dict[str, Any] | None = None
    response: ResponseBody


class ResponseBuilder:
    """Collects speech, card, directives and session state for one response."""

    def __init__(self) -> None:
        self._speech: OutputSpeech | None = None
        self._reprompt: OutputSpeech | None = None
        self._card: Card | None = None
        self._directives: list[Directive] = []
        self._should_end_session = False
        self._session_attributes: dict[str, Any] | None = None
        self._can_fulfill_intent: CanFulfillIntent | None = None

    def apply(self, response: ApplicationResponse) -> Self:
        """Apply an application level response.

        A response with an image template gets a standard card whose image
        URLs substitute "small" and "large" into the template, otherwise a
        simple card.
        """
        if response.image:
            image = Image(
                small_image_url=substitute(response.image, ["small"])[0],
                large_image_url=substitute(response.image, ["large"])[0],
            )
            self.with_standard_card(response.title, response.text, image)
        else:
            self.with_simple_card(response.title, response.text)
        if response.speech:
            if response.reprompt:
                self.with_reprompt(response.speech)
            else:
                self.with_speech(response.speech)
        return self.with_should_end_session(response.end)

    def with_speech(self, text: str) -> Self:
        self._speech = OutputSpeech.from_text(text)
        return self

    def with_reprompt(self, text: str) -> Self:
        self._reprompt = OutputSpeech.from_text(text)
        return self

    def with_simple_card(self, title: str, text: str) -> Self:
        self._card = Card(type=CardType.SIMPLE, title=title, content=text)
        return self

    def with_standard_card(self, title: str, text: str, image: Image | None = None) -> Self:
        self._card = Card(type=CardType.STANDARD, title=title, text=text, image=image)
        return self

    def with_should_end_session(self, end: bool) -> Self:
        self._should_end_session = end
        return self

    def with_session_attributes(self, attributes: dict[str, Any]) -> Self:
        self._session_attributes = attributes
        return self

    def with_can_fulfill_intent(self, can_fulfill: CanFulfillIntent) -> Self:
        self._can_fulfill_intent = can_fulfill
        return self

    def add_directive(self, directive: Directive) -> Self:
        self._directives.append(directive)
        return self

    def build(self) -> ResponseEnvelope:
        return ResponseEnvelope(
            session_attributes=self._session_attributes,
            response=ResponseBody(
                output_speech=self._speech,
                card=self._card,
                reprompt=Reprompt(output_speech=self._reprompt) if self._reprompt is not None else None,
                directives=list(self._directives) or None,
                should_end_session=self._should_end_session,
                can_fulfill_intent=self._can_fulfill_intent,
            ),
        )
