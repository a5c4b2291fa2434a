"""Request envelope sent by Alexa to the skill backend.

Only the parts needed to route a request and read intents, slots, session
and device context are modelled; unknown fields are ignored.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from .errors import NotFoundError
from .schema import CamelModel


class ElementNotFoundError(NotFoundError):
    """An element (intent, slot, session user, ...) is missing from the request."""

    def __init__(self, element: str, name: str = "") -> None:
        self.element = element
        self.name = name
        if name:
            message = f"element '{element}' with name '{name}' was not found in the request"
        else:
            message = f"element '{element}' was not found in the request"
        super().__init__(message)


class NoResolutionMatchError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("no resolution with match")


class RequestType(str, Enum):
    LAUNCH_REQUEST = "LaunchRequest"
    INTENT_REQUEST = "IntentRequest"
    SESSION_ENDED_REQUEST = "SessionEndedRequest"
    CAN_FULFILL_INTENT_REQUEST = "CanFulfillIntentRequest"


class RequestLocale(str, Enum):
    AMERICAN_ENGLISH = "en-US"
    AUSTRALIAN_ENGLISH = "en-AU"
    BRITISH_ENGLISH = "en-GB"
    CANADIAN_ENGLISH = "en-CA"
    CANADIAN_FRENCH = "fr-CA"
    FRENCH = "fr-FR"
    GERMAN = "de-DE"
    INDIAN_ENGLISH = "en-IN"
    ITALIAN = "it-IT"
    JAPANESE = "ja-JP"
    MEXICAN_SPANISH = "es-MX"
    SPANISH = "es-ES"


class ConfirmationStatus(str, Enum):
    NONE = "NONE"
    CONFIRMED = "CONFIRMED"
    DENIED = "DENIED"


class DialogState(str, Enum):
    STARTED = "STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class ResolutionStatusCode(str, Enum):
    MATCH = "ER_SUCCESS_MATCH"
    NO_MATCH = "ER_SUCCESS_NO_MATCH"
    TIMEOUT = "ER_ERROR_TIMEOUT"
    EXCEPTION = "ER_ERROR_EXCEPTION"


class AudioPlayerActivity(str, Enum):
    IDLE = "IDLE"
    PAUSED = "PAUSED"
    PLAYING = "PLAYING"
    BUFFER_UNDERRUN = "BUFFER_UNDERRUN"
    FINISHED = "FINISHED"
    STOPPED = "STOPPED"


# Built-in intents every custom skill should handle
HELP_INTENT = "AMAZON.HelpIntent"
CANCEL_INTENT = "AMAZON.CancelIntent"
STOP_INTENT = "AMAZON.StopIntent"


class AuthorityValueValue(CamelModel):
    name: str = ""
    id: str = ""


class AuthorityValue(CamelModel):
    value: AuthorityValueValue | None = None


class ResolutionStatus(CamelModel):
    code: str = ""


class PerAuthority(CamelModel):
    authority: str = ""
    status: ResolutionStatus | None = None
    values: list[AuthorityValue] | None = None


class Resolutions(CamelModel):
    resolutions_per_authority: list[PerAuthority] = Field(default_factory=list)


class SlotValue(CamelModel):
    type: str = ""
    value: str = ""
    resolutions: Resolutions | None = None


class Slot(CamelModel):
    name: str = ""
    value: str = ""
    resolutions: Resolutions | None = None
    source: str | None = None
    slot_value: SlotValue | None = None

    def resolutions_per_authority(self) -> list[PerAuthority]:
        if self.resolutions is None:
            raise ElementNotFoundError("slot resolutions")
        return self.resolutions.resolutions_per_authority

    def first_authority_with_match(self) -> PerAuthority:
        """Return the first authority whose resolution status is ER_SUCCESS_MATCH."""
        for authority in self.resolutions_per_authority():
            if authority.status is not None and authority.status.code == ResolutionStatusCode.MATCH:
                return authority
        raise NoResolutionMatchError()


class Intent(CamelModel):
    name: str = ""
    slots: dict[str, Slot] | None = None
    confirmation_status: str = ConfirmationStatus.NONE.value


class Request(CamelModel):
    type: str = ""
    request_id: str = ""
    timestamp: str = ""
    locale: str = ""
    intent: Intent | None = None
    reason: str | None = None
    dialog_state: str | None = None


class ContextUser(CamelModel):
    user_id: str = ""
    access_token: str | None = None


class ContextApplication(CamelModel):
    application_id: str = ""


class Session(CamelModel):
    new: bool = False
    session_id: str = ""
    application: ContextApplication | None = None
    attributes: dict[str, Any] | None = None
    user: ContextUser | None = None


class ContextSystemPerson(CamelModel):
    person_id: str = ""
    access_token: str | None = None


class ContextDevice(CamelModel):
    device_id: str | None = None
    supported_interfaces: dict[str, Any] | None = None


class ContextUnit(CamelModel):
    unit_id: str = ""
    persistent_unit_id: str = ""


class ContextSystem(CamelModel):
    api_access_token: str | None = None
    api_endpoint: str | None = None
    user: ContextUser | None = None
    device: ContextDevice | None = None
    application: ContextApplication | None = None
    unit: ContextUnit | None = None
    person: ContextSystemPerson | None = None


class ContextAudioPlayer(CamelModel):
    token: str = ""
    offset_in_milliseconds: int = 0
    player_activity: str = ""


class ViewportExperience(CamelModel):
    arc_minute_width: int = 0
    arc_minute_height: int = 0
    can_rotate: bool = False
    can_resize: bool = False


class ViewportVideo(CamelModel):
    codecs: list[str] = Field(default_factory=list)


class ContextViewport(CamelModel):
    experiences: list[ViewportExperience] | None = None
    mode: str = ""
    shape: str = ""
    pixel_width: int = 0
    pixel_height: int = 0
    current_pixel_width: int = 0
    current_pixel_height: int = 0
    dpi: int = 0
    touch: list[str] = Field(default_factory=list)
    keyboard: list[str] = Field(default_factory=list)
    video: ViewportVideo | None = None


class ContextViewportType(CamelModel):
    id: str = ""
    type: str = ""
    shape: str = ""
    dpi: int = 0
    presentation_type: str = ""
    can_rotate: bool = False
    configuration: dict[str, Any] | None = None


class Context(CamelModel):
    system: ContextSystem | None = Field(default=None, alias="System")
    audio_player: ContextAudioPlayer | None = Field(default=None, alias="AudioPlayer")
    viewport: ContextViewport | None = Field(default=None, alias="Viewport")
    viewports: list[ContextViewportType] | None = Field(default=None, alias="Viewports")


class RequestEnvelope(CamelModel):
    """Top level request document.

    Example:
        >>> envelope = RequestEnvelope.model_validate_json(payload)
        >>> envelope.intent_name
        'SayHello'
    """

    version: str = ""
    session: Session | None = None
    context: Context | None = None
    request: Request | None = None

    def intent(self) -> Intent:
        if self.request is None or self.request.intent is None or not self.request.intent.name:
            raise ElementNotFoundError("intent")
        return self.request.intent

    @property
    def intent_name(self) -> str:
        """Name of the intent, "" for requests without one."""
        if self.request is None or self.request.intent is None:
            return ""
        return self.request.intent.name

    @property
    def is_intent_confirmed(self) -> bool:
        if not self.intent_name:
            return False
        return self.intent().confirmation_status == ConfirmationStatus.CONFIRMED

    def slots(self) -> dict[str, Slot]:
        """Slots of the intent, empty if there is no intent."""
        if not self.intent_name:
            return {}
        return dict(self.intent().slots or {})

    def slot(self, name: str) -> Slot:
        slots = self.intent().slots or {}
        if name not in slots:
            raise ElementNotFoundError("slot", name)
        return slots[name]

    def slot_value(self, name: str) -> str:
        """Value of the named slot, "" if it does not exist."""
        return self.slots().get(name, Slot()).value

    @property
    def request_type(self) -> str:
        return self.request.type if self.request is not None else ""

    @property
    def is_intent_request(self) -> bool:
        return self.request_type == RequestType.INTENT_REQUEST

    @property
    def request_locale(self) -> str:
        return self.request.locale if self.request is not None else ""

    @property
    def dialog_state(self) -> str:
        if self.request is None:
            return ""
        return self.request.dialog_state or ""

    def application_id(self) -> str:
        """Application id from the session, or from the system context for sessionless requests."""
        if self.session is None:
            system = self.context.system if self.context is not None else None
            if system is None or system.application is None:
                raise ElementNotFoundError("Context.System.Application")
            return system.application.application_id
        if self.session.application is None:
            raise ElementNotFoundError("Session.Application")
        return self.session.application.application_id

    @property
    def session_id(self) -> str:
        return self.session.session_id if self.session is not None else ""

    def session_user(self) -> ContextUser:
        if self.session is None or self.session.user is None:
            raise ElementNotFoundError("Session.User")
        return self.session.user

    def system(self) -> ContextSystem:
        if self.context is None or self.context.system is None:
            raise ElementNotFoundError("Context.System")
        return self.context.system

    def context_person(self) -> ContextSystemPerson:
        if self.context is None or self.context.system is None or self.context.system.person is None:
            raise ElementNotFoundError("System.Person")
        return self.context.system.person

    def context_user(self) -> ContextUser:
        if self.context is None or self.context.system is None or self.context.system.user is None:
            raise ElementNotFoundError("System.User")
        return self.context.system.user
