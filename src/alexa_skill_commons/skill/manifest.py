"""Skill manifest document (``skill.json``).

See https://developer.amazon.com/docs/smapi/skill-manifest.html
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from alexa_skill_commons.schema import FrozenCamelModel


class Country(str, Enum):
    AUSTRALIA = "AU"
    CANADA = "CA"
    GERMANY = "DE"
    FRANCE = "FR"
    GREAT_BRITAIN = "GB"
    INDIA = "IN"
    ITALY = "IT"
    JAPAN = "JP"
    UNITED_STATES = "US"


class Category(str, Enum):
    """Skill category used for filtering in the Alexa app."""

    ALARMS_AND_CLOCKS = "ALARMS_AND_CLOCKS"
    ASTROLOGY = "ASTROLOGY"
    BUSINESS_AND_FINANCE = "BUSINESS_AND_FINANCE"
    CALCULATORS = "CALCULATORS"
    CALENDARS_AND_REMINDERS = "CALENDARS_AND_REMINDERS"
    CHILDRENS_EDUCATION_AND_REFERENCE = "CHILDRENS_EDUCATION_AND_REFERENCE"
    CHILDRENS_GAMES = "CHILDRENS_GAMES"
    CHILDRENS_MUSIC_AND_AUDIO = "CHILDRENS_MUSIC_AND_AUDIO"
    CHILDRENS_NOVELTY_AND_HUMOR = "CHILDRENS_NOVELTY_AND_HUMOR"
    COMMUNICATION = "COMMUNICATION"
    CONNECTED_CAR = "CONNECTED_CAR"
    COOKING_AND_RECIPE = "COOKING_AND_RECIPE"
    CURRENCY_GUIDES_AND_CONVERTERS = "CURRENCY_GUIDES_AND_CONVERTERS"
    DATING = "DATING"
    DELIVERY_AND_TAKEOUT = "DELIVERY_AND_TAKEOUT"
    DEVICE_TRACKING = "DEVICE_TRACKING"
    EDUCATION_AND_REFERENCE = "EDUCATION_AND_REFERENCE"
    EVENT_FINDERS = "EVENT_FINDERS"
    EXERCISE_AND_WORKOUT = "EXERCISE_AND_WORKOUT"
    FASHION_AND_STYLE = "FASHION_AND_STYLE"
    FLIGHT_FINDERS = "FLIGHT_FINDERS"
    FRIENDS_AND_FAMILY = "FRIENDS_AND_FAMILY"
    GAME_INFO_AND_ACCESSORY = "GAME_INFO_AND_ACCESSORY"
    GAMES = "GAMES"
    HEALTH_AND_FITNESS = "HEALTH_AND_FITNESS"
    HOTEL_FINDERS = "HOTEL_FINDERS"
    KNOWLEDGE_AND_TRIVIA = "KNOWLEDGE_AND_TRIVIA"
    MOVIE_AND_TV_KNOWLEDGE_AND_TRIVIA = "MOVIE_AND_TV_KNOWLEDGE_AND_TRIVIA"
    MOVIE_INFO_AND_REVIEWS = "MOVIE_INFO_AND_REVIEWS"
    MOVIE_SHOWTIMES = "MOVIE_SHOWTIMES"
    MUSIC_AND_AUDIO_ACCESSORIES = "MUSIC_AND_AUDIO_ACCESSORIES"
    MUSIC_AND_AUDIO_KNOWLEDGE_AND_TRIVIA = "MUSIC_AND_AUDIO_KNOWLEDGE_AND_TRIVIA"
    MUSIC_INFO_REVIEWS_AND_RECOGNITION_SERVICE = "MUSIC_INFO_REVIEWS_AND_RECOGNITION_SERVICE"
    NAVIGATION_AND_TRIP_PLANNER = "NAVIGATION_AND_TRIP_PLANNER"
    NEWS = "NEWS"
    NOVELTY = "NOVELTY"
    ORGANIZERS_AND_ASSISTANTS = "ORGANIZERS_AND_ASSISTANTS"
    PETS_AND_ANIMAL = "PETS_AND_ANIMAL"
    PODCAST = "PODCAST"
    PUBLIC_TRANSPORTATION = "PUBLIC_TRANSPORTATION"
    RELIGION_AND_SPIRITUALITY = "RELIGION_AND_SPIRITUALITY"
    RESTAURANT_BOOKING_INFO_AND_REVIEW = "RESTAURANT_BOOKING_INFO_AND_REVIEW"
    SCHOOLS = "SCHOOLS"
    SCORE_KEEPING = "SCORE_KEEPING"
    SELF_IMPROVEMENT = "SELF_IMPROVEMENT"
    SHOPPING = "SHOPPING"
    SMART_HOME = "SMART_HOME"
    SOCIAL_NETWORKING = "SOCIAL_NETWORKING"
    SPORTS_GAMES = "SPORTS_GAMES"
    SPORTS_NEWS = "SPORTS_NEWS"
    STREAMING_SERVICE = "STREAMING_SERVICE"
    TAXI_AND_RIDESHARING = "TAXI_AND_RIDESHARING"
    TO_DO_LISTS_AND_NOTES = "TO_DO_LISTS_AND_NOTES"
    TRANSLATORS = "TRANSLATORS"
    TV_GUIDES = "TV_GUIDES"
    UNIT_CONVERTERS = "UNIT_CONVERTERS"
    WEATHER = "WEATHER"
    WINE_AND_BEVERAGE = "WINE_AND_BEVERAGE"
    ZIP_CODE_LOOKUP = "ZIP_CODE_LOOKUP"


class Region(str, Enum):
    NORTH_AMERICA = "NA"
    EUROPE = "EU"
    FAR_EAST = "FE"


class InterfaceType(str, Enum):
    ALEXA_PRESENTATION_APL = "ALEXA_PRESENTATION_APL"
    AUDIO_PLAYER = "AUDIO_PLAYER"
    CAN_FULFILL_INTENT_REQUEST = "CAN_FULFILL_INTENT_REQUEST"
    GADGET_CONTROLLER = "GADGET_CONTROLLER"
    GAME_ENGINE = "GAME_ENGINE"
    RENDER_TEMPLATE = "RENDER_TEMPLATE"
    VIDEO_APP = "VIDEO_APP"


class PrivacyFlag(str, Enum):
    IS_EXPORT_COMPLIANT = "IsExportCompliant"
    CONTAINS_ADS = "ContainsAds"
    ALLOWS_PURCHASES = "AllowsPurchases"
    USES_PERSONAL_INFO = "UsesPersonalInfo"
    IS_CHILD_DIRECTED = "IsChildDirected"


class LocaleDef(FrozenCamelModel):
    """Publishing information shown in the skill store for one locale."""

    name: str
    description: str
    summary: str
    example_phrases: list[str]
    keywords: list[str]
    small_icon_uri: str
    large_icon_uri: str


class Publishing(FrozenCamelModel):
    locales: dict[str, LocaleDef]
    is_available_worldwide: bool
    category: Category
    distribution_countries: list[str] | None = None
    testing_instructions: str


class Endpoint(FrozenCamelModel):
    uri: str
    ssl_certificate_type: str | None = None


class RegionDef(FrozenCamelModel):
    endpoint: Endpoint


class Interface(FrozenCamelModel):
    type: InterfaceType


class Custom(FrozenCamelModel):
    endpoint: Endpoint | None = None
    regions: dict[Region, RegionDef] | None = None
    interfaces: list[Interface] | None = None


class Apis(FrozenCamelModel):
    custom: Custom | None = None


class Permission(FrozenCamelModel):
    name: str


class PrivacyLocaleDef(FrozenCamelModel):
    privacy_policy_url: str | None = None
    terms_of_use: str | None = None


class Privacy(FrozenCamelModel):
    is_export_compliant: bool = False
    contains_ads: bool = False
    allows_purchases: bool = False
    uses_personal_info: bool = False
    is_child_directed: bool = False
    locales: dict[str, PrivacyLocaleDef] | None = None


class Manifest(FrozenCamelModel):
    manifest_version: str
    publishing_information: Publishing
    apis: Apis | None = None
    permissions: list[Permission] = Field(default_factory=list)
    privacy_and_compliance: Privacy


class Skill(FrozenCamelModel):
    """Root of the skill manifest file."""

    manifest: Manifest
