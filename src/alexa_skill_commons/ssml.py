"""Speech Synthesis Markup Language helpers.

Every helper returns a markup fragment; wrap the final text with ``speak``
to have ResponseBuilder send it as SSML.

See https://developer.amazon.com/docs/custom-skills/speech-synthesis-markup-language-ssml-reference.html
"""

from __future__ import annotations

from enum import Enum


class AmazonDomain(str, Enum):
    CONVERSATIONAL = "conversational"
    LONG_FORM = "long-form"
    MUSIC = "music"
    NEWS = "news"
    FUN = "fun"


class AmazonEffect(str, Enum):
    WHISPERED = "whispered"


class AmazonEmotion(str, Enum):
    EXCITED = "excited"
    DISAPPOINTED = "disappointed"


class EmotionIntensity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class BreakStrength(str, Enum):
    NONE = "none"
    X_WEAK = "x-weak"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    X_STRONG = "x-strong"


class EmphasisLevel(str, Enum):
    STRONG = "strong"
    MODERATE = "moderate"
    REDUCED = "reduced"


class PhonemeAlphabet(str, Enum):
    IPA = "ipa"
    X_SAMPA = "x-sampa"


class ProsodyRate(str, Enum):
    X_SLOW = "x-slow"
    SLOW = "slow"
    MEDIUM = "medium"
    FAST = "fast"
    X_FAST = "x-fast"


class ProsodyPitch(str, Enum):
    X_LOW = "x-low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    X_HIGH = "x-high"


class ProsodyVolume(str, Enum):
    SILENT = "silent"
    X_SOFT = "x-soft"
    SOFT = "soft"
    MEDIUM = "medium"
    LOUD = "loud"
    X_LOUD = "x-loud"


class InterpretAs(str, Enum):
    CHARACTERS = "characters"
    CARDINAL = "cardinal"
    ORDINAL = "ordinal"
    DIGITS = "digits"
    FRACTION = "fraction"
    UNIT = "unit"
    DATE = "date"
    TIME = "time"
    TELEPHONE = "telephone"
    ADDRESS = "address"
    INTERJECTION = "interjection"
    EXPLETIVE = "expletive"


class PollyVoice(str, Enum):
    # en-US
    IVY = "Ivy"
    JOANNA = "Joanna"
    JUSTIN = "Justin"
    KENDRA = "Kendra"
    KIMBERLY = "Kimberly"
    MATTHEW = "Matthew"
    SALLI = "Salli"
    # en-AU
    NICOLE = "Nicole"
    RUSSEL = "Russel"
    # en-GB
    AMY = "Amy"
    BRIAN = "Brian"
    EMMA = "Emma"
    # en-IN, hi-IN
    ADITI = "Aditi"
    RAVEENA = "Raveena"
    # fr-CA, fr-FR
    CHANTAL = "Chantal"
    CELINE = "Celine"
    LEA = "Lea"
    MATHIEU = "Mathieu"
    # de-DE
    HANS = "Hans"
    MARLENE = "Marlene"
    VICKI = "Vicki"
    # it-IT
    CARLA = "Carla"
    GIORGIO = "Giorgio"
    BIANCA = "Bianca"
    # ja-JP
    MIZUKI = "Mizuki"
    TAKUMI = "Takumi"
    # pt-BR
    VITORIA = "Vitoria"
    CAMILA = "Camila"
    RICARDO = "Ricardo"
    # es-US
    PENELOPE = "Penelope"
    LUPE = "Lupe"
    MIGUEL = "Miguel"
    # es-ES
    CONCHITA = "Conchita"
    ENRIQUE = "Enrique"
    LUCIA = "Lucia"
    # es-MX
    MIA = "Mia"


class AmazonRole(str, Enum):
    VB = "amazon:VB"
    VBD = "amazon:VBD"
    NN = "amazon:NN"
    SENSE_1 = "amazon:SENSE-1"


def _attrs(**attributes: str | Enum | None) -> str:
    rendered = []
    for name, value in attributes.items():
        if value:
            text = value.value if isinstance(value, Enum) else value
            rendered.append(f' {name.replace("_", "-")}="{text}"')
    return "".join(rendered)


def speak(text: str) -> str:
    return f"<speak>{text}</speak>"


def use_domain(domain: AmazonDomain, text: str) -> str:
    return f"<amazon:domain{_attrs(name=domain)}>{text}</amazon:domain>"


def use_effect(effect: AmazonEffect, text: str) -> str:
    return f"<amazon:effect{_attrs(name=effect)}>{text}</amazon:effect>"


def use_emotion(emotion: AmazonEmotion, intensity: EmotionIntensity, text: str) -> str:
    return f"<amazon:emotion{_attrs(name=emotion, intensity=intensity)}>{text}</amazon:emotion>"


def use_audio(src: str) -> str:
    return f'<audio src="{src}"/>'


def use_break(strength: BreakStrength | None = None, time: str | None = None) -> str:
    """Pause, e.g. ``use_break(time="500ms")``; omitted attributes are left out."""
    return f"<break{_attrs(strength=strength, time=time)}/>"


def use_emphasis(level: EmphasisLevel | None, text: str) -> str:
    return f"<emphasis{_attrs(level=level)}>{text}</emphasis>"


def use_lang(language: str, text: str) -> str:
    return f'<lang xml:lang="{language}">{text}</lang>'


def p(text: str) -> str:
    return f"<p>{text}</p>"


def s(text: str) -> str:
    return f"<s>{text}</s>"


def phoneme(alphabet: PhonemeAlphabet, ph: str, text: str) -> str:
    return f"<phoneme{_attrs(alphabet=alphabet, ph=ph)}>{text}</phoneme>"


def prosody(
    text: str,
    rate: ProsodyRate | str | None = None,
    pitch: ProsodyPitch | str | None = None,
    volume: ProsodyVolume | str | None = None,
) -> str:
    """Change rate, pitch or volume; relative values like "+10%" are accepted as strings."""
    return f"<prosody{_attrs(rate=rate, pitch=pitch, volume=volume)}>{text}</prosody>"


def say_as(interpret_as: InterpretAs, text: str, date_format: str | None = None) -> str:
    """Interpret text, e.g. as digits; ``date_format`` only applies to dates."""
    fmt = date_format if InterpretAs(interpret_as) is InterpretAs.DATE else None
    return f"<say-as{_attrs(interpret_as=interpret_as, format=fmt)}>{text}</say-as>"


def sub(alias: str, text: str) -> str:
    return f"<sub{_attrs(alias=alias)}>{text}</sub>"


def use_voice(voice: PollyVoice, text: str) -> str:
    return f"<voice{_attrs(name=voice)}>{text}</voice>"


def use_voice_lang(voice: PollyVoice, language: str, text: str) -> str:
    return use_voice(voice, use_lang(language, text))


def w(role: AmazonRole, text: str) -> str:
    return f"<w{_attrs(role=role)}>{text}</w>"
