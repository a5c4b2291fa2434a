"""Error taxonomy shared by the registry, the builders and the request helpers."""


class SkillError(Exception):
    """Base class for errors raised by the skill builders."""


class NotFoundError(SkillError, LookupError):
    """A referenced locale, intent, slot, prompt or request element does not exist."""


class ConfigurationError(SkillError, ValueError):
    """A builder received invalid configuration or produced an invalid artifact."""


class DuplicateNameError(ConfigurationError):
    """A name that must be unique was registered twice (or is empty)."""
