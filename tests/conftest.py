import random

import pytest

from alexa_skill_commons.l10n import Locale, LocaleRegistry, keys

EN_US_SNIPPETS = {
    keys.KEY_SKILL_NAME: ["Daily News"],
    keys.KEY_SKILL_SUMMARY: ["Headlines in a minute"],
    keys.KEY_SKILL_DESCRIPTION: ["Reads the latest headlines"],
    keys.KEY_SKILL_EXAMPLE_PHRASES: ["Alexa, open daily news", "Alexa, ask daily news for sports"],
    keys.KEY_SKILL_KEYWORDS: ["news", "headlines"],
    keys.KEY_SKILL_SMALL_ICON_URI: ["https://example.com/small.png"],
    keys.KEY_SKILL_LARGE_ICON_URI: ["https://example.com/large.png"],
    keys.KEY_SKILL_PRIVACY_POLICY_URL: ["https://example.com/privacy"],
    keys.KEY_SKILL_TESTING_INSTRUCTIONS: ["Ask for the news"],
    keys.KEY_SKILL_INVOCATION: ["daily news"],
    "Greeting": ["Hello %s", "Hi %s", "Welcome %s"],
}

DE_DE_SNIPPETS = {
    keys.KEY_SKILL_NAME: ["Tagesnachrichten"],
    keys.KEY_SKILL_SUMMARY: ["Schlagzeilen in einer Minute"],
    keys.KEY_SKILL_DESCRIPTION: ["Liest die neuesten Schlagzeilen vor"],
    keys.KEY_SKILL_SMALL_ICON_URI: ["https://example.com/small.png"],
    keys.KEY_SKILL_LARGE_ICON_URI: ["https://example.com/large.png"],
    keys.KEY_SKILL_INVOCATION: ["tages nachrichten"],
    "Greeting": ["Hallo %s"],
}


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def en_us(rng):
    return Locale("en-US", EN_US_SNIPPETS, rng=rng)


@pytest.fixture
def registry(en_us):
    """Registry with en-US (default) and de-DE."""
    reg = LocaleRegistry()
    reg.register(en_us)
    reg.register(Locale("de-DE", DE_DE_SNIPPETS))
    return reg
