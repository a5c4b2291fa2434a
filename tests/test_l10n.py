import random
import threading

import pytest

from alexa_skill_commons.errors import DuplicateNameError, NotFoundError
from alexa_skill_commons.l10n import (
    Locale,
    LocaleRegistry,
    MissingPlaceholderError,
    NoTranslationError,
    substitute,
)

GREETINGS = ["Hello %s", "Hi %s", "Welcome %s"]


class TestLocaleRegistry:
    """Test registration, resolution and the default locale."""

    def test_empty_registry_has_no_default(self):
        """Test that an empty registry returns None as default."""
        registry = LocaleRegistry()
        assert registry.default is None
        assert registry.get_default() is None
        assert len(registry) == 0

    def test_first_registered_becomes_default(self):
        """Test that the first locale becomes default without as_default."""
        registry = LocaleRegistry()
        registry.register(Locale("en-US"))
        registry.register(Locale("de-DE"))
        assert registry.default.name == "en-US"

    def test_register_as_default(self):
        """Test that as_default claims the default."""
        registry = LocaleRegistry()
        registry.register(Locale("en-US"))
        registry.register(Locale("de-DE"), as_default=True)
        assert registry.default.name == "de-DE"

    def test_duplicate_registration_fails(self):
        """Test that a name can only be registered once and the count is unchanged."""
        registry = LocaleRegistry()
        registry.register(Locale("en-US"))
        with pytest.raises(DuplicateNameError, match="locale en-US already registered"):
            registry.register(Locale("en-US"))
        assert len(registry) == 1

    def test_register_without_name_fails(self):
        """Test that a locale needs a name."""
        with pytest.raises(DuplicateNameError, match="no name"):
            LocaleRegistry().register(Locale(""))

    def test_resolve(self, registry):
        """Test resolving registered and unknown locales."""
        assert registry.resolve("de-DE").name == "de-DE"
        with pytest.raises(NotFoundError, match="locale 'fr-FR' not found"):
            registry.resolve("fr-FR")

    def test_set_default(self, registry):
        """Test changing the default to a registered locale only."""
        registry.set_default("de-DE")
        assert registry.default.name == "de-DE"
        with pytest.raises(NotFoundError):
            registry.set_default("fr-FR")
        assert registry.default.name == "de-DE"

    def test_locales_in_registration_order(self, registry):
        """Test that locales keep registration order and the snapshot is read-only."""
        assert list(registry.locales) == ["en-US", "de-DE"]
        assert [loc.name for loc in registry] == ["en-US", "de-DE"]
        assert "en-US" in registry
        with pytest.raises(TypeError):
            registry.locales["fr-FR"] = Locale("fr-FR")

    def test_concurrent_registration(self):
        """Test that concurrent registration keeps every locale exactly once."""
        registry = LocaleRegistry()
        names = [f"xx-{i:02d}" for i in range(20)]
        threads = [threading.Thread(target=registry.register, args=(Locale(name),)) for name in names]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert sorted(registry.locales) == names


class TestLocaleLookup:
    """Test get, get_any and get_all."""

    def test_get_returns_first(self, en_us):
        assert en_us.get("Greeting", "Ann") == "Hello Ann"
        assert en_us.errors == []

    def test_get_all_keeps_order(self, en_us):
        """Test that get_all substitutes every variant in stored order."""
        assert en_us.get_all("Greeting", "Ann") == ["Hello Ann", "Hi Ann", "Welcome Ann"]

    def test_get_any_uses_injected_random(self):
        """Test that get_any is reproducible with a seeded generator."""
        expected = random.Random(7).choice(GREETINGS) % "Ann"
        loc = Locale("en-US", {"Greeting": GREETINGS}, rng=random.Random(7))
        assert loc.get_any("Greeting", "Ann") == expected

    def test_get_any_picks_every_variant(self):
        """Test that get_any only returns configured variants and eventually all of them."""
        loc = Locale("en-US", {"Greeting": GREETINGS}, rng=random.Random(1))
        picked = {loc.get_any("Greeting", "Ann") for _ in range(200)}
        assert picked == {text % "Ann" for text in GREETINGS}

    def test_get_any_single_variant(self):
        """Test that a single variant is returned without consulting the generator."""

        class FailingRandom(random.Random):
            def choice(self, seq):
                raise AssertionError("choice must not be called")

        loc = Locale("en-US", {"Only": ["just me"]}, rng=FailingRandom())
        assert loc.get_any("Only") == "just me"

    @pytest.mark.parametrize("method", ["get", "get_any"])
    def test_missing_key_returns_empty_string(self, en_us, method):
        """Test that every lookup of a missing key appends exactly one error."""
        assert getattr(en_us, method)("Unknown") == ""
        assert getattr(en_us, method)("Unknown") == ""
        assert en_us.errors == [NoTranslationError("en-US", "Unknown"), NoTranslationError("en-US", "Unknown")]

    def test_missing_key_get_all(self, en_us):
        assert en_us.get_all("Unknown") == []
        assert len(en_us.errors) == 1

    def test_empty_list_counts_as_missing(self):
        loc = Locale("en-US", {"Empty": []})
        assert loc.get("Empty") == ""
        assert isinstance(loc.errors[0], NoTranslationError)
        assert "Empty" not in loc

    def test_no_translation_message(self, en_us):
        en_us.get("Unknown")
        assert str(en_us.errors[0]) == "locale en-US: no translation for key 'Unknown'"

    def test_reset_errors(self, en_us):
        en_us.get("Unknown")
        en_us.reset_errors()
        assert en_us.errors == []

    def test_set_replaces_translations(self, en_us):
        en_us.set("Greeting", ["Howdy %s"])
        assert en_us.get_all("Greeting", "Ann") == ["Howdy Ann"]
        assert en_us.snippets["Greeting"] == ["Howdy %s"]

    def test_errors_snapshot(self, en_us):
        """Test that the errors property returns a copy."""
        en_us.get("Unknown")
        en_us.errors.clear()
        assert len(en_us.errors) == 1


class TestPlaceholders:
    """Test substitution and missing placeholder accounting."""

    def test_missing_argument_is_recorded(self, en_us):
        """Test that a placeholder without argument stays verbatim and is reported."""
        assert en_us.get("Greeting") == "Hello %s"
        assert en_us.errors == [MissingPlaceholderError("en-US", "Greeting", "%s")]
        assert str(en_us.errors[0]) == "locale en-US: key 'Greeting' is missing placeholder '%s' in translation"

    def test_missing_argument_per_text(self, en_us):
        """Test that get_all reports one error per affected translation."""
        en_us.get_all("Greeting")
        assert len(en_us.errors) == len(GREETINGS)
        assert all(isinstance(err, MissingPlaceholderError) for err in en_us.errors)

    def test_message_without_placeholder(self):
        err = MissingPlaceholderError("en-US", "Greeting")
        assert str(err) == "locale en-US: key 'Greeting' is missing a placeholder in translation"

    def test_surplus_arguments_ignored(self, en_us):
        assert en_us.get("Greeting", "Ann", "Bob") == "Hello Ann"
        assert en_us.errors == []

    def test_substitute_formats(self):
        assert substitute("%d of %05.1f%%", [3, 2.5]) == ("3 of 002.5%", "")

    def test_substitute_type_mismatch_falls_back_to_str(self):
        assert substitute("count: %d", ["many"]) == ("count: many", "")

    def test_substitute_reports_first_missing(self):
        assert substitute("%s and %d", ["one"]) == ("one and %d", "%d")

    def test_brace_samples_untouched(self):
        """Test that slot references in samples survive substitution."""
        loc = Locale("en-US", {"Play_Samples": ["play {Song} by {Artist}"]})
        assert loc.get_all("Play_Samples") == ["play {Song} by {Artist}"]
        assert loc.errors == []

    def test_percent_value_with_v(self):
        assert substitute("value %v", [[1, 2]]) == ("value [1, 2]", "")
