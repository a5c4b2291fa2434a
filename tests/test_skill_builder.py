import pytest

from alexa_skill_commons import ManifestSettings
from alexa_skill_commons.errors import ConfigurationError, DuplicateNameError, NotFoundError
from alexa_skill_commons.l10n import Locale, keys
from alexa_skill_commons.skill import (
    Category,
    Country,
    InterfaceType,
    ModelBuilder,
    PrivacyFlag,
    Region,
    SkillBuilder,
    SkillLocaleBuilder,
)


@pytest.fixture
def news_skill(registry):
    return SkillBuilder(registry).with_category(Category.NEWS)


class TestSkillLocaleBuilder:
    """Test publishing and privacy entries for one locale."""

    def test_publishing_locale(self, registry):
        entry = SkillLocaleBuilder("en-US", registry).build_publishing_locale()
        assert entry.to_dict() == {
            "name": "Daily News",
            "summary": "Headlines in a minute",
            "description": "Reads the latest headlines",
            "examplePhrases": ["Alexa, open daily news", "Alexa, ask daily news for sports"],
            "keywords": ["news", "headlines"],
            "smallIconUri": "https://example.com/small.png",
            "largeIconUri": "https://example.com/large.png",
        }

    def test_own_registry_with_locale_setters(self):
        builder = (
            SkillLocaleBuilder("en-GB")
            .with_locale_name("Quiz")
            .with_locale_summary("A quiz")
            .with_locale_description("Asks questions")
            .with_locale_small_icon("https://example.com/s.png")
            .with_locale_large_icon("https://example.com/l.png")
            .with_locale_examples(["Alexa, open quiz"])
        )
        entry = builder.build_publishing_locale()
        assert entry.name == "Quiz"
        assert entry.example_phrases == ["Alexa, open quiz"]
        assert entry.keywords == []

    def test_missing_required_field(self, registry):
        registry.resolve("de-DE").set(keys.KEY_SKILL_SUMMARY, [])
        with pytest.raises(ConfigurationError, match="but for 'de-DE' at least one was empty"):
            SkillLocaleBuilder("de-DE", registry).build_publishing_locale()

    def test_rebound_key(self, registry):
        registry.resolve("en-US").set("Alt_Name", ["Morning News"])
        entry = SkillLocaleBuilder("en-US", registry).with_name("Alt_Name").build_publishing_locale()
        assert entry.name == "Morning News"

    def test_too_many_example_phrases(self, registry):
        registry.resolve("en-US").set(keys.KEY_SKILL_EXAMPLE_PHRASES, ["a", "b", "c", "d"])
        with pytest.raises(ConfigurationError, match="examplePhrases"):
            SkillLocaleBuilder("en-US", registry).build_publishing_locale()

    def test_keyword_limit_from_settings(self, registry):
        settings = ManifestSettings(max_keywords=1)
        with pytest.raises(ConfigurationError, match="only 1 keywords are allowed"):
            SkillLocaleBuilder("en-US", registry, settings).build_publishing_locale()

    def test_privacy_locale(self, registry):
        entry = SkillLocaleBuilder("en-US", registry).build_privacy_locale()
        assert entry.to_dict() == {"privacyPolicyUrl": "https://example.com/privacy"}

    def test_terms_of_use_rejected(self, registry):
        builder = SkillLocaleBuilder("en-US", registry).with_locale_terms_url("https://example.com/terms")
        with pytest.raises(ConfigurationError, match="'termsOfUse' makes Skill deployment fail! \\(en-US\\)"):
            builder.build_privacy_locale()

    def test_terms_of_use_allowed_by_settings(self, registry):
        settings = ManifestSettings(allow_terms_of_use=True)
        builder = SkillLocaleBuilder("en-US", registry, settings).with_locale_terms_url("https://example.com/terms")
        assert builder.build_privacy_locale().terms_of_use == "https://example.com/terms"

    def test_unknown_locale_recorded(self, registry):
        builder = SkillLocaleBuilder("fr-FR", registry).with_locale_name("Nouvelles")
        assert isinstance(builder.error, NotFoundError)
        with pytest.raises(NotFoundError):
            builder.build_publishing_locale()


class TestSkillBuilder:
    """Test manifest assembly across locales."""

    def test_build_manifest(self, news_skill):
        manifest = news_skill.build().to_dict()["manifest"]
        assert manifest["manifestVersion"] == "1.0"
        publishing = manifest["publishingInformation"]
        assert list(publishing["locales"]) == ["en-US", "de-DE"]
        assert publishing["category"] == "NEWS"
        assert publishing["isAvailableWorldwide"] is True
        assert "distributionCountries" not in publishing
        assert publishing["testingInstructions"] == "Ask for the news"
        assert "apis" not in manifest
        assert manifest["permissions"] == []
        assert manifest["privacyAndCompliance"]["isExportCompliant"] is False
        assert manifest["privacyAndCompliance"]["locales"]["de-DE"] == {}

    def test_countries(self, news_skill):
        news_skill.with_countries([Country.UNITED_STATES]).add_country("GB").add_countries([Country.GERMANY])
        publishing = news_skill.build().manifest.publishing_information
        assert publishing.distribution_countries == ["US", "GB", "DE"]
        assert publishing.is_available_worldwide is False

    def test_privacy_flags(self, news_skill):
        news_skill.with_privacy_flag(PrivacyFlag.IS_EXPORT_COMPLIANT, True).with_privacy_flag("ContainsAds", True)
        privacy = news_skill.build().manifest.privacy_and_compliance
        assert privacy.is_export_compliant is True
        assert privacy.contains_ads is True
        assert privacy.is_child_directed is False

    def test_apis(self, news_skill):
        news_skill.with_endpoint("arn:aws:lambda:us-east-1:123:function:news")
        news_skill.with_region_endpoint(Region.EUROPE, "https://eu.example.com", "Wildcard")
        news_skill.add_interface(InterfaceType.AUDIO_PLAYER).add_permission("alexa::devices:all:notifications:write")
        manifest = news_skill.build().to_dict()["manifest"]
        assert manifest["apis"]["custom"] == {
            "endpoint": {"uri": "arn:aws:lambda:us-east-1:123:function:news"},
            "regions": {"EU": {"endpoint": {"uri": "https://eu.example.com", "sslCertificateType": "Wildcard"}}},
            "interfaces": [{"type": "AUDIO_PLAYER"}],
        }
        assert manifest["permissions"] == [{"name": "alexa::devices:all:notifications:write"}]

    def test_settings_manifest_version(self, registry):
        skill = SkillBuilder(registry, ManifestSettings(manifest_version="2.0")).with_category(Category.NEWS)
        assert skill.build().manifest.manifest_version == "2.0"

    def test_no_locales(self):
        with pytest.raises(NotFoundError, match="no locales"):
            SkillBuilder().with_category(Category.NEWS).build()

    def test_category_required(self, registry):
        with pytest.raises(ConfigurationError, match="skill category is required"):
            SkillBuilder(registry).build()

    def test_unsupported_category(self, registry):
        skill = SkillBuilder(registry).with_category("KNITTING")
        with pytest.raises(ConfigurationError, match="unsupported category: KNITTING"):
            skill.build()

    def test_testing_instructions_required(self, news_skill):
        news_skill.with_default_locale("de-DE")
        with pytest.raises(ConfigurationError, match="testing instructions are required"):
            news_skill.build()

    def test_default_locale_testing_instructions(self, news_skill):
        news_skill.with_default_locale("de-DE").with_default_locale_testing_instructions("Frag nach Nachrichten")
        assert news_skill.build().manifest.publishing_information.testing_instructions == "Frag nach Nachrichten"

    def test_testing_instructions_without_default(self):
        skill = SkillBuilder().with_default_locale_testing_instructions("Ask")
        assert isinstance(skill.error, NotFoundError)

    def test_add_locale(self):
        skill = SkillBuilder().with_category(Category.NEWS).add_locale("en-US").add_locale("de-DE", as_default=True)
        assert skill.registry.default.name == "de-DE"
        skill.with_default_locale_testing_instructions("Frag nach Nachrichten")
        skill.locale("en-US").with_locale_name("News").with_locale_summary("s").with_locale_description("d")
        skill.locale("en-US").with_locale_small_icon("https://s").with_locale_large_icon("https://l")
        skill.locale("de-DE").with_locale_name("Nachrichten").with_locale_summary("s").with_locale_description("d")
        skill.locale("de-DE").with_locale_small_icon("https://s").with_locale_large_icon("https://l")
        locales = skill.build().manifest.publishing_information.locales
        assert locales["de-DE"].name == "Nachrichten"

    def test_add_duplicate_locale(self, registry):
        skill = SkillBuilder(registry).add_locale("en-US")
        assert isinstance(skill.error, DuplicateNameError)

    def test_unknown_locale_returns_detached_builder(self, news_skill):
        """Test that chaining on an unknown locale does not raise but fails the build."""
        news_skill.locale("fr-FR").with_locale_name("Nouvelles")
        assert "fr-FR" not in news_skill.registry
        with pytest.raises(NotFoundError, match="fr-FR"):
            news_skill.build()

    def test_locale_failure_propagates(self, news_skill):
        news_skill.registry.resolve("de-DE").set(keys.KEY_SKILL_NAME, [])
        with pytest.raises(ConfigurationError, match="de-DE"):
            news_skill.build()

    def test_model(self, news_skill):
        news_skill.with_model()
        model = news_skill.model()
        assert model.registry is news_skill.registry
        model.with_intent("AMAZON.HelpIntent")
        models = news_skill.build_models()
        assert models["en-US"].interaction_model.language_model.invocation_name == "daily news"
        assert models["de-DE"].interaction_model.language_model.invocation_name == "tages nachrichten"

    def test_model_missing(self, news_skill):
        with pytest.raises(NotFoundError, match="no model to build"):
            news_skill.build_models()
        assert isinstance(news_skill.model(), ModelBuilder)
        assert isinstance(news_skill.error, NotFoundError)

    def test_registry_switch_propagates(self, registry):
        skill = SkillBuilder().with_category(Category.NEWS).with_model()
        skill.with_locale_registry(registry)
        assert skill.model().registry is registry
        assert skill.build().manifest.publishing_information.locales["en-US"].name == "Daily News"

    def test_registry_from_directly_registered_locale(self, news_skill):
        news_skill.registry.register(Locale("en-GB", {keys.KEY_SKILL_NAME: ["News"]}))
        assert news_skill.locale("en-GB").locale == "en-GB"
        assert news_skill.error is None

    def test_limits_at_maximum(self, news_skill):
        phrases = ["Alexa, open daily news", "Alexa, ask daily news", "Alexa, news"]
        news_skill.locale("en-US").with_locale_examples(phrases)
        news_skill.locale("en-US").with_locale_keywords(["news", "headlines", "sports"])
        locale = news_skill.build().manifest.publishing_information.locales["en-US"]
        assert len(locale.example_phrases) == 3
        assert locale.keywords == ["news", "headlines", "sports"]

    def test_too_many_keywords(self, news_skill):
        news_skill.locale("en-US").with_locale_keywords(["news", "headlines", "sports", "weather"])
        with pytest.raises(ConfigurationError, match="only 3 keywords are allowed \\(en-US\\)"):
            news_skill.build()

    def test_too_many_example_phrases(self, news_skill):
        news_skill.locale("de-DE").with_locale_examples(["a", "b", "c", "d"])
        with pytest.raises(ConfigurationError, match="only 3 examplePhrases are allowed \\(de-DE\\)"):
            news_skill.build()

    def test_terms_of_use_fails_build(self, news_skill):
        news_skill.build()
        news_skill.locale("en-US").with_locale_terms_url("https://example.com/terms")
        with pytest.raises(ConfigurationError, match="'termsOfUse' makes Skill deployment fail!"):
            news_skill.build()

    def test_build_is_repeatable(self, news_skill):
        news_skill.with_countries([Country.UNITED_STATES, Country.GERMANY]).with_endpoint("https://example.com/skill")
        news_skill.with_privacy_flag(PrivacyFlag.CONTAINS_ADS, True).with_model()
        model = news_skill.model().with_type("Topics").with_intent("Read")
        model.slot_type("Topics").with_locale_values("en-US", ["sports"]).with_locale_values("de-DE", ["sport"])
        model.intent("Read").with_slot("Topic", "Topics")
        read = model.intent("Read").with_locale_samples("en-US", ["read {Topic}"])
        read.with_locale_samples("de-DE", ["lies {Topic}"])
        model.with_validation_slot_prompt("Topic", "isInSet", "Topics_Values")
        prompt = model.validation_prompt("Topic", "isInSet").with_variation("PlainText")
        prompt.variation("PlainText").with_locale_type_value("en-US", "PlainText", ["Pick a topic."])
        prompt.variation("PlainText").with_locale_type_value("de-DE", "PlainText", ["Welches Thema?"])

        assert news_skill.build().to_json() == news_skill.build().to_json()
        first = {name: built.to_json() for name, built in news_skill.build_models().items()}
        second = {name: built.to_json() for name, built in news_skill.build_models().items()}
        assert first == second
        assert "Topics_Values" not in first["en-US"]
        assert '"isInSet"' in first["de-DE"]
