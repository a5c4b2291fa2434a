import pytest

from alexa_skill_commons.errors import ConfigurationError, NotFoundError
from alexa_skill_commons.l10n import Locale, LocaleRegistry
from alexa_skill_commons.skill import PromptBuilder, PromptKind, ValidationType, VariationsBuilder, VariationType
from alexa_skill_commons.skill.prompt_builder import variation_key


@pytest.fixture
def prompt_registry():
    registry = LocaleRegistry()
    registry.register(
        Locale(
            "en-US",
            {
                "Order_Size_Elicit_Text": ["Which size?", "What size would you like?"],
                "Order_Size_Elicit_SSML": ["<speak>Which size?</speak>"],
            },
        )
    )
    return registry


class TestVariationKey:
    """Test translation key derivation for prompt variations."""

    def test_slot_prompt_key(self):
        assert variation_key("Order", "Size", PromptKind.ELICIT, VariationType.PLAIN_TEXT) == "Order_Size_Elicit_Text"
        assert variation_key("Order", "Size", PromptKind.CONFIRM, VariationType.SSML) == "Order_Size_Confirm_SSML"

    def test_empty_parts_are_skipped(self):
        assert variation_key("Order", "", PromptKind.CONFIRM, VariationType.PLAIN_TEXT) == "Order_Confirm_Text"
        assert variation_key("", "Size", PromptKind.VALIDATE, VariationType.PLAIN_TEXT) == "Size_Validate_Text"


class TestPromptIds:
    """Test the ids used by the dialog model to reference prompts."""

    def test_elicitation_id(self):
        prompt = PromptBuilder.elicitation("Order", "Size")
        assert prompt.id == "Elicit.Intent-Order.IntentSlot-Size"
        assert prompt.kind is PromptKind.ELICIT

    def test_confirmation_id(self):
        assert PromptBuilder.confirmation("Order", "Size").id == "Confirm.Intent-Order.IntentSlot-Size"

    def test_validation_id(self):
        prompt = PromptBuilder.validation("Size", ValidationType.IS_IN_SET)
        assert prompt.id == "Validate.Slot-Size.Type-isInSet"
        assert PromptBuilder.validation("Size", "isLessThan").id == "Validate.Slot-Size.Type-isLessThan"

    def test_validation_rejects_unknown_type(self):
        with pytest.raises(ValueError):
            PromptBuilder.validation("Size", "isPurple")

    def test_intent_confirmation_id(self):
        assert PromptBuilder.intent_confirmation("Order").id == "Confirm.Intent-Order"


class TestVariationsBuilder:
    """Test variation builders for one prompt."""

    def test_default_key(self, prompt_registry):
        builder = VariationsBuilder("Order", "Size", PromptKind.ELICIT, VariationType.PLAIN_TEXT, prompt_registry)
        assert builder.keys == {VariationType.PLAIN_TEXT: "Order_Size_Elicit_Text"}

    def test_build_locale(self, prompt_registry):
        builder = VariationsBuilder("Order", "Size", PromptKind.ELICIT, VariationType.PLAIN_TEXT, prompt_registry)
        variations = builder.build_locale("en-US")
        assert [v.value for v in variations] == ["Which size?", "What size would you like?"]
        assert all(v.type is VariationType.PLAIN_TEXT for v in variations)

    def test_rebound_key(self, prompt_registry):
        prompt_registry.resolve("en-US").set("Custom", ["Pick one"])
        builder = VariationsBuilder("Order", "Size", PromptKind.ELICIT, VariationType.PLAIN_TEXT, prompt_registry)
        builder.with_type_value(VariationType.PLAIN_TEXT, "Custom")
        assert [v.value for v in builder.build_locale("en-US")] == ["Pick one"]

    def test_locale_type_value_stores_translation(self, prompt_registry):
        builder = VariationsBuilder("Order", "Size", PromptKind.CONFIRM, VariationType.PLAIN_TEXT, prompt_registry)
        builder.with_locale_type_value("en-US", VariationType.PLAIN_TEXT, ["Size %s, right?"])
        assert prompt_registry.resolve("en-US").get_all("Order_Size_Confirm_Text") == ["Size %s, right?"]

    def test_unknown_locale_is_recorded(self, prompt_registry):
        """Test that an unknown locale surfaces at build time and freezes the builder."""
        builder = VariationsBuilder("Order", "Size", PromptKind.ELICIT, VariationType.PLAIN_TEXT, prompt_registry)
        builder.with_locale_type_value("fr-FR", VariationType.PLAIN_TEXT, ["Quelle taille?"])
        builder.with_variation(VariationType.SSML)
        assert VariationType.SSML not in builder.keys
        with pytest.raises(NotFoundError, match="fr-FR"):
            builder.build_locale("en-US")

    def test_unconfigured_variation_type_is_recorded(self, prompt_registry):
        builder = VariationsBuilder("Order", "Size", PromptKind.ELICIT, VariationType.PLAIN_TEXT, prompt_registry)
        builder.with_locale_type_value("en-US", VariationType.SSML, ["<speak>Size?</speak>"])
        with pytest.raises(ConfigurationError, match="variation configured"):
            builder.build_locale("en-US")

    def test_no_values_fails(self, prompt_registry):
        builder = VariationsBuilder("Order", "Color", PromptKind.ELICIT, VariationType.PLAIN_TEXT, prompt_registry)
        with pytest.raises(ConfigurationError, match="prompt requires variations with values"):
            builder.build_locale("en-US")


class TestPromptBuilder:
    """Test building prompts for a locale."""

    def test_build_locale_collects_all_variation_types(self, prompt_registry):
        prompt = PromptBuilder.elicitation("Order", "Size", prompt_registry)
        prompt.with_variation(VariationType.PLAIN_TEXT).with_variation(VariationType.SSML)
        built = prompt.build_locale("en-US")
        assert built.id == "Elicit.Intent-Order.IntentSlot-Size"
        assert [v.type for v in built.variations] == [
            VariationType.PLAIN_TEXT,
            VariationType.PLAIN_TEXT,
            VariationType.SSML,
        ]

    def test_without_variations_fails(self, prompt_registry):
        prompt = PromptBuilder.elicitation("Order", "Size", prompt_registry)
        with pytest.raises(ConfigurationError, match="requires variations"):
            prompt.build_locale("en-US")

    def test_unknown_locale_fails(self, prompt_registry):
        prompt = PromptBuilder.elicitation("Order", "Size", prompt_registry).with_variation(VariationType.PLAIN_TEXT)
        with pytest.raises(NotFoundError):
            prompt.build_locale("de-DE")

    def test_variation_lookup(self, prompt_registry):
        prompt = PromptBuilder.elicitation("Order", "Size", prompt_registry).with_variation(VariationType.PLAIN_TEXT)
        assert prompt.variation(VariationType.PLAIN_TEXT).keys[VariationType.PLAIN_TEXT] == "Order_Size_Elicit_Text"
        with pytest.raises(NotFoundError):
            prompt.variation(VariationType.SSML)

    def test_registry_propagates_to_variations(self, prompt_registry):
        """Test that switching the registry rebinds existing variation builders."""
        prompt = PromptBuilder.elicitation("Order", "Size").with_variation(VariationType.PLAIN_TEXT)
        prompt.with_locale_registry(prompt_registry)
        assert len(prompt.build_locale("en-US").variations) == 2

    def test_serialized_shape(self, prompt_registry):
        prompt = PromptBuilder.elicitation("Order", "Size", prompt_registry).with_variation(VariationType.SSML)
        assert prompt.build_locale("en-US").to_dict() == {
            "id": "Elicit.Intent-Order.IntentSlot-Size",
            "variations": [{"type": "SSML", "value": "<speak>Which size?</speak>"}],
        }
