"""Standard translation keys used by the builders and the response helpers."""

# Skill manifest
KEY_SKILL_NAME = "SKILL_Name"
KEY_SKILL_DESCRIPTION = "SKILL_Description"
KEY_SKILL_SUMMARY = "SKILL_Summary"
KEY_SKILL_EXAMPLE_PHRASES = "SKILL_ExamplePhrases"
KEY_SKILL_KEYWORDS = "SKILL_Keywords"
KEY_SKILL_SMALL_ICON_URI = "SKILL_SmallIconURI"
KEY_SKILL_LARGE_ICON_URI = "SKILL_LargeIconURI"
KEY_SKILL_TESTING_INSTRUCTIONS = "SKILL_TestingInstructions"
KEY_SKILL_INVOCATION = "SKILL_Invocation"
KEY_SKILL_PRIVACY_POLICY_URL = "SKILL_PrivacyPolicyURL"
KEY_SKILL_TERMS_OF_USE_URL = "SKILL_TermsOfUse"

# Postfixes appended to intent, slot and type names
KEY_POSTFIX_SAMPLES = "_Samples"
KEY_POSTFIX_VALUES = "_Values"
KEY_POSTFIX_SYNONYMS = "_Synonyms"
KEY_POSTFIX_TITLE = "_Title"
KEY_POSTFIX_TEXT = "_Text"
KEY_POSTFIX_SSML = "_SSML"

# Fallback error
KEY_ERROR_TITLE = "Error_Title"
KEY_ERROR_TEXT = "Error_Text"
KEY_ERROR_SSML = "Error_SSML"
KEY_ERROR_UNKNOWN_TITLE = "Error_Unknown_Title"
KEY_ERROR_UNKNOWN_TEXT = "Error_Unknown_Text"
KEY_ERROR_UNKNOWN_SSML = "Error_Unknown_SSML"
# Missing slot, intent or other request element
KEY_ERROR_NOT_FOUND_TITLE = "Error_NotFound_Title"
KEY_ERROR_NOT_FOUND_TEXT = "Error_NotFound_Text"
KEY_ERROR_NOT_FOUND_SSML = "Error_NotFound_SSML"
KEY_ERROR_LOCALE_NOT_FOUND_TITLE = "Error_LocaleNotFound_Title"
KEY_ERROR_LOCALE_NOT_FOUND_TEXT = "Error_LocaleNotFound_Text"
KEY_ERROR_LOCALE_NOT_FOUND_SSML = "Error_LocaleNotFound_SSML"
KEY_ERROR_TRANSLATION_TITLE = "Error_Translation_Title"
KEY_ERROR_TRANSLATION_TEXT = "Error_Translation_Text"
KEY_ERROR_TRANSLATION_SSML = "Error_Translation_SSML"
KEY_ERROR_NO_TRANSLATION_TITLE = "Error_NoTranslation_Title"
KEY_ERROR_NO_TRANSLATION_TEXT = "Error_NoTranslation_Text"
KEY_ERROR_NO_TRANSLATION_SSML = "Error_NoTranslation_SSML"
KEY_ERROR_MISSING_PLACEHOLDER_TITLE = "Error_MissingPlaceholder_Title"
KEY_ERROR_MISSING_PLACEHOLDER_TEXT = "Error_MissingPlaceholder_Text"
KEY_ERROR_MISSING_PLACEHOLDER_SSML = "Error_MissingPlaceholder_SSML"

# Default intents
KEY_LAUNCH_TITLE = "Launch_Title"
KEY_LAUNCH_TEXT = "Launch_Text"
KEY_LAUNCH_SSML = "Launch_SSML"
KEY_HELP_TITLE = "Help_Title"
KEY_HELP_TEXT = "Help_Text"
KEY_HELP_SSML = "Help_SSML"
KEY_STOP_TITLE = "Stop_Title"
KEY_STOP_TEXT = "Stop_Text"
KEY_STOP_SSML = "Stop_SSML"
KEY_CANCEL_TITLE = "Cancel_Title"
KEY_CANCEL_TEXT = "Cancel_Text"
KEY_CANCEL_SSML = "Cancel_SSML"
