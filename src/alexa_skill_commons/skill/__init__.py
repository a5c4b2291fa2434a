"""Builders for the skill manifest and the per-locale interaction models."""

from .intent_builder import IntentBuilder, SlotBuilder, TypeBuilder, ValidationRule, ValidationRulesBuilder
from .manifest import Category, Country, InterfaceType, PrivacyFlag, Region, Skill
from .model import DelegationStrategy, Model, ValidationType, VariationType
from .model_builder import ModelBuilder
from .prompt_builder import PromptBuilder, PromptKind, VariationsBuilder, variation_key
from .skill_builder import SkillBuilder, SkillLocaleBuilder

__all__ = [
    "Category",
    "Country",
    "DelegationStrategy",
    "IntentBuilder",
    "InterfaceType",
    "Model",
    "ModelBuilder",
    "PrivacyFlag",
    "PromptBuilder",
    "PromptKind",
    "Region",
    "Skill",
    "SkillBuilder",
    "SkillLocaleBuilder",
    "SlotBuilder",
    "TypeBuilder",
    "ValidationRule",
    "ValidationRulesBuilder",
    "ValidationType",
    "VariationType",
    "VariationsBuilder",
    "variation_key",
]
