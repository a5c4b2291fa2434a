import logging
import random
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .l10n import Locale, LocaleRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class ManifestSettings(BaseSettings):
    """Policies applied when building the skill manifest.

    Loaded from environment variables with ALEXA_SKILL_ prefix:
    - ALEXA_SKILL_MANIFEST_VERSION (default: 1.0)
    - ALEXA_SKILL_MAX_EXAMPLE_PHRASES (default: 3)
    - ALEXA_SKILL_MAX_KEYWORDS (default: 3)
    - ALEXA_SKILL_ALLOW_TERMS_OF_USE (default: false)

    Example:
        >>> settings = ManifestSettings(allow_terms_of_use=True)
    """

    model_config = SettingsConfigDict(env_prefix="ALEXA_SKILL_")

    manifest_version: str = Field(default="1.0", description="Value of manifest.manifestVersion")
    max_example_phrases: int = Field(default=3, description="Maximum example phrases per locale")
    max_keywords: int = Field(default=3, description="Maximum keywords per locale")
    allow_terms_of_use: bool = Field(
        default=False,
        description="Emit termsOfUse URLs instead of failing the build, deployment currently rejects them",
    )


class LocaleTranslations(BaseModel):
    """Translations of one locale as stored in a YAML file.

    Example file::

        locale: en-US
        default: true
        snippets:
          SKILL_Name: Daily News
          SayHello_Samples:
            - say hello
            - greet me
    """

    locale: str
    default: bool = False
    snippets: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("snippets", mode="before")
    @classmethod
    def promote_scalars(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {key: [item] if isinstance(item, str) else item for key, item in value.items()}
        return value


def _yaml_files(config_path: Path) -> list[Path]:
    yaml_files = sorted(config_path.glob("*.yaml")) if config_path.is_dir() else [config_path]
    if not yaml_files:
        raise FileNotFoundError(f"No YAML files found in the directory: {config_path}")
    return yaml_files


def _read_yaml(file_path: Path) -> dict:
    with file_path.open("r") as file:
        return yaml.safe_load(file) or {}


def combine_yaml_files(file_paths: list[Path]) -> dict:
    """
    Combine multiple YAML files into a single dictionary.

    Args:
        file_paths (list[Path]): List of paths to YAML files, later files win.

    Returns:
        dict: Combined dictionary from all YAML files.
    """
    combined_data: dict = {}
    for file_path in file_paths:
        combined_data.update(_read_yaml(file_path))
    return combined_data


def load_config(config_path: str | Path, config_class: type[T]) -> T:
    """
    Load and validate configuration, e.g. ManifestSettings, from YAML files.

    Args:
        config_path (Union[str, Path]): Path to a YAML file or a directory containing YAML files.
        config_class (Type[T]): The Pydantic model class to validate the combined data against.

    Returns:
        T: An instance of the provided Pydantic model class.

    Raises:
        FileNotFoundError: If no YAML files are found.
        ValidationError: If the combined data does not conform to the Pydantic model.
    """
    config_path = Path(config_path)

    try:
        combined_data = combine_yaml_files(_yaml_files(config_path))
        return config_class.model_validate(combined_data)
    except FileNotFoundError as err:
        logger.error("Config file not found: %s", config_path)
        raise err
    except ValidationError as err_v:
        logger.error("Validation error: %s", err_v)
        raise err_v


def load_translations(config_path: str | Path) -> list[LocaleTranslations]:
    """
    Load translation files, one locale per file.

    Args:
        config_path (Union[str, Path]): Path to a YAML file or a directory containing YAML files.

    Returns:
        list[LocaleTranslations]: Translations in file name order.

    Raises:
        FileNotFoundError: If no YAML files are found.
        ValidationError: If a file does not describe a locale.
    """
    config_path = Path(config_path)

    translations = []
    for file_path in _yaml_files(config_path):
        try:
            translations.append(LocaleTranslations.model_validate(_read_yaml(file_path)))
        except FileNotFoundError as err:
            logger.error("Translation file not found: %s", file_path)
            raise err
        except ValidationError as err_v:
            logger.error("Validation error in %s: %s", file_path, err_v)
            raise err_v
    return translations


def register_translations(
    registry: LocaleRegistry,
    config_path: str | Path,
    rng: random.Random | None = None,
) -> list[Locale]:
    """Create a Locale for every translation file and register it.

    Raises:
        DuplicateNameError: If a locale is already registered.
    """
    locales = []
    for translations in load_translations(config_path):
        locale = Locale(translations.locale, translations.snippets, rng=rng)
        registry.register(locale, as_default=translations.default)
        logger.info("Loaded %d translation keys for locale %s", len(translations.snippets), locale.name)
        locales.append(locale)
    return locales
