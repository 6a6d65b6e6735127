"""
Locale settings.

The facade is configured exclusively through the environment:

- ``I18N_ID``: locale identifier, e.g. ``en-US`` (default ``en-US``).
- ``I18N_DIR``: directory holding one sub-directory per locale
  (default ``./assets/locales/``).

Both values are read as plain strings by :class:`EnvSettings`
(``pydantic-settings``, ``I18N_`` prefix), so a directory named ``true`` or
``1.10`` reaches the loader unchanged. They are then validated by the
:class:`I18nSettings` pydantic model.

Example:
    .. code-block:: python

        from ftl_i18n.settings import load_settings

        settings = load_settings()
        print(settings.resource_path)  # assets/locales/en-US/main.ftl
"""
import logging
from pathlib import Path

from babel.core import parse_locale
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ftl_i18n.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENVVAR_PREFIX = "I18N_"
DEFAULT_LANG = "en-US"
DEFAULT_DIR = "./assets/locales/"
RESOURCE_FILE = "main.ftl"


class EnvSettings(BaseSettings):
    """Raw ``I18N_ID`` / ``I18N_DIR`` strings."""

    id: str = DEFAULT_LANG
    dir: str = DEFAULT_DIR

    model_config = SettingsConfigDict(
        env_prefix=ENVVAR_PREFIX,
        extra="ignore",
    )


class I18nSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    locale_id: str = Field(default=DEFAULT_LANG)
    locale_dir: Path = Field(default=Path(DEFAULT_DIR))

    @field_validator("locale_id")
    def validate_locale_id(cls, v):
        try:
            parse_locale(v, sep="-")
        except ValueError:
            raise ValueError(f"Parsing language failed: {v!r}")
        return v

    @property
    def locale_path(self) -> Path:
        return self.locale_dir / self.locale_id

    @property
    def resource_path(self) -> Path:
        return self.locale_path / RESOURCE_FILE


def load_settings() -> I18nSettings:
    """
    Read and validate the locale settings from the environment.

    :raises ConfigurationError: If ``I18N_ID`` is not a valid locale identifier.
    :return: Validated, immutable settings.
    :rtype: I18nSettings
    """
    try:
        env = EnvSettings()
        settings = I18nSettings(locale_id=env.id, locale_dir=env.dir)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid i18n settings: {e}") from e

    logger.debug("Loaded i18n settings: locale=%s dir=%s", settings.locale_id, settings.locale_dir)
    return settings
