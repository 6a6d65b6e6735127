"""Environment-configured Fluent translations: ``get``, ``new(...).set_args(...).build()``."""
from ftl_i18n.errors import (
    ConfigurationError,
    I18nError,
    LocaleNotFoundError,
    MissingTranslationError,
    ResourceLoadError,
    TranslationFormatError,
)
from ftl_i18n.i18n import I18nBuilder, get, new, try_get

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "I18nBuilder",
    "I18nError",
    "LocaleNotFoundError",
    "MissingTranslationError",
    "ResourceLoadError",
    "TranslationFormatError",
    "get",
    "new",
    "try_get",
]
