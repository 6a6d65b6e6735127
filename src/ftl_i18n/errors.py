"""
Exception hierarchy for the ftl-i18n package.

Every error raised by the lookup facade derives from :class:`I18nError`, so
callers that only want to know whether a translation could be produced can
catch that single class.

Example:
    .. code-block:: python

        from ftl_i18n import try_get
        from ftl_i18n.errors import MissingTranslationError

        try:
            label = try_get("save-button")
        except MissingTranslationError as e:
            label = e.key
"""
from pathlib import Path
from typing import List, Optional


class I18nError(Exception):
    """Base class for all ftl-i18n errors."""


class ConfigurationError(I18nError):
    """The locale settings could not be read or validated."""


class LocaleNotFoundError(I18nError):
    """
    The resource file for the configured locale does not exist.

    :param path: Path of the ``main.ftl`` file that was expected.
    :type path: Path
    """

    def __init__(self, path: Path, message: Optional[str] = None):
        self.path = Path(path)
        super().__init__(message or f"Locale resource not found: {self.path}")


class ResourceLoadError(I18nError):
    """
    The resource file exists but could not be read or decoded as UTF-8.

    :param path: Path of the ``main.ftl`` file.
    :type path: Path
    """

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        super().__init__(message)


class MissingTranslationError(I18nError):
    """
    No message (or message attribute) exists for the requested key.

    :param key: The translation key that was looked up.
    :type key: str
    :param locale: Locale identifier of the loaded catalog.
    :type locale: str
    """

    def __init__(self, key: str, locale: str):
        self.key = key
        self.locale = locale
        super().__init__(f"Unknown translation key '{key}' for locale '{locale}'")


class TranslationFormatError(I18nError):
    """
    Fluent reported errors while resolving a message.

    The partially formatted string is kept in :attr:`value` so callers can
    still show something.

    :param key: The translation key that was formatted.
    :type key: str
    :param value: Best-effort string produced by Fluent.
    :type value: str
    :param errors: Errors reported by :meth:`fluent.runtime.FluentBundle.format_pattern`.
    :type errors: list
    """

    def __init__(self, key: str, value: str, errors: List[Exception]):
        self.key = key
        self.value = value
        self.errors = list(errors)
        details = "; ".join(str(e) for e in self.errors)
        super().__init__(f"Failed to format '{key}': {details}")
