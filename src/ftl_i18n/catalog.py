"""
Translation resource backed by :mod:`fluent.runtime`.

A :class:`Catalog` is built once from ``<locale_dir>/<locale_id>/main.ftl``.
Parsing and formatting are delegated to :class:`fluent.runtime.FluentBundle`;
this module only locates the file, reports entries the parser rejected and
resolves ``message`` / ``message.attribute`` keys.

Example:
    .. code-block:: python

        from ftl_i18n.catalog import Catalog
        from ftl_i18n.settings import load_settings

        catalog = Catalog.load(load_settings())
        text, errors = catalog.format("greeting", {"name": "Alice"})
"""
import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from fluent.runtime import FluentBundle, FluentResourceLoader
from fluent.syntax import ast as FTL

from ftl_i18n.errors import LocaleNotFoundError, MissingTranslationError, ResourceLoadError
from ftl_i18n.settings import RESOURCE_FILE, I18nSettings

logger = logging.getLogger(__name__)


class Catalog:
    """
    Read-only set of messages for a single locale.

    Use :meth:`Catalog.load` rather than the constructor.

    :param settings: Settings the catalog was loaded from.
    :type settings: I18nSettings
    :param bundle: Bundle holding every message of the resource.
    :type bundle: FluentBundle
    :param message_ids: Identifiers of the messages, in file order.
    :type message_ids: list[str]
    :param junk: Entries the Fluent parser could not parse.
    :type junk: list[fluent.syntax.ast.Junk]
    :param duplicates: Message ids defined more than once in the file.
    :type duplicates: list[str]
    """

    def __init__(self, settings: I18nSettings, bundle: FluentBundle,
                 message_ids: List[str], junk: Optional[List[FTL.Junk]] = None,
                 duplicates: Optional[List[str]] = None):
        self.settings = settings
        self._bundle = bundle
        self._message_ids = list(message_ids)
        self.junk = list(junk or [])
        self.duplicates = list(duplicates or [])

    @property
    def locale(self) -> str:
        return self.settings.locale_id

    @classmethod
    def load(cls, settings: I18nSettings) -> "Catalog":
        """
        Load the resource file for ``settings.locale_id``.

        A message defined more than once keeps its first definition; later
        ones are logged and listed in :attr:`duplicates`.

        :param settings: Validated locale settings.
        :type settings: I18nSettings
        :raises LocaleNotFoundError: If the locale directory or ``main.ftl`` is missing.
        :raises ResourceLoadError: If ``main.ftl`` cannot be read or is not valid UTF-8.
        :return: The loaded catalog.
        :rtype: Catalog
        """
        path = settings.resource_path
        if not settings.locale_path.is_dir():
            raise LocaleNotFoundError(path, f"Locale directory not found: {settings.locale_path}")
        if not path.is_file():
            raise LocaleNotFoundError(path)

        # The loader fills in {locale} with str.format, so braces in the directory must be escaped
        root = str(settings.locale_dir).replace("{", "{{").replace("}", "}}")
        loader = FluentResourceLoader(os.path.join(root, "{locale}"))
        bundle = FluentBundle([settings.locale_id], use_isolating=False)

        message_ids: List[str] = []
        duplicates: List[str] = []
        junk: List[FTL.Junk] = []
        try:
            for resources in loader.resources(settings.locale_id, [RESOURCE_FILE]):
                for resource in resources:
                    bundle.add_resource(resource)
                    for entry in resource.body:
                        if isinstance(entry, FTL.Message):
                            if entry.id.name in message_ids:
                                duplicates.append(entry.id.name)
                            else:
                                message_ids.append(entry.id.name)
                        elif isinstance(entry, FTL.Junk):
                            junk.append(entry)
        except UnicodeDecodeError as e:
            raise ResourceLoadError(path, f"{path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ResourceLoadError(path, f"Unable to read {path}: {e}") from e

        for entry in junk:
            for annotation in entry.annotations:
                logger.warning("%s: %s %s (%r)", path, annotation.code,
                               annotation.message, entry.content.strip())
        for message_id in duplicates:
            logger.warning("%s: duplicate message '%s', keeping the first definition", path, message_id)

        # Messages are compiled here; terms are compiled by Fluent on first reference
        for message_id in message_ids:
            bundle.get_message(message_id)

        logger.info("Loaded %d messages for locale %s from %s",
                    len(message_ids), settings.locale_id, path)
        return cls(settings, bundle, message_ids, junk, duplicates)

    def message_ids(self) -> List[str]:
        return list(self._message_ids)

    def has(self, key: str) -> bool:
        try:
            self._pattern(key)
        except MissingTranslationError:
            return False
        return True

    def _pattern(self, key: str):
        message_id, _, attribute = key.partition(".")
        if not self._bundle.has_message(message_id):
            raise MissingTranslationError(key, self.locale)

        message = self._bundle.get_message(message_id)
        if attribute:
            pattern = message.attributes.get(attribute)
        else:
            pattern = message.value
        if pattern is None:
            raise MissingTranslationError(key, self.locale)
        return pattern

    def format(self, key: str, args: Optional[Dict[str, Any]] = None) -> Tuple[str, List[Exception]]:
        """
        Format ``key`` with ``args``.

        :param key: Message id, or ``message.attribute``.
        :type key: str
        :param args: Named parameters for ``{ $name }`` placeables.
        :type args: dict, optional
        :raises MissingTranslationError: If the message or attribute does not exist.
        :return: The formatted string and the errors Fluent reported while resolving it.
        :rtype: tuple[str, list[Exception]]
        """
        pattern = self._pattern(key)
        return self._bundle.format_pattern(pattern, args or None)
