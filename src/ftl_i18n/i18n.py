"""
Lookup facade for translated strings.

The catalog for the locale named by ``I18N_ID`` is loaded from ``I18N_DIR``
the first time any lookup runs, then shared by every caller for the rest of
the process.

Two families of calls are offered:

- ``get``, ``I18nBuilder.build`` and ``I18nBuilder.args`` always return a
  string. An unknown key yields the key itself; resolution problems yield
  Fluent's best-effort output. Both cases are logged as warnings.
- ``try_get``, ``I18nBuilder.try_build`` and ``I18nBuilder.try_args`` raise
  :class:`~ftl_i18n.errors.MissingTranslationError` or
  :class:`~ftl_i18n.errors.TranslationFormatError` instead.

A catalog that fails to load (bad ``I18N_ID``, missing ``main.ftl``) raises
from every call in both families; loading is not attempted again.

Example:
    .. code-block:: python

        from ftl_i18n import i18n

        i18n.get("hello")                                    # "Hello"
        i18n.new("greeting").set_args("name", "Bob").build()  # "Hello, Bob!"

        builder = i18n.new("user_info").set_args("user", "Carol").set_args("time", "morning")
        builder.args("welcome_message")                      # "Good morning, Carol!"
"""
import logging
from decimal import Decimal
from typing import Any, Dict

from ftl_i18n.catalog import Catalog
from ftl_i18n.errors import MissingTranslationError, TranslationFormatError
from ftl_i18n.lazy import Lazy
from ftl_i18n.settings import load_settings

logger = logging.getLogger(__name__)


def _load_catalog() -> Catalog:
    return Catalog.load(load_settings())


_CATALOG: Lazy[Catalog] = Lazy(_load_catalog)


def catalog() -> Catalog:
    """
    Return the process-wide catalog, loading it on first use.

    :raises ConfigurationError: If the locale settings are invalid.
    :raises LocaleNotFoundError: If the resource file does not exist.
    :rtype: Catalog
    """
    return _CATALOG.get()


def _try_format(key: Any, args: Dict[str, Any]) -> str:
    key = str(key)
    value, errors = catalog().format(key, args)
    if errors:
        raise TranslationFormatError(key, value, errors)
    return value


def _format(key: Any, args: Dict[str, Any]) -> str:
    key = str(key)
    try:
        return _try_format(key, args)
    except MissingTranslationError as e:
        logger.warning("%s", e)
        return key
    except TranslationFormatError as e:
        logger.warning("%s", e)
        return e.value


def get(key: Any) -> str:
    """
    Translate ``key`` without parameters.

    :param key: Message id (or ``message.attribute``); converted with ``str()``.
    :return: The translated string, or ``key`` itself if it is unknown.
    :rtype: str
    """
    return _format(key, {})


def try_get(key: Any) -> str:
    """
    Translate ``key`` without parameters, raising instead of falling back.

    :raises MissingTranslationError: If ``key`` is unknown.
    :raises TranslationFormatError: If Fluent reports errors while formatting.
    :rtype: str
    """
    return _try_format(key, {})


class I18nBuilder:
    """
    Accumulates named parameters for a translation.

    ``set_args`` mutates the builder and returns it, so calls chain.
    Strings are stored as given; ``int``, ``float`` and ``Decimal`` values are
    kept as numbers so Fluent plural selectors work; anything else goes
    through ``str()``.

    :param key: Translation key used by :meth:`build`.
    :type key: str
    """

    def __init__(self, key: Any):
        self.key = str(key)
        self._args: Dict[str, Any] = {}

    @property
    def arguments(self) -> Dict[str, Any]:
        return dict(self._args)

    def set_args(self, name: Any, value: Any) -> "I18nBuilder":
        if not isinstance(value, (str, int, float, Decimal)) or isinstance(value, bool):
            value = str(value)
        self._args[str(name)] = value
        return self

    def args(self, key: Any) -> str:
        """
        Translate ``key`` (not the builder's own key) with the stored parameters.

        :param key: Translation key to format.
        :return: The translated string, or ``key`` itself if it is unknown.
        :rtype: str
        """
        return _format(key, self._args)

    def build(self) -> str:
        """Translate the builder's key with the stored parameters."""
        return _format(self.key, self._args)

    def try_args(self, key: Any) -> str:
        return _try_format(key, self._args)

    def try_build(self) -> str:
        return _try_format(self.key, self._args)

    def __repr__(self):
        return f"I18nBuilder(key={self.key!r}, args={self._args!r})"


def new(key: Any) -> I18nBuilder:
    """
    Start a parameterised translation for ``key``.

    :param key: Translation key used by :meth:`I18nBuilder.build`.
    :rtype: I18nBuilder
    """
    return I18nBuilder(key)
