import textwrap

import pytest

from ftl_i18n import i18n
from ftl_i18n.lazy import Lazy

EN_US = """
hello = Hello
greeting = Hello, { $name }!
welcome_message = Good { $time }, { $user }!
user_info = { $user } ({ $time })
items = { $count ->
    [one] One item
   *[other] { $count } items
}
login = Log in
    .title = Sign in to your account
only-attrs =
    .label = Label
"""


def write_locale(root, locale, source):
    path = root / locale
    path.mkdir(parents=True, exist_ok=True)
    (path / "main.ftl").write_text(textwrap.dedent(source), encoding="utf-8")
    return path / "main.ftl"


@pytest.fixture
def locales_dir(tmp_path):
    root = tmp_path / "locales"
    write_locale(root, "en-US", EN_US)
    return root


@pytest.fixture
def fresh_catalog(monkeypatch):
    """Replace the process-wide catalog cell with an empty one."""
    cell = Lazy(i18n._load_catalog)
    monkeypatch.setattr(i18n, "_CATALOG", cell)
    return cell


@pytest.fixture
def configured(monkeypatch, locales_dir, fresh_catalog):
    monkeypatch.setenv("I18N_ID", "en-US")
    monkeypatch.setenv("I18N_DIR", str(locales_dir))
    return locales_dir
