"""String tables for alert copy.

Keys are dotted paths: ``<variant>.<branch>.<field>`` for alert text and
``action.<name>`` for button labels. Templates use ``str.format`` named
fields; alert content passes ``app`` and ``permission``.

Lookup falls back from the requested locale to English, then to the key
itself, so a lookup never comes back blank.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol

import yaml

from permalert.errors import StringTableError
from permalert.utils.logging import get_logger

log = get_logger(__name__)

FALLBACK_LOCALE = "en"


class Localizer(Protocol):
    """Anything that can turn a key and parameters into display text."""

    def text(self, key: str, **params: Any) -> str:
        ...


BUILTIN_TABLES: Dict[str, Dict[str, str]] = {
    "en": {
        "action.ok": "OK",
        "action.cancel": "Cancel",
        "action.settings": "Settings",
        "action.allow": "Allow",
        "disabled.contacts.title": "{app} does not have access to your contacts",
        "disabled.contacts.message": (
            "Contacts are turned off on this device. {app} needs your "
            "contacts to connect you with the people you know."
        ),
        "disabled.notifications.title": "{app} does not have access to your notifications",
        "disabled.notifications.message": (
            "Notifications are turned off on this device. {app} uses them to "
            "let you know about requests from the people you know and news "
            "that concerns you."
        ),
        "disabled.default.title": "{app} does not have access to {permission}",
        "disabled.default.message": (
            "{permission} is turned off on this device. {app} needs this "
            "service to work properly."
        ),
        "denied.contacts.title": "{app} does not have access to your contacts",
        "denied.contacts.message": (
            "{app} needs access to your contacts to connect you with the "
            "people you know. To allow access, open Settings and turn on "
            "Contacts."
        ),
        "denied.notifications.title": "{app} does not have access to your notifications",
        "denied.notifications.message": (
            "{app} needs notifications to let you know about requests from "
            "the people you know and news that concerns you. To allow them, "
            "open Settings and turn on Notifications."
        ),
        "denied.default.title": "{app} does not have access to {permission}",
        "denied.default.message": (
            "{app} needs access to {permission} to work properly. To allow "
            "access, open Settings and enable {permission}."
        ),
        "pre_permission.default.title": "{app} would like to access {permission}",
    },
    "fr": {
        "action.ok": "OK",
        "action.cancel": "Annuler",
        "action.settings": "Réglages",
        "action.allow": "Autoriser",
        "disabled.contacts.title": "{app} n'a pas accès à vos contacts",
        "disabled.contacts.message": (
            "Les contacts sont désactivés sur cet appareil. L'application "
            "requiert l'accès à vos contacts pour vous connecter à vos proches."
        ),
        "disabled.notifications.title": "{app} n'a pas accès à vos notifications",
        "disabled.notifications.message": (
            "Les notifications sont désactivées sur cet appareil. "
            "L'application les utilise pour vous informer des demandes de vos "
            "proches et des dernières actualités vous concernant."
        ),
        "disabled.default.title": "{app} n'a pas accès à {permission}",
        "disabled.default.message": (
            "{permission} est désactivé sur cet appareil. L'application "
            "requiert ce service pour une utilisation optimale."
        ),
        "denied.contacts.title": "{app} n'a pas accès à vos contacts",
        "denied.contacts.message": (
            "L'application requiert l'accès aux contacts pour pouvoir vous "
            "connecter à vos proches. Pour autoriser l'accès, appuyez sur "
            "Réglages et activez les contacts."
        ),
        "denied.notifications.title": "{app} n'a pas accès à vos notifications",
        "denied.notifications.message": (
            "L'application requiert l'accès aux notifications pour pouvoir "
            "vous informer des demandes de vos proches et des dernières "
            "actualités vous concernant. Pour les autoriser, appuyez sur "
            "Réglages et activez les notifications."
        ),
        "denied.default.title": "{app} n'a pas accès à {permission}",
        "denied.default.message": (
            "L'application requiert {permission} pour une utilisation "
            "optimale. Pour autoriser l'accès, appuyez sur Réglages et "
            "activez {permission}."
        ),
        "pre_permission.default.title": "{app} souhaite accéder à {permission}",
    },
}


def available_locales() -> List[str]:
    """Locales with a built-in table."""
    return sorted(BUILTIN_TABLES)


def load_strings_file(path: Path) -> Dict[str, Dict[str, str]]:
    """Load per-locale overrides from a YAML file.

    The file maps locale codes to mappings of key to template::

        en:
          action.settings: Open Settings

    Raises:
        StringTableError: If the file is unreadable or has the wrong shape
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise StringTableError(f"Could not read strings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise StringTableError(f"Strings file {path} must map locales to tables")

    tables: Dict[str, Dict[str, str]] = {}
    for locale, table in data.items():
        if not isinstance(table, dict):
            raise StringTableError(
                f"Strings file {path}: entry for locale {locale!r} must be a mapping"
            )
        tables[str(locale)] = {str(k): str(v) for k, v in table.items()}
    return tables


class StringTable:
    """Localizer backed by the built-in tables plus optional overrides.

    Args:
        locale: Preferred locale code
        overrides: Per-locale key/template mappings that win over built-ins
    """

    def __init__(
        self,
        locale: str = FALLBACK_LOCALE,
        overrides: Optional[Mapping[str, Mapping[str, str]]] = None,
    ):
        self.locale = locale
        self._tables: Dict[str, Dict[str, str]] = {
            code: dict(table) for code, table in BUILTIN_TABLES.items()
        }
        for code, table in (overrides or {}).items():
            self._tables.setdefault(code, {}).update(table)

    @classmethod
    def from_settings(cls, settings: Any) -> "StringTable":
        """Build a table from ``AlertSettings`` (locale and strings file)."""
        overrides = None
        if settings.strings_file is not None:
            overrides = load_strings_file(Path(settings.strings_file))
        return cls(locale=settings.locale, overrides=overrides)

    def _chain(self) -> List[str]:
        chain = [self.locale]
        base = self.locale.split("_")[0].split("-")[0]
        if base not in chain:
            chain.append(base)
        if FALLBACK_LOCALE not in chain:
            chain.append(FALLBACK_LOCALE)
        return chain

    def template(self, key: str) -> Optional[str]:
        """Return the raw template for ``key`` or ``None`` if no locale has it."""
        for code in self._chain():
            table = self._tables.get(code)
            if table and key in table:
                return table[key]
        return None

    def text(self, key: str, **params: Any) -> str:
        template = self.template(key)
        if template is None:
            log.debug("string_missing", key=key, locale=self.locale)
            return key
        try:
            return template.format(**params)
        except (KeyError, IndexError, ValueError) as e:
            log.warning("string_format_failed", key=key, locale=self.locale, error=str(e))
            return template

    def entries(self) -> Dict[str, str]:
        """All keys visible from this locale with their resolved templates."""
        keys = set()
        for code in self._chain():
            keys.update(self._tables.get(code, {}))
        return {key: self.template(key) or key for key in sorted(keys)}
