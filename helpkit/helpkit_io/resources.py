# helpkit/helpkit_io/resources.py
# Resource strings: load JSON locale catalogs & resolve keys w/ fallback to the default locale

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..core.exceptions import ResourceNotFoundError
from ..core.verbose import vlog_resource, vlog_file_read

# locale used when a key is missing from the active catalog
DEFAULT_LOCALE = "en"
# bundled catalogs (next to the package)
LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"


# * Convert en_US.UTF-8, en-US, EN to en
def normalize_locale(locale: str | None) -> str:
    if not locale:
        return DEFAULT_LOCALE
    part = locale.split(".")[0].split("_")[0].split("-")[0].strip().lower()
    return part if part else DEFAULT_LOCALE


# * Replace positional {0}, {1}, ... placeholders
def format_resource(value: str, *args: Any) -> str:
    for index, arg in enumerate(args):
        value = value.replace("{" + str(index) + "}", str(arg))
    return value


# * Key -> localized string lookup over cached JSON catalogs
class ResourceManager:
    def __init__(
        self,
        locale: str | None = None,
        resources_dir: Path | None = None,
        strict: bool = False,
    ):
        self.locale = normalize_locale(locale)
        self.resources_dir = Path(resources_dir) if resources_dir else LOCALES_DIR
        self.strict = strict
        self._catalogs: dict[str, dict[str, str]] = {}

    def _load_catalog(self, locale: str) -> dict[str, str]:
        # missing or unreadable catalogs count as empty so lookups fall through
        if locale in self._catalogs:
            return self._catalogs[locale]
        path = self.resources_dir / f"{locale}.json"
        catalog: dict[str, str] = {}
        if path.is_file():
            try:
                text = path.read_text(encoding="utf-8-sig")
                vlog_file_read(path, len(text))
                data = json.loads(text)
                if isinstance(data, dict):
                    catalog = {k: v for k, v in data.items() if isinstance(v, str)}
            except (json.JSONDecodeError, OSError):
                catalog = {}
        self._catalogs[locale] = catalog
        return catalog

    # * Resolve key for the active locale; args fill {0}, {1}, ...
    def get_string(self, key: str, *args: Any) -> str:
        value = self._load_catalog(self.locale).get(key)
        if not value and self.locale != DEFAULT_LOCALE:
            value = self._load_catalog(DEFAULT_LOCALE).get(key)

        if value is None:
            vlog_resource(key, self.locale, found=False)
            if self.strict:
                raise ResourceNotFoundError(
                    f"Resource '{key}' not found for locale '{self.locale}'",
                    key=key,
                    locale=self.locale,
                )
            value = key
        else:
            vlog_resource(key, self.locale, found=True)

        return format_resource(value, *args)

    # resource function shape used by the help renderer
    def __call__(self, key: str, *args: Any) -> str:
        return self.get_string(key, *args)

    # * List (code, display name) for catalogs found in resources_dir
    def available_locales(self) -> list[tuple[str, str]]:
        result: list[tuple[str, str]] = []
        if not self.resources_dir.is_dir():
            return result
        for path in sorted(self.resources_dir.glob("*.json")):
            code = path.stem.lower()
            catalog = self._load_catalog(code)
            result.append((code, catalog.get("_name", code)))
        return result
