"""Collection registry: collection name → URL template."""

from __future__ import annotations

from urllib.parse import quote

from inline_icons.config import Settings
from inline_icons.errors import ConfigurationError, UnknownCollection

PLACEHOLDER = "{name}"

DEFAULT_COLLECTIONS: dict[str, str] = {
    "bootstrap": "https://icons.getbootstrap.com/assets/icons/{name}.svg",
    "simple": "https://raw.githubusercontent.com/simple-icons/simple-icons/develop/icons/{name}.svg",
    "material": "https://raw.githubusercontent.com/Templarian/MaterialDesign/master/svg/{name}.svg",
    "octicons": "https://raw.githubusercontent.com/primer/octicons/master/icons/{name}-24.svg",
    "boxicons": "https://boxicons.com/static/img/svg/regular/bx-{name}.svg",
}


class CollectionRegistry:
    """Holds the URL template of every known collection."""

    def __init__(self, collections: dict[str, str] | None = None) -> None:
        self._templates: dict[str, str] = {}
        source = DEFAULT_COLLECTIONS if collections is None else collections
        for name, template in source.items():
            self.add(name, template)

    @classmethod
    def from_settings(cls, settings: Settings) -> CollectionRegistry:
        """Built-in collections with the user's collections merged over them."""
        return cls({**DEFAULT_COLLECTIONS, **settings.collections})

    def add(self, name: str, template: str) -> None:
        """Register or replace a collection."""
        if not name:
            raise ConfigurationError("Collection name must not be empty")
        if template.count(PLACEHOLDER) != 1:
            raise ConfigurationError(
                f"Template for {name!r} must contain exactly one {PLACEHOLDER} placeholder: {template!r}"
            )
        self._templates[name] = template

    def remove(self, name: str) -> None:
        if name not in self._templates:
            raise UnknownCollection(name)
        del self._templates[name]

    def template(self, name: str) -> str:
        try:
            return self._templates[name]
        except KeyError:
            raise UnknownCollection(name) from None

    def names(self) -> list[str]:
        return sorted(self._templates)

    def as_dict(self) -> dict[str, str]:
        return dict(self._templates)

    def resolve_url(self, collection: str, name: str) -> str:
        """Substitute the icon name into the collection's template."""
        return self.template(collection).replace(PLACEHOLDER, quote(name, safe="/"))

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)
