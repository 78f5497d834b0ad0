"""Person record parsing from the XML response body."""

from __future__ import annotations

from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag
from bs4.element import CData, NavigableString, PreformattedString

from .errors import ResponseParseError


@dataclass(frozen=True)
class Person:
    """Open key/value view of a person returned by the lookup service.

    Keys are dotted element paths below the root element (``basics.name``).
    XML attributes are appended to their element path (``memberships.primary.
    membership.site``); attributes of the root element use their bare name
    (``id``). Repeated paths keep their first value here and every value in
    :meth:`get_all`. Text an element holds next to its child elements is
    recorded under the element's own path.
    """

    values: dict[str, tuple[str, ...]]
    raw_xml: str = field(default="", repr=False)

    @property
    def attributes(self) -> dict[str, str]:
        return {key: items[0] for key, items in self.values.items() if items}

    def __getitem__(self, key: str) -> str:
        return self.values[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def get(self, key: str, default: str | None = None) -> str | None:
        items = self.values.get(key)
        return items[0] if items else default

    def get_all(self, key: str) -> list[str]:
        return list(self.values.get(key, ()))


def _attribute_text(value: object) -> str:
    if isinstance(value, list):
        return " ".join(str(item) for item in value)
    return str(value)


def _own_text(tag: Tag) -> str:
    parts = [
        str(child)
        for child in tag.children
        if isinstance(child, NavigableString)
        and (isinstance(child, CData) or not isinstance(child, PreformattedString))
    ]
    return "".join(parts).strip()


def _collect(tag: Tag, prefix: str, values: dict[str, list[str]]) -> None:
    for name, raw in tag.attrs.items():
        key = f"{prefix}.{name}" if prefix else name
        values.setdefault(key, []).append(_attribute_text(raw))

    children = [child for child in tag.children if isinstance(child, Tag)]
    text = _own_text(tag)
    # Attribute-only elements like <membership site="..."/> carry no value of their own.
    if prefix and (text or (not children and not tag.attrs)):
        values.setdefault(prefix, []).append(text)

    for child in children:
        _collect(child, f"{prefix}.{child.name}" if prefix else child.name, values)


def parse_person_xml(body: str) -> Person:
    """Parse a person XML document into a Person record."""
    soup = BeautifulSoup(body or "", "xml")
    root = soup.find(True)
    if not isinstance(root, Tag):
        raise ResponseParseError("Response body did not contain an XML person document.")

    values: dict[str, list[str]] = {}
    _collect(root, "", values)
    return Person(
        values={key: tuple(items) for key, items in values.items()},
        raw_xml=body,
    )
