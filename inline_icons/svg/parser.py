"""SVG icon parser — raw bytes → IconDocument.

Only what rendering needs is read: the root viewBox and every drawn <path>
(at any depth, in document order) with its own fill override. Paths inside
<defs>, <clipPath>, <mask> and similar containers are not drawn.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from inline_icons.errors import MalformedDocument
from inline_icons.models.icon_document import IconDocument, PathRecord

logger = logging.getLogger(__name__)

# Containers whose paths define clips, masks or reusable shapes, never drawn directly
NON_RENDERING_TAGS = {
    "defs", "clipPath", "mask", "symbol", "pattern", "marker",
    "linearGradient", "radialGradient",
}


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def parse_icon(data: bytes | str) -> IconDocument:
    """Parse raw SVG bytes into an IconDocument.

    Raises:
        MalformedDocument: if the bytes are not well-formed XML or the root is not <svg>.
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise MalformedDocument(f"Cannot parse SVG: {e}") from e

    if _strip_ns(root.tag) != "svg":
        raise MalformedDocument(f"Root element is <{_strip_ns(root.tag)}>, expected <svg>")

    paths: list[PathRecord] = []
    _collect_paths(root, paths)

    doc = IconDocument(viewbox_raw=root.get("viewBox"), paths=tuple(paths))
    logger.debug("Parsed icon: viewBox=%r, %d paths", doc.viewbox_raw, len(doc.paths))
    return doc


def _collect_paths(element: ET.Element, paths: list[PathRecord]) -> None:
    """Append every drawn <path> below element, in document order."""
    for child in element:
        tag = _strip_ns(child.tag)
        if tag in NON_RENDERING_TAGS:
            continue
        if tag == "path":
            d = child.get("d")
            if d:
                paths.append(PathRecord(data=d, fill=child.get("fill")))
            else:
                logger.debug("Skipping <path> without d attribute")
        _collect_paths(child, paths)
