"""EML metadata document rendering.

This module converts PackageMetadata into an EML 2.1.1 document
following the GBIF profile layout used by Darwin Core Archives.
"""

from __future__ import annotations

from datetime import date
from xml.etree import ElementTree

from core.constants import EML_NS, EML_SCHEMA_LOCATION, EML_SYSTEM, XML_NS, XSI_NS
from core.types import PackageMetadata, Person


def render_eml_xml(metadata: PackageMetadata, pub_date: date | None = None) -> bytes:
    """Render eml.xml for a package.

    Args:
        metadata: Package descriptive metadata.
        pub_date: Publication date; today when omitted.

    Returns:
        UTF-8 encoded XML document.
    """
    ElementTree.register_namespace("eml", EML_NS)
    ElementTree.register_namespace("xsi", XSI_NS)
    root = ElementTree.Element(
        f"{{{EML_NS}}}eml",
        {
            "packageId": metadata.package_id,
            "system": EML_SYSTEM,
            f"{{{XSI_NS}}}schemaLocation": EML_SCHEMA_LOCATION,
            f"{{{XML_NS}}}lang": "en",
        },
    )
    dataset = ElementTree.SubElement(root, "dataset", {"id": metadata.package_id})
    ElementTree.SubElement(dataset, "title").text = metadata.title
    for author in metadata.authors:
        _append_person(dataset, "creator", author)
    for provider in metadata.metadata_providers:
        _append_person(dataset, "metadataProvider", provider)
    ElementTree.SubElement(dataset, "pubDate").text = (pub_date or date.today()).isoformat()
    abstract = ElementTree.SubElement(dataset, "abstract")
    ElementTree.SubElement(abstract, "para").text = metadata.abstract
    if metadata.metadata_providers:
        _append_person(dataset, "contact", metadata.metadata_providers[0])
    distribution = ElementTree.SubElement(dataset, "distribution", {"scope": "document"})
    online = ElementTree.SubElement(distribution, "online")
    ElementTree.SubElement(online, "url", {"function": "information"}).text = metadata.url
    ElementTree.indent(root)
    return ElementTree.tostring(root, encoding="utf-8", xml_declaration=True)


def _append_person(parent: ElementTree.Element, tag: str, person: Person) -> None:
    element = ElementTree.SubElement(parent, tag)
    if person.first_name or person.last_name:
        name = ElementTree.SubElement(element, "individualName")
        if person.first_name and person.last_name:
            ElementTree.SubElement(name, "givenName").text = person.first_name
        # surName is mandatory in EML whenever individualName is present
        ElementTree.SubElement(name, "surName").text = person.last_name or person.first_name
    if person.email:
        ElementTree.SubElement(element, "electronicMailAddress").text = person.email
