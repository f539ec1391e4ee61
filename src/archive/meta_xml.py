"""Darwin Core text descriptor rendering."""

from __future__ import annotations

from xml.etree import ElementTree

from core.constants import (
    CORE_FILE_NAME,
    CORE_ROW_TYPE,
    DWC_TEXT_NS,
    EML_FILE_NAME,
    SOURCE_ENCODING,
)


def render_meta_xml(header: tuple[str, ...]) -> bytes:
    """Render meta.xml describing the tab-separated core file.

    Args:
        header: Core table header of term URIs; column 0 is the record id.

    Returns:
        UTF-8 encoded XML document.
    """
    ElementTree.register_namespace("", DWC_TEXT_NS)
    archive = ElementTree.Element(_qualified("archive"), {"metadata": EML_FILE_NAME})
    core = ElementTree.SubElement(
        archive,
        _qualified("core"),
        {
            "encoding": SOURCE_ENCODING.upper(),
            "fieldsTerminatedBy": "\\t",
            "linesTerminatedBy": "\\n",
            "fieldsEnclosedBy": "",
            "ignoreHeaderLines": "1",
            "rowType": CORE_ROW_TYPE,
        },
    )
    files = ElementTree.SubElement(core, _qualified("files"))
    ElementTree.SubElement(files, _qualified("location")).text = CORE_FILE_NAME
    ElementTree.SubElement(core, _qualified("id"), {"index": "0"})
    for index, term in enumerate(header):
        ElementTree.SubElement(core, _qualified("field"), {"index": str(index), "term": term})
    ElementTree.indent(archive)
    return ElementTree.tostring(archive, encoding="utf-8", xml_declaration=True)


def _qualified(tag: str) -> str:
    return f"{{{DWC_TEXT_NS}}}{tag}"
