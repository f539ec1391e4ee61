"""Core constants used across Sherborn modules.

This module centralizes dataset literals and archive layout names.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

DEFAULT_DATA_ROOT = Path(tempfile.gettempdir()) / "dwca_hunter" / "sherborn"
SOURCE_FILE_NAME = "data.csv"
ARCHIVE_FILE_NAME = "sherborn.zip"
DEFAULT_DOWNLOAD_TIMEOUT_SECONDS = 300
DOWNLOAD_CHUNK_SIZE = 1 << 16
PROGRESS_LOG_INTERVAL = 10000
SOURCE_ENCODING = "utf-8"
SOURCE_DELIMITER = "\t"
MIN_ROW_FIELDS = 2

DATASET_UUID = "05ad6ca2-fc37-47f4-983a-72e535420e28"
DATASET_TITLE = "Index Animalium"
DATASET_URL = "https://uofi.box.com/shared/static/kj8a26a3bcrraa4kccoyz5jr5uqrqoe6.csv"
DATASET_ABSTRACT = (
    "Index Animalium is a monumental work that covers 400 000 zoological names "
    "registered by science between 1758 and 1850"
)
AUTHOR_FIRST_NAME = "C. D."
AUTHOR_LAST_NAME = "Sherborn"
PROVIDER_FIRST_NAME = "Dmitry"
PROVIDER_LAST_NAME = "Mozzherin"
PROVIDER_EMAIL = "dmozzherin@gmail.com"

DWC_TERMS_NS = "http://rs.tdwg.org/dwc/terms/"
DWC_TEXT_NS = "http://rs.tdwg.org/dwc/text/"
TAXON_ID_TERM = DWC_TERMS_NS + "taxonID"
SCIENTIFIC_NAME_TERM = DWC_TERMS_NS + "scientificName"
NOMENCLATURAL_CODE_TERM = DWC_TERMS_NS + "nomenclaturalCode"
CORE_ROW_TYPE = DWC_TERMS_NS + "Taxon"
CORE_HEADER = (TAXON_ID_TERM, SCIENTIFIC_NAME_TERM, NOMENCLATURAL_CODE_TERM)
NOMENCLATURAL_CODE = "ICZN"

CORE_FILE_NAME = "taxa.txt"
META_FILE_NAME = "meta.xml"
EML_FILE_NAME = "eml.xml"
EML_NS = "eml://ecoinformatics.org/eml-2.1.1"
EML_SCHEMA_LOCATION = (
    "eml://ecoinformatics.org/eml-2.1.1 "
    "http://rs.gbif.org/schema/eml-gbif-profile/1.1/eml.xsd"
)
XML_NS = "http://www.w3.org/XML/1998/namespace"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
EML_SYSTEM = "http://globalnames.org"
