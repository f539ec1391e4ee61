"""Darwin Core Archive serialization.

This module writes the core table and metadata into a zip archive
holding the core data file, the meta.xml descriptor, and eml.xml.
"""
