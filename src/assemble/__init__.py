"""Darwin Core package assembly.

This module maps name records onto the core term table and builds
the descriptive metadata handed to the archive writer.
"""
