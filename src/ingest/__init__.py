"""Source acquisition and ingestion.

This module fetches and reads the Index Animalium dump into name records.
It also hosts the end-to-end archive build pipeline.
"""
