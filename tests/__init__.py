"""
Test suite for shapevault

Contains:
- Unit tests for geometry, store, repository and query layers
- Ingestion, configuration and CLI tests
"""
