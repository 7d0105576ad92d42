"""Test suite for lensurls.

Test organization:
- tests/unit/: URL building, request validation, config and fetch helpers
- tests/integration/: the command line end to end, without network access
"""
