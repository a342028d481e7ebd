#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests run without an external database; storage tests use an
in-memory SQLite engine.

    # Run all tests
    python -m pytest tests/ -v

    # Only the pure scoring tests
    python -m pytest tests/ -v -m "not db"

    # Using unittest (TestCase-based modules only)
    python -m unittest discover tests -v
"""
