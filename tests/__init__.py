"""
Test suite for verhoeff

Contains:
- tests/unit/          : Unit tests for tables, parser, checksum engine,
                         fixed-length identifiers and CLI
"""
