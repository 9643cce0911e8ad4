"""
Test suite for pgddl.

This package contains unit tests for literal formatting, column compilation,
statement builders, the inverse operation registry and configuration.
"""
