"""Unit tests for the dictionary translator.

Tests use pytest with tmp_path for dictionary and configuration files.
"""
