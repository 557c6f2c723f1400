"""Importable helpers for tests (no tests here)."""
