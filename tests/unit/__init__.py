"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Build fresh registries/gates through fixtures; no shared process state.
- Keep tests small, fast, and deterministic.
"""
