"""Tool selector tests."""
