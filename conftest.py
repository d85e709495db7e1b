"""Repository-root conftest so tests import the top-level packages from a checkout."""
