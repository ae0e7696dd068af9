"""Test utilities for websurfx applications.

    from websurfx.testing import TestClient
"""

from websurfx.testing.client import TestClient

__all__ = ["TestClient"]
