"""Test utilities for applications using intlroute.

    from intlroute.testing import TestClient
"""

from intlroute.testing.client import TestClient

__all__ = ["TestClient"]
