"""Test utilities for greeter applications.

    from greeter.testing import TestClient
"""

from greeter.testing.client import TestClient

__all__ = ["TestClient"]
