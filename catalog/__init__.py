"""Racing & sporting catalog services: RPC services, REST gateway and CLI."""

__version__ = "0.1.0"
