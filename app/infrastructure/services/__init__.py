"""Process-wide cached providers for settings and AWS clients.

The signup pipeline factory builds its components from these.
"""

from infrastructure.services.providers import get_aws_clients, get_settings

__all__ = ["get_aws_clients", "get_settings"]
