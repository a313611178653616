"""
Tools Package

HTTP clients for the services the recommendation API depends on.

- fleet_service_client: trucks and load board listings
"""

from app.tools import fleet_service_client

__all__ = [
    "fleet_service_client",
]
