"""
Clients for services the map depends on.
"""
from .ride_api import RideApiClient, RideApiError

__all__ = [
    'RideApiClient',
    'RideApiError'
]
