"""
Ride map backend: graph layout and rendering for the ride-sharing map.
"""
