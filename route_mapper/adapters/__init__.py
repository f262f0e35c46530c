"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Graph storage (CSV files)
- Geocoding services (Nominatim)
- Routing services (OSRM)
- Rendering engines (Folium)
- Caching systems (in-memory, null)
"""
