"""Routing adapters - Implementations of RoutingServicePort.

Available implementations:
- OSRMRoutingAdapter: OSRM HTTP route service
"""

from .osrm_adapter import OSRMRoutingAdapter

__all__ = ["OSRMRoutingAdapter"]
