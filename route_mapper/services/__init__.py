"""Services layer - Application orchestration.

Available services:
- TravelPlannerService: Plans bundled-graph and driving routes
"""

from .travel_planner import TravelPlannerService, sample_indices

__all__ = ["TravelPlannerService", "sample_indices"]
