"""
modules/tool_usage package — pure geometric helpers.
"""
from tripgeo.modules.tool_usage.distance_tool import DistanceTool, haversine_distance

__all__ = ["DistanceTool", "haversine_distance"]
