"""Route analysis and display formatting."""

from indoornav.analysis.analyzer import RouteAnalysis, analyze_route
from indoornav.analysis.formatting import format_distance, format_time

__all__ = ["RouteAnalysis", "analyze_route", "format_distance", "format_time"]
