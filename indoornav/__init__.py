"""indoornav — indoor room locator and gate-aware route planner."""

__version__ = "1.0.0"

from indoornav.analysis.analyzer import RouteAnalysis, analyze_route
from indoornav.loader import dump_floor_plan, floor_plan_from_dict, load_floor_plan
from indoornav.models.floorplan import FloorPlan, Gate, Path, Room
from indoornav.models.route import Route, RouteStep, UserQuery
from indoornav.routing.access import AccessibilityEvaluator
from indoornav.routing.engine import RoutingEngine
from indoornav.routing.errors import GateNotFound, NoPathFound, RoomNotFound, RoutingError
from indoornav.seed_data import sample_floor_plan
from indoornav.settings import ConfigManager
from indoornav.store import AppState, NavigationStore
from indoornav.validation.validator import FloorPlanValidator

__all__ = [
    "__version__",
    # Models
    "FloorPlan",
    "Gate",
    "Path",
    "Room",
    "Route",
    "RouteStep",
    "UserQuery",
    # Routing
    "AccessibilityEvaluator",
    "GateNotFound",
    "NoPathFound",
    "RoomNotFound",
    "RoutingEngine",
    "RoutingError",
    # Analysis, validation, data
    "FloorPlanValidator",
    "RouteAnalysis",
    "analyze_route",
    "dump_floor_plan",
    "floor_plan_from_dict",
    "load_floor_plan",
    "sample_floor_plan",
    # State and configuration
    "AppState",
    "ConfigManager",
    "NavigationStore",
]
