"""Dashboard view model: UI-local state and chart projections."""

from .state import DashboardState, VIEWS
from .views import chart_data, radar_data, summary_cards

__all__ = ["DashboardState", "VIEWS", "chart_data", "radar_data", "summary_cards"]
