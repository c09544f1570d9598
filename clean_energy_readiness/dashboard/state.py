"""UI-local dashboard state."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.comparison import MAX_COMPARED_REGIONS
from ..core.models import ScoredRegion
from ..exporters import ExportFile, export as build_export

logger = logging.getLogger(__name__)

VIEWS = ('dashboard', 'methodology')

@dataclass
class DashboardState:
    """Selection, comparison and menu state for a single dashboard session."""
    ranked: Sequence[ScoredRegion]
    view: str = 'dashboard'
    selected_region: Optional[ScoredRegion] = None
    compare_mode: bool = False
    compare_regions: List[ScoredRegion] = field(default_factory=list)
    export_menu_open: bool = False

    def set_view(self, view: str):
        if view not in VIEWS:
            raise ValueError(f"Unknown view: {view}. Expected one of {VIEWS}")
        self.view = view

    def select_region(self, region: Optional[ScoredRegion]):
        self.selected_region = region

    def select_by_name(self, name: str):
        """Select the ranked region with this name, as a chart bar click does."""
        for scored in self.ranked:
            if scored.name == name:
                self.selected_region = scored
                return
        logger.warning(f"No ranked region named {name}")

    def toggle_compare_mode(self):
        """Switch compare mode, returning to the dashboard view; entering clears the selection."""
        self.view = 'dashboard'
        if not self.compare_mode:
            self.compare_regions = []
        self.compare_mode = not self.compare_mode

    def exit_compare_mode(self):
        self.compare_mode = False

    def clear_comparison(self):
        self.compare_regions = []

    def toggle_compare(self, region: ScoredRegion) -> bool:
        """Add or remove a region from the comparison set.

        Returns:
            True if the set changed; adding a fourth region is ignored
        """
        if any(r.name == region.name for r in self.compare_regions):
            self.compare_regions = [r for r in self.compare_regions if r.name != region.name]
            return True
        if len(self.compare_regions) < MAX_COMPARED_REGIONS:
            self.compare_regions = self.compare_regions + [region]
            return True
        logger.debug(f"Comparison already holds {MAX_COMPARED_REGIONS} regions, ignoring {region.name}")
        return False

    def click_region(self, region: ScoredRegion):
        """Table row click: toggles comparison in compare mode, selects otherwise."""
        if self.compare_mode:
            self.toggle_compare(region)
        else:
            self.select_region(region)

    @property
    def can_compare(self) -> bool:
        return self.compare_mode and len(self.compare_regions) >= 2

    def toggle_export_menu(self):
        self.export_menu_open = not self.export_menu_open

    def export(self, kind: str, **kwargs) -> ExportFile:
        """Build an export of the current ranking and close the export menu."""
        export_file = build_export(kind, self.ranked, **kwargs)
        self.export_menu_open = False
        return export_file
