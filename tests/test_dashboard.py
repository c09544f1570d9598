"""Tests for dashboard state and chart projections."""

import pytest
from clean_energy_readiness.dashboard import DashboardState, chart_data, radar_data, summary_cards

class TestDashboardState:

    @pytest.fixture
    def state(self, ranked):
        return DashboardState(ranked=ranked)

    def test_defaults(self, state):
        assert state.view == 'dashboard'
        assert state.selected_region is None
        assert state.compare_mode is False
        assert state.compare_regions == []
        assert state.export_menu_open is False

    def test_set_view(self, state):
        state.set_view('methodology')
        assert state.view == 'methodology'

        with pytest.raises(ValueError, match="Unknown view"):
            state.set_view('settings')

    def test_select_by_name(self, state):
        state.select_by_name('Lankaran')
        assert state.selected_region.name == 'Lankaran'

        state.select_by_name('Atlantis')
        assert state.selected_region.name == 'Lankaran'

        state.select_region(None)
        assert state.selected_region is None

    def test_compare_limit(self, state, ranked):
        """At most three regions; a fourth is ignored."""
        state.toggle_compare_mode()
        for scored in ranked[:3]:
            assert state.toggle_compare(scored)

        assert not state.toggle_compare(ranked[3])
        assert [r.name for r in state.compare_regions] == [r.name for r in ranked[:3]]

    def test_compare_toggle_removes(self, state, ranked):
        state.toggle_compare(ranked[0])
        state.toggle_compare(ranked[1])
        state.toggle_compare(ranked[0])

        assert [r.name for r in state.compare_regions] == [ranked[1].name]

    def test_can_compare(self, state, ranked):
        state.toggle_compare_mode()
        state.click_region(ranked[0])
        assert not state.can_compare

        state.click_region(ranked[1])
        assert state.can_compare
        assert state.selected_region is None

    def test_entering_compare_mode_clears(self, state, ranked):
        state.set_view('methodology')
        state.compare_regions = [ranked[0]]

        state.toggle_compare_mode()
        assert state.compare_mode
        assert state.view == 'dashboard'
        assert state.compare_regions == []

        state.toggle_compare(ranked[2])
        state.toggle_compare_mode()
        assert not state.compare_mode
        assert len(state.compare_regions) == 1

        state.clear_comparison()
        assert state.compare_regions == []

    def test_click_selects_outside_compare_mode(self, state, ranked):
        state.click_region(ranked[2])
        assert state.selected_region == ranked[2]
        assert state.compare_regions == []

    def test_export_closes_menu(self, state):
        state.toggle_export_menu()
        assert state.export_menu_open

        export_file = state.export('csv')
        assert export_file.filename.endswith('.csv')
        assert not state.export_menu_open

class TestViews:

    def test_chart_data(self, ranked, scorer):
        data = chart_data(ranked, scorer.indicators)

        assert len(data) == len(ranked)
        assert data[0] == {
            'name': 'Absheron',
            'CERS': 86.6,
            'Renewable Potential': 85,
            'Grid Access': 90,
            'Regulatory': 88,
            'Implementation': 82
        }

    def test_radar_data(self, ranked, scorer):
        points = radar_data(ranked[0], scorer.indicators)

        assert [p['indicator'] for p in points] == [
            'Renewable Potential (35%)', 'Grid Access (25%)',
            'Regulatory (25%)', 'Implementation (15%)'
        ]
        assert [p['value'] for p in points] == [85, 90, 88, 82]
        assert all(p['full_mark'] == 100 for p in points)

    def test_radar_data_without_selection(self, scorer):
        assert radar_data(None, scorer.indicators) == []

    def test_summary_cards(self, ranked, scorer):
        cards = summary_cards(ranked, scorer.summarize(ranked))

        assert cards['total_regions'] == 7
        assert cards['top_region'] == 'Absheron'
        assert cards['tiers']['Moderate Readiness'] == 4
