"""Tests for CSV, JSON and report exports."""

import json
import pytest
from datetime import date
from clean_energy_readiness import RegionLoader
from clean_energy_readiness.exporters.report import tier_ranges
from clean_energy_readiness.exporters import (export, export_csv, export_json, export_report,
                                              build_report, format_number)

CSV_HEADER = ('Rank,Region,CERS,Renewable Potential (P),Grid Access (G),Regulatory (R),'
              'Implementation (H),Readiness Level,Recommendation')

FORMULA = 'CERS = (P × 0.35) + (G × 0.25) + (R × 0.25) + (H × 0.15)'

class TestCSVExport:

    def test_rows(self, ranked):
        export_file = export_csv(ranked)
        lines = export_file.text.split('\n')

        assert export_file.filename == 'clean_energy_readiness_scores.csv'
        assert export_file.mime_type == 'text/csv'
        assert len(lines) == len(ranked) + 1
        assert lines[0] == CSV_HEADER

    def test_row_content(self, ranked):
        lines = export_csv(ranked).text.split('\n')

        assert lines[1] == ('1,Absheron,86.6,85,90,88,82,High Readiness,'
                            'Priority for immediate public funding')
        assert lines[4] == ('4,Guba-Khachmaz,74,80,70,75,65,Moderate Readiness,'
                            'Conditional funding or preparatory support')

    def test_commas_not_escaped(self, scorer, make_region, caplog):
        """Embedded delimiters are written as-is and logged."""
        ranked = scorer.rank([make_region('Baku, City', 80, 80, 80, 80)])

        with caplog.at_level('WARNING'):
            lines = export_csv(ranked).text.split('\n')

        assert lines[1].startswith('1,Baku, City,80,')
        assert len(lines[1].split(',')) == 10
        assert 'delimiter' in caplog.text

class TestJSONExport:

    def test_records(self, ranked):
        export_file = export_json(ranked)
        data = json.loads(export_file.text)

        assert export_file.mime_type == 'application/json'
        assert len(data) == len(ranked)
        assert [item['rank'] for item in data] == list(range(1, len(ranked) + 1))

    def test_record_shape(self, ranked):
        first = json.loads(export_json(ranked).text)[0]

        assert first == {
            'rank': 1,
            'region': 'Absheron',
            'CERS': 86.6,
            'indicators': {
                'renewablePotential': 85,
                'gridAccess': 90,
                'regulatory': 88,
                'implementation': 82
            },
            'readiness': {
                'level': 'High Readiness',
                'recommendation': 'Priority for immediate public funding'
            },
            'details': {
                'solar': 'High',
                'wind': 'Excellent (coastal)',
                'grid': 'Excellent proximity',
                'projects': 'Multiple completed'
            }
        }

    def test_two_space_indent(self, ranked):
        text = export_json(ranked).text

        assert text.startswith('[\n  {\n    "rank": 1,')
        assert '"CERS": 74,' in text

class TestReportExport:

    @pytest.fixture
    def report(self, ranked, scorer):
        return build_report(ranked, scorer=scorer, generated_on=date(2026, 3, 5))

    def test_title_block(self, report):
        lines = report.split('\n')

        assert lines[0] == 'CLEAN ENERGY FUNDING PRIORITIZATION TOOL - REGIONAL ANALYSIS REPORT'
        assert lines[1] == 'Generated: 3/5/2026'
        assert lines[2] == '=' * 76

    def test_summary_counts(self, report):
        assert '- Total Regions Analyzed: 7' in report
        assert '- High Readiness Regions (CERS ≥ 75): 3' in report
        assert '- Moderate Readiness Regions (CERS 55-74): 4' in report
        assert '- Low Readiness Regions (CERS < 55): 0' in report

    def test_formula_and_region_names(self, report, ranked):
        """Formula present; every region named exactly once."""
        assert FORMULA in report
        for scored in ranked:
            assert report.count(scored.name) == 1

    def test_region_block(self, report):
        block = report[report.index('1. Absheron'):report.index('2. Shirvan-Salyan')]

        assert '   Overall CERS: 86.6\n' in block
        assert '   - Renewable Potential (35%): 85\n' in block
        assert '   - Grid & Infrastructure (25%): 90\n' in block
        assert '   - Regulatory Readiness (25%): 88\n' in block
        assert '   - Implementation History (15%): 82\n' in block
        assert '   Readiness Level: High Readiness\n' in block
        assert '   - Project Track Record: Multiple completed\n' in block

    def test_methodology(self, report):
        assert 'P = Renewable Energy Potential (35% weight)' in report
        assert 'H = Historical Implementation Capacity (15% weight)' in report
        assert '- 75-100: High Readiness → Priority for immediate public funding' in report
        assert '- 55-74: Moderate Readiness → Conditional funding or preparatory support' in report
        assert '- Below 55: Low Readiness → Not ready for funding; enabling actions required' in report

    def test_footer(self, report):
        assert report.endswith("CECECO Clean Energy Hackathon 2026\n"
                               "Supporting Azerbaijan's 2030 Clean Energy Goals")

    def test_export_file(self, ranked):
        export_file = export_report(ranked)

        assert export_file.filename == 'clean_energy_readiness_report.txt'
        assert export_file.mime_type == 'text/plain'
        assert 'Generated: ' in export_file.text

class TestTierRanges:

    def test_default_bands(self, scorer):
        ranges = [(summary, interpretation) for _, summary, interpretation in tier_ranges(scorer.tiers)]

        assert ranges == [('≥ 75', '75-100'), ('55-74', '55-74'), ('< 55', 'Below 55')]

    def test_fractional_bounds(self):
        tiers = RegionLoader({'tiers': [
            {'level': 'High', 'min_score': 74.5, 'recommendation': 'a'},
            {'level': 'Moderate', 'min_score': 55.5, 'recommendation': 'b'},
            {'level': 'Low', 'min_score': None, 'recommendation': 'c'},
        ]}).load_tiers()
        ranges = [interpretation for _, _, interpretation in tier_ranges(tiers)]

        assert ranges == ['74.5-100', '55.5 to below 74.5', 'Below 55.5']

class TestExportDispatch:

    @pytest.mark.parametrize("kind,filename", [
        ('csv', 'clean_energy_readiness_scores.csv'),
        ('json', 'clean_energy_readiness_scores.json'),
        ('report', 'clean_energy_readiness_report.txt'),
    ])
    def test_kinds(self, ranked, kind, filename, tmp_path):
        path = export(kind, ranked).write(tmp_path)

        assert path == tmp_path / filename
        assert path.read_bytes()

    def test_unknown_kind(self, ranked):
        with pytest.raises(ValueError, match="Unknown export format"):
            export('xlsx', ranked)

    @pytest.mark.parametrize("value,text", [(74.0, '74'), (86.6, '86.6'), (85, '85'), (0.35, '0.35')])
    def test_format_number(self, value, text):
        assert format_number(value) == text
