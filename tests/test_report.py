"""Tests for report rendering and the command line run."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.building import Building, BuildingGroup, COTTAGE
from models.family import Family, FamilyGroup
from models.allocation import Assignment, BuildingResult, PackingResult
from engine.report import (
    render_report_csv, get_building_fill, assignments_to_rows, no_matches_to_rows, summarize_result,
)
from engine.packing_engine import pack_buildings
from data.loader import load_multi_sheet_excel
import cli


def make_result(no_matches=None):
    return PackingResult(
        assignments=[
            Assignment("Ann", 3, "Group1", "A", "BuildingGroup1"),
            Assignment("Bob", 2, "", "A", "BuildingGroup1"),
        ],
        no_matches=no_matches if no_matches is not None else [Family("Carl", 4)],
        building_results=[
            BuildingResult("A", 1, 5, 5, "BuildingGroup1", "cottage", family_count=2),
            BuildingResult("B", 2, 4, 0, "BuildingGroup2", "hotel"),
        ],
    )


class TestRenderReportCsv:
    def test_full_report(self):
        expected = (
            "# Buildings filled:\n"
            "#   A (#1): 5/5\n"
            "#   B (#2): 0/4\n"
            "#  \n"
            "# No matches: Carl/4\n"
            "#  \n"
            "Family,Family Group,Family Size,Building Name\n"
            "Ann,Group1,3,A\n"
            "Bob,,2,A\n"
        )
        assert render_report_csv(make_result()) == expected

    def test_no_matches_line_omitted_when_everyone_placed(self):
        report = render_report_csv(make_result(no_matches=[]))
        assert "No matches" not in report

    def test_names_with_commas_are_quoted(self):
        result = PackingResult(assignments=[Assignment("Doe, Jane", 2, "G", "A", "BG")])
        assert '"Doe, Jane",G,2,A' in render_report_csv(result)


class TestResultViews:
    def test_building_fill(self):
        fill = get_building_fill(make_result())
        assert fill[0]["building_name"] == "A"
        assert fill[0]["utilization_pct"] == 1.0
        assert fill[0]["family_count"] == 2
        assert fill[1]["remaining"] == 4
        assert fill[1]["family_count"] == 0

    def test_building_fill_counts_same_named_buildings_separately(self):
        result = pack_buildings(
            [
                BuildingGroup("BG1", 1, [Building("Oak", 3, COTTAGE)]),
                BuildingGroup("BG2", 2, [Building("Oak", 3, COTTAGE), Building("Elm", 3, COTTAGE)]),
            ],
            [
                FamilyGroup("G1", 1, [Family("Ann", 3)]),
                FamilyGroup("G2", 2, [Family("Bob", 3)]),
            ],
        )
        fill = get_building_fill(result)
        assert [(r["building_group"], r["building_name"], r["family_count"]) for r in fill] == [
            ("BG1", "Oak", 1), ("BG2", "Oak", 1), ("BG2", "Elm", 0),
        ]

    def test_rows(self):
        rows = assignments_to_rows(make_result())
        assert rows[1]["Family Group"] == "(requested)"
        assert no_matches_to_rows(make_result()) == [
            {"Family": "Carl", "Family Size": 4, "Required Housing": "any"},
        ]

    def test_summary(self):
        summary = summarize_result(make_result())
        assert summary["families_placed"] == 2
        assert summary["people_placed"] == 5
        assert summary["people_unmatched"] == 4
        assert summary["total_capacity"] == 9
        assert summary["remaining_capacity"] == 4


FAMILIES_CSV = (
    "Group number,Total # Room Type,Total # people,Primary Registrant,"
    "Primary Registrant Last,House/Hotel Name Assigned,Email\n"
    "1,,3,Ann,Lee,,ann@x.org\n"
    "1,hotel,2,Bob,Ray,,bob@x.org\n"
    "2,,9,Cy,Fox,,cy@x.org\n"
    ",,1,Di,Ng,Nowhere Inn,di@x.org\n"
    "3,,many,Ed,Po,,ed@x.org\n"
)

BUILDINGS_CSV = (
    "Name,Housing Type,Building Group #,Total Capacity\n"
    "Oak,Cottage,1,3\n"
    "Inn,Hotel,1,3\n"
)


class TestCli:
    def _write_inputs(self, tmp_path, buildings=BUILDINGS_CSV):
        families_path = tmp_path / "families.csv"
        buildings_path = tmp_path / "buildings.csv"
        families_path.write_text(FAMILIES_CSV)
        buildings_path.write_text(buildings)
        return families_path, buildings_path

    def test_writes_report(self, tmp_path, capsys):
        families_path, buildings_path = self._write_inputs(tmp_path)
        output = tmp_path / "report.csv"

        code = cli.main(["--families", str(families_path), "--buildings", str(buildings_path),
                         "-o", str(output)])
        assert code == 0

        report = output.read_text()
        assert "#   Oak (#1): 3/3" in report
        assert "#   Inn (#1): 3/3" in report
        assert "Ann Lee (ann@x.org),Group1,3,Oak" in report
        assert "Bob Ray (bob@x.org),Group1,2,Inn" in report
        assert "Di Ng (di@x.org),,1,Inn" in report
        assert "No matches: Cy Fox (cy@x.org)/9" in report

        captured = capsys.readouterr()
        assert "[WARN] Skipping family 'Ed Po (ed@x.org)'" in captured.err
        assert "Nowhere Inn" in captured.err
        assert "Packing complete!" in captured.out

    def test_bad_building_data_exits_with_error(self, tmp_path, capsys):
        families_path, buildings_path = self._write_inputs(
            tmp_path, buildings="Name,Housing Type,Building Group #,Total Capacity\nOak,Cottage,1,lots\n",
        )
        code = cli.main(["--families", str(families_path), "--buildings", str(buildings_path),
                         "-o", str(tmp_path / "report.csv")])
        assert code == 1
        assert "capacity" in capsys.readouterr().err
        assert not (tmp_path / "report.csv").exists()

    def test_empty_buildings_file_exits_with_error(self, tmp_path, capsys):
        families_path, buildings_path = self._write_inputs(tmp_path, buildings="")
        code = cli.main(["--families", str(families_path), "--buildings", str(buildings_path),
                         "-o", str(tmp_path / "report.csv")])
        assert code == 1
        assert "[ERROR]" in capsys.readouterr().err
        assert not (tmp_path / "report.csv").exists()

    def test_non_utf8_buildings_file_exits_with_error(self, tmp_path, capsys):
        families_path, buildings_path = self._write_inputs(tmp_path)
        buildings_path.write_bytes(
            b"Name,Housing Type,Building Group #,Total Capacity\nCaf\xe9,Cottage,1,4\n"
        )
        code = cli.main(["--families", str(families_path), "--buildings", str(buildings_path),
                         "-o", str(tmp_path / "report.csv")])
        assert code == 1
        assert "[ERROR]" in capsys.readouterr().err
        assert not (tmp_path / "report.csv").exists()

    def test_sample_inputs_round_trip(self, tmp_path):
        sample_dir = tmp_path / "samples"
        assert cli.main(["--sample-dir", str(sample_dir)]) == 0

        output = tmp_path / "report.csv"
        code = cli.main(["--families", str(sample_dir / "input_families.csv"),
                         "--buildings", str(sample_dir / "input_buildings.csv"), "-o", str(output)])
        assert code == 0
        assert output.read_text().startswith("# Buildings filled:\n#   Oak Cottage (#1): ")

        families_df, buildings_df = load_multi_sheet_excel(str(sample_dir / "sample_data.xlsx"))
        assert len(families_df) == 40
        assert list(buildings_df["Name"])[:2] == ["Oak Cottage", "Pine Cottage"]

    def test_missing_input_file(self, tmp_path):
        code = cli.main(["--families", str(tmp_path / "nope.csv"), "--buildings", str(tmp_path / "nope.csv")])
        assert code == 2


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
