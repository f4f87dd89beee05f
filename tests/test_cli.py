import json

import pytest

from scoopdash.analysis.pipeline import analyze_strategy
from scoopdash.cli import format_cards, format_report, main


class TestFormatCards:
    def test_format_cards(self, scoopee_spec: str) -> None:
        analysis = analyze_strategy(scoopee_spec, "")
        assert format_cards(analysis.scoopees) == "1 (×2), 2, 3 (×2), 4 (×2), 5 (×2)"

    def test_format_no_cards(self) -> None:
        assert format_cards(()) == "(none)"


class TestFormatReport:
    def test_report_sections(self, scoopee_spec: str, scooper_spec: str) -> None:
        report = format_report(analyze_strategy(scoopee_spec, scooper_spec))

        assert "Scoopee cards: 1 (×2), 2, 3 (×2), 4 (×2), 5 (×2)" in report
        assert "Scooper cards: 5 (×2), 6 (×2), 7 (×2), 8 (×3)" in report
        assert " *    6  7" in report
        assert "      2  1" in report
        assert "6  ×2  7 combinations  (19.4%)" in report
        assert "Total possible combinations: 36" in report

    def test_report_limit(self, scoopee_spec: str, scooper_spec: str) -> None:
        report = format_report(analyze_strategy(scoopee_spec, scooper_spec), limit=1)

        assert "Most common sums: 6 (7 combinations)\n" in report

    def test_report_without_pairs(self) -> None:
        report = format_report(analyze_strategy("", ""))

        assert "(no pairs)" in report
        assert "(no Scooper cards)" in report
        assert "Total possible combinations: 0" in report


class TestMain:
    def test_text_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["1 (2), 2 (1), 3-5 (2)", "5-7 (2), 8 (3)"])

        out = capsys.readouterr().out
        assert "Total possible combinations: 36" in out

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["1-3", "4", "--json"])

        data = json.loads(capsys.readouterr().out)
        assert data["total_combinations"] == 3
        assert data["scooper_effectiveness"] == [
            {"value": 4, "count": 1, "combinations": 1, "probability": pytest.approx(1 / 3)}
        ]

    def test_defaults(self, capsys: pytest.CaptureFixture[str]) -> None:
        main([])

        assert "Total possible combinations: 36" in capsys.readouterr().out


class TestLimitOption:
    @pytest.mark.parametrize("limit", ["0", "-1", "two"])
    def test_rejects_invalid_limit(self, limit: str, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["1-3", "4", "--limit", limit])

        assert exc_info.value.code == 2
        assert "--limit" in capsys.readouterr().err

    def test_accepts_positive_limit(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["1 (2), 2 (1), 3-5 (2)", "5-7 (2), 8 (3)", "--limit", "1"])

        assert "Most common sums: 6 (7 combinations)\n" in capsys.readouterr().out
