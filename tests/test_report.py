import plotly.graph_objects as go
import pytest

from statcast_report import charts, queries
from statcast_report.report import build_narrative, build_report, render_html, write_report
from statcast_report.transforms import build_merged_stats


@pytest.fixture
def report(simulated):
    return build_report(*simulated)


class TestBuildReport:
    def test_contents(self, report, simulated):
        traditional, statcast = simulated
        assert len(report["merged"]) == len(statcast)
        assert set(report["tables"]) == {
            "top_ops", "top_ops_by_season", "mean_rates_by_year",
            "surname_counts", "whiff_by_year",
        }
        assert set(report["figures"]) == {"barrel_rate_vs_home_runs", "whiff_rate_by_year"}
        assert report["profiles"]["table"].tolist() == ["traditional", "statcast", "merged"]

    def test_narrative_sections(self, report):
        assert set(report["narrative"]) == {"data", "ops", "rates", "barrels", "surnames"}
        data = report["narrative"]["data"][0]
        assert str(len(report["merged"])) in data
        assert "2020" in data

    def test_narrative_names_best_ops(self, report):
        best = report["tables"]["top_ops"].iloc[0]
        assert best["name"] in report["narrative"]["ops"][0]
        assert f"{best['ops']:.3f}" in report["narrative"]["ops"][0]

    def test_narrative_without_dropped_rows(self, traditional, statcast):
        report = build_report(traditional[traditional["year"] != 2020], statcast)
        assert "Every traditional row found a Statcast match." in report["narrative"]["data"][0]

    def test_narrative_single_season(self, traditional, statcast):
        report = build_report(
            traditional[traditional["year"] == 2019],
            statcast[statcast["year"] == 2019],
            ops_seasons=(2019,),
        )
        narrative = build_narrative(report)
        assert narrative["rates"] == ["Only one season is available, so no trend can be read."]


class TestCharts:
    def test_scatter_has_trend_line(self, simulated):
        merged, _ = build_merged_stats(*simulated)
        fig = charts.barrel_rate_vs_home_runs_chart(queries.barrel_vs_home_runs(merged))
        modes = [trace.mode for trace in fig.data]
        assert "markers" in modes
        assert "lines" in modes

    def test_small_sample_has_no_trend_line(self, traditional, statcast):
        merged, _ = build_merged_stats(traditional, statcast)
        fig = charts.barrel_rate_vs_home_runs_chart(queries.barrel_vs_home_runs(merged))
        assert [trace.mode for trace in fig.data] == ["markers"]

    def test_whiff_chart_error_bars(self, simulated):
        merged, _ = build_merged_stats(*simulated)
        summary = queries.whiff_by_year(merged)
        fig = charts.whiff_rate_by_year_chart(summary)

        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 1
        assert list(fig.data[0].x) == summary["year"].tolist()
        assert list(fig.data[0].error_y.array) == pytest.approx(summary["std_error"].tolist())

    def test_image_export_failure(self, report, tmp_path, monkeypatch):
        def fail(self, *args, **kwargs):
            raise ValueError("Kaleido requires Google Chrome to be installed")

        monkeypatch.setattr(go.Figure, "write_image", fail)
        with pytest.raises(charts.ChartExportError, match="whiff_rate_by_year|barrel_rate_vs_home_runs"):
            charts.save_chart_images(report["figures"], tmp_path)


class TestRenderHtml:
    def test_document_sections(self, report):
        doc = render_html(report)
        assert doc.startswith("<!DOCTYPE html>")
        for heading in ("The data", "Whiffs and strikeouts by season", "Barrels and home runs",
                        "Most common surnames"):
            assert heading in doc
        assert doc.count("plotly-graph-div") >= 2
        assert "staticPlot" in doc

    def test_plotly_js_loads_before_first_chart(self, report):
        doc = render_html(report)
        script = doc.find("cdn.plot.ly")
        assert script != -1
        assert doc.count("cdn.plot.ly") == 1
        assert script < doc.find("Plotly.newPlot")

    def test_names_are_escaped(self, report):
        report["title"] = "Barrels & <Whiffs>"
        doc = render_html(report)
        assert "Barrels &amp; &lt;Whiffs&gt;" in doc

    def test_write_report(self, report, tmp_path):
        path = write_report(report, tmp_path / "out" / "report.html")
        assert path.exists()
        assert "Top OPS seasons, 2019 and 2021" in path.read_text(encoding="utf-8")
