import pandas as pd
import pytest

from statcast_report.transforms import add_ops, build_merged_stats
from statcast_report.validation import JoinCoverageError, check_join_coverage


def _keys(df):
    return set(zip(df["player_id"], df["year"]))


class TestBuildMergedStats:
    def test_keys_present_in_both_sources(self, traditional, statcast):
        merged, _ = build_merged_stats(traditional, statcast)
        assert _keys(merged) <= _keys(traditional) & _keys(statcast)

    def test_row_count_equals_common_keys(self, traditional, statcast):
        merged, _ = build_merged_stats(traditional, statcast)
        assert len(merged) == len(_keys(traditional) & _keys(statcast))
        assert len(merged) == len(statcast)

    def test_ops_is_exact_sum(self, traditional, statcast):
        merged, _ = build_merged_stats(traditional, statcast)
        expected = merged["on_base_percent"] + merged["slugging_percent"]
        assert (merged["ops"] == expected).all()

    def test_single_set_of_name_columns(self, traditional, statcast):
        merged, _ = build_merged_stats(traditional, statcast)
        assert merged.columns.tolist() == [
            "last_name", "first_name", "player_id", "year", "home_run",
            "strikeout_percent", "batting_average", "slugging_percent",
            "on_base_percent", "barrel_rate", "whiff_percent", "ops",
        ]

    def test_drops_only_shortened_season(self, traditional, statcast):
        merged, summary = build_merged_stats(traditional, statcast)
        assert 2020 not in set(merged["year"])
        assert summary["dropped_by_season"] == {2020: 2}
        assert summary["matched_rows"] == len(merged)

    def test_simulated_scenario(self, simulated):
        traditional, statcast = simulated
        merged, summary = build_merged_stats(traditional, statcast)

        shortened_rows = int((traditional["year"] == 2020).sum())
        assert len(merged) == len(statcast)
        assert len(merged) == len(traditional) - shortened_rows
        assert summary["dropped_by_season"] == {2020: shortened_rows}

    def test_source_tables_unchanged(self, traditional, statcast):
        before = statcast.copy()
        build_merged_stats(traditional, statcast)
        pd.testing.assert_frame_equal(statcast, before)


class TestJoinCoverage:
    def test_statcast_row_without_match(self, traditional, statcast):
        extra = pd.DataFrame([{
            "last_name": "Diaz", "first_name": "Yordan", "player_id": 9,
            "year": 2021, "barrel_rate": 9.0, "whiff_percent": 20.0,
        }])
        with pytest.raises(JoinCoverageError, match=r"\(9, 2021\)"):
            check_join_coverage(traditional, pd.concat([statcast, extra]), (2020,))

    def test_unexpected_season_dropped(self, traditional, statcast):
        # Garcia 2021 missing from Statcast for a reason unrelated to 2020
        gap = statcast[~((statcast["player_id"] == 2) & (statcast["year"] == 2021))]
        with pytest.raises(JoinCoverageError, match=r"\(2, 2021\)"):
            build_merged_stats(traditional, gap)

    def test_expected_seasons_are_configurable(self, traditional, statcast):
        gap = statcast[statcast["year"] != 2021]
        merged, summary = build_merged_stats(traditional, gap, expected_dropped_seasons=(2020, 2021))
        assert set(merged["year"]) == {2019}
        assert summary["dropped_by_season"] == {2020: 2, 2021: 3}


def test_add_ops_does_not_mutate():
    df = pd.DataFrame({"on_base_percent": [0.3], "slugging_percent": [0.5]})
    out = add_ops(df)
    assert "ops" not in df.columns
    assert out.loc[0, "ops"] == 0.3 + 0.5
