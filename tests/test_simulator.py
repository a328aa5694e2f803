import pandas as pd

from statcast_report.simulator import RAW_FIRST_HEADER, generate_leaderboards, write_sample_csvs


def test_season_structure():
    traditional, statcast = generate_leaderboards(
        n_players=50, qualified_per_season=20, shortened_qualified=25, seed=3,
    )
    assert traditional.groupby("year").size().to_dict() == {
        2017: 20, 2018: 20, 2019: 20, 2020: 25, 2021: 20, 2022: 20,
    }
    assert len(statcast) == 100
    assert not traditional.duplicated(["player_id", "year"]).any()


def test_reproducible():
    first, _ = generate_leaderboards(n_players=30, qualified_per_season=10, shortened_qualified=10, seed=5)
    second, _ = generate_leaderboards(n_players=30, qualified_per_season=10, shortened_qualified=10, seed=5)
    pd.testing.assert_frame_equal(first, second)


def test_missing_whiff_rate():
    _, statcast = generate_leaderboards(missing_whiff_rate=0.2, seed=1)
    assert statcast["whiff_percent"].isna().any()
    assert statcast["barrel_rate"].notna().all()


def test_written_files_keep_export_quirks(tmp_path):
    _, statcast_path = write_sample_csvs(tmp_path, n_players=20, qualified_per_season=5, shortened_qualified=5)
    header = statcast_path.read_text(encoding="utf-8").splitlines()[0]
    assert header.startswith(f'"{RAW_FIRST_HEADER}",')
    assert header.endswith(",")
