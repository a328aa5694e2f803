import numpy as np
import pandas as pd
import pytest

from statcast_report.simulator import generate_leaderboards, write_sample_csvs


@pytest.fixture
def traditional():
    """Three players over 2019-2021; 2020 is the shortened season."""
    return pd.DataFrame({
        "last_name": ["Smith", "Smith", "Smith", "Garcia", "Garcia", "Smith", "Smith"],
        "first_name": ["Will", "Will", "Will", "Luis", "Luis", "Dom", "Dom"],
        "player_id": [1, 1, 1, 2, 2, 3, 3],
        "year": [2019, 2020, 2021, 2019, 2021, 2020, 2021],
        "home_run": [30, 12, 25, 18, 22, 8, 35],
        "strikeout_percent": [20.0, 22.5, 19.0, 15.0, np.nan, 25.0, 24.0],
        "batting_average": [0.280, 0.250, 0.275, 0.300, 0.290, 0.230, 0.260],
        "slugging_percent": [0.520, 0.480, 0.500, 0.470, 0.455, 0.440, 0.560],
        "on_base_percent": [0.350, 0.330, 0.345, 0.370, 0.360, 0.310, 0.340],
    })


@pytest.fixture
def statcast():
    return pd.DataFrame({
        "last_name": ["Smith", "Smith", "Garcia", "Garcia", "Smith"],
        "first_name": ["Will", "Will", "Luis", "Luis", "Dom"],
        "player_id": [1, 1, 2, 2, 3],
        "year": [2019, 2021, 2019, 2021, 2021],
        "barrel_rate": [12.0, 10.5, 6.0, 7.5, 15.0],
        "whiff_percent": [25.0, 24.0, np.nan, 18.0, 30.0],
    })


@pytest.fixture
def simulated():
    return generate_leaderboards(
        n_players=80, qualified_per_season=40, shortened_qualified=45, seed=7,
    )


@pytest.fixture
def sample_csvs(tmp_path):
    return write_sample_csvs(
        tmp_path, seed=11, n_players=60, qualified_per_season=30, shortened_qualified=32,
    )
