"""
Simulated leaderboard generator for development and tests.

Produces traditional and Statcast leaderboards with the same season
structure and raw CSV layout as the real exports. All values are
synthetic — no real player data is used.
"""

from pathlib import Path

import numpy as np
import pandas as pd

from .config import (
    SEASONS,
    SHORTENED_SEASON,
    STATCAST_COLUMNS,
    STATCAST_SEASONS,
    TRADITIONAL_COLUMNS,
)

# Header used by the exports for the surname column
RAW_FIRST_HEADER = "last_name, first_name"

_FIRST_NAMES = [
    "Aaron", "Bryce", "Carlos", "Dansby", "Eddie", "Freddie", "Gleyber",
    "Hunter", "Ian", "Jose", "Kyle", "Luis", "Manny", "Nolan", "Ozzie",
    "Pete", "Rafael", "Salvador", "Trea", "Vladimir", "Will", "Xander",
    "Yordan", "Zack",
]
# Short list so several players share a surname
_LAST_NAMES = [
    "Smith", "Garcia", "Martinez", "Rodriguez", "Hernandez", "Lopez",
    "Perez", "Turner", "Bell", "Cruz", "Diaz", "Castro", "Reyes", "Freeman",
    "Judge", "Alonso", "Olson", "Seager", "Bregman", "Riley", "Harper",
    "Machado", "Soto", "Betts", "Arenado", "Goldschmidt", "Ramirez",
    "Santana", "Contreras", "Walker",
]

# Share of a full season played in the shortened season
_SHORTENED_FRACTION = 60 / 162


def generate_players(n_players: int = 220, seed: int = 42) -> pd.DataFrame:
    """Generate a player pool with a per-player power and contact profile."""
    rng = np.random.default_rng(seed)
    return pd.DataFrame({
        "player_id": 500_000 + rng.choice(200_000, size=n_players, replace=False),
        "first_name": rng.choice(_FIRST_NAMES, size=n_players),
        "last_name": rng.choice(_LAST_NAMES, size=n_players),
        "power": rng.normal(8.0, 3.0, size=n_players).clip(1.5, 20.0),
        "contact": rng.normal(0.0, 1.0, size=n_players),
    })


def generate_leaderboards(
    n_players: int = 220,
    qualified_per_season: int = 135,
    shortened_qualified: int = 142,
    missing_whiff_rate: float = 0.0,
    seed: int = 42,
) -> tuple[pd.DataFrame, pd.DataFrame]:
    """Generate matching traditional and Statcast leaderboards.

    Every Statcast row has a traditional counterpart; the shortened season
    appears only on the traditional board.

    Parameters
    ----------
    n_players : Size of the player pool.
    qualified_per_season : Qualified batters per full season.
    shortened_qualified : Qualified batters in the shortened season.
    missing_whiff_rate : Share of Statcast rows whose whiff_percent is blank.
    seed : RNG seed.

    Returns
    -------
    (traditional, statcast) DataFrames in the cleaned column layout.
    """
    rng = np.random.default_rng(seed)
    players = generate_players(n_players, seed)

    rows = []
    for season in SEASONS:
        shortened = season == SHORTENED_SEASON
        n_qualified = shortened_qualified if shortened else qualified_per_season
        picked = players.iloc[rng.choice(n_players, size=min(n_qualified, n_players), replace=False)]
        games_fraction = _SHORTENED_FRACTION if shortened else 1.0

        for player in picked.itertuples(index=False):
            barrel = max(player.power + rng.normal(0, 1.5), 0.5)
            strikeout = float(np.clip(21.0 - 2.5 * player.contact + rng.normal(0, 2.5), 8, 38))
            whiff = float(np.clip(0.95 * strikeout + 4.0 + rng.normal(0, 1.5), 10, 42))
            avg = float(np.clip(0.255 + 0.012 * player.contact + rng.normal(0, 0.02), 0.180, 0.350))
            obp = avg + float(np.clip(rng.normal(0.070, 0.018), 0.030, 0.140))
            slg = avg + 0.012 * barrel + float(rng.normal(0.07, 0.03))
            home_runs = int(rng.poisson(max((1.9 * barrel + 2.0) * games_fraction, 0.5)))

            rows.append({
                "last_name": player.last_name,
                "first_name": player.first_name,
                "player_id": int(player.player_id),
                "year": season,
                "home_run": home_runs,
                "strikeout_percent": round(strikeout, 1),
                "batting_average": round(avg, 3),
                "slugging_percent": round(slg, 3),
                "on_base_percent": round(obp, 3),
                "barrel_rate": round(barrel, 1),
                "whiff_percent": round(whiff, 1),
            })

    both = pd.DataFrame(rows)
    traditional = both[TRADITIONAL_COLUMNS].reset_index(drop=True)

    statcast = both[both["year"].isin(STATCAST_SEASONS)][STATCAST_COLUMNS].reset_index(drop=True)
    if missing_whiff_rate > 0:
        blank = rng.random(len(statcast)) < missing_whiff_rate
        statcast.loc[blank, "whiff_percent"] = np.nan

    return traditional, statcast


def to_raw_layout(df: pd.DataFrame) -> pd.DataFrame:
    """Give a cleaned leaderboard the export's header quirks.

    The surname column gets the combined header and an empty trailing
    column reproduces the dangling delimiter.
    """
    raw = df.rename(columns={"last_name": RAW_FIRST_HEADER})
    raw[""] = None
    return raw


def write_sample_csvs(
    out_dir: Path,
    seed: int = 42,
    **kwargs,
) -> tuple[Path, Path]:
    """Write simulated traditional and Statcast CSVs in the export layout.

    Extra keyword arguments are passed to generate_leaderboards().

    Returns
    -------
    (traditional_path, statcast_path)
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    traditional, statcast = generate_leaderboards(seed=seed, **kwargs)

    traditional_path = out_dir / "traditional_stats.csv"
    statcast_path = out_dir / "statcast_stats.csv"
    to_raw_layout(traditional).to_csv(traditional_path, index=False)
    to_raw_layout(statcast).to_csv(statcast_path, index=False)
    return traditional_path, statcast_path
