"""
Statcast Report — barrels, whiffs and OPS for qualified batters

Exploratory report joining a traditional batting leaderboard with a
Statcast batted-ball leaderboard on (player_id, year).

To run the report:
    python main.py            # writes output/statcast_report.html
    streamlit run app.py      # same report as a Streamlit page

To point at new exports:
    Update TRADITIONAL_STATS_FILE and STATCAST_STATS_FILE in
    statcast_report.config. Both files must keep the leaderboard column
    layout; the loaders check it and stop on any mismatch.

To compare other seasons:
    Change OPS_COMPARISON_SEASONS in config, or pass ops_seasons to
    report.build_report().
"""
