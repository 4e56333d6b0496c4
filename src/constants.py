"""Constants: feed endpoint, live state tag, detail table labels, and UI text."""
SCORES_ENDPOINT = "https://ncaa-api.henrygd.me/scoreboard/football/fbs/"

# Only state tag that makes a game selectable (exact, case-sensitive)
LIVE_STATE = "live"

# API (used in api.py)
REQUEST_TIMEOUT = 30

# Detail table
DETAIL_HEADER = ("Team", "Score")

LIST_TITLE = "Games"
TABLE_TITLE = "Stats"

# Grid columns: list 1 part, table 3 parts; side by side from this width on
WIDE_LAYOUT_MIN_WIDTH = 100
LIST_WEIGHT = 1
TABLE_WEIGHT = 3

EMPTY_LIST_MESSAGE = "No live games"
FOOTER_HINT = " [Up][Down] Move  [Enter] Select  [Q] Quit "
