# Bridge Scorecard
# Copyright (C) 2025  Bridge Scorecard developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Constants ---
ORGANIZATION_NAME = "Bridge Scorecard"
APPLICATION_NAME = "Bridge Scorecard"

# Durable storage keys (shared with files written by earlier releases)
STORAGE_KEY_TOURNAMENTS = "bridgeTournaments"
STORAGE_KEY_CURRENT_TOURNAMENT_ID = "currentTournamentId"
STORAGE_KEY_LAST_USED_YOUR_SIDE = "lastUsedYourSide"

DATE_FORMAT = "%Y-%m-%d"

# Vulnerability repeats every 16 boards
VULNERABILITY_CYCLE = 16

# Tricks
BOOK_TRICKS = 6
TOTAL_TRICKS = 13
MIN_LEVEL = 1
MAX_LEVEL = 7
SMALL_SLAM_LEVEL = 6
GRAND_SLAM_LEVEL = 7

# Trick values
MINOR_TRICK_VALUE = 20
MAJOR_TRICK_VALUE = 30
NOTRUMP_FIRST_TRICK_VALUE = 40
NOTRUMP_TRICK_VALUE = 30

# Multipliers applied to the contract trick points
DOUBLED_MULTIPLIER = 2
REDOUBLED_MULTIPLIER = 4

# Bonuses (non-vulnerable, vulnerable)
GAME_THRESHOLD = 100
PART_SCORE_BONUS = 50
GAME_BONUS = (300, 500)
SMALL_SLAM_BONUS = (500, 750)
GRAND_SLAM_BONUS = (1000, 1500)
DOUBLED_INSULT_BONUS = 50
REDOUBLED_INSULT_BONUS = 100

# Overtricks (non-vulnerable, vulnerable)
DOUBLED_OVERTRICK = (100, 200)
REDOUBLED_OVERTRICK = (200, 400)

# Undertrick penalties
UNDOUBLED_UNDERTRICK = (50, 100)
DOUBLED_VULNERABLE_FIRST = 200
DOUBLED_VULNERABLE_SUBSEQUENT = 300
DOUBLED_NOT_VULNERABLE_FIRST = 100
DOUBLED_NOT_VULNERABLE_SECOND_THIRD = 200
DOUBLED_NOT_VULNERABLE_AFTER_THIRD = 300
DOUBLED_NOT_VULNERABLE_THREE_DOWN = 500
REDOUBLED_VULNERABLE_FIRST = 400
REDOUBLED_VULNERABLE_SUBSEQUENT = 600
REDOUBLED_NOT_VULNERABLE_FIRST = 200
REDOUBLED_NOT_VULNERABLE_SUBSEQUENT = 400

# Display
SUIT_SYMBOLS = {
    "Clubs": "♣",
    "Diamonds": "♦",
    "Hearts": "♥",
    "Spades": "♠",
    "NoTrump": "NT",
}
SUIT_COLOURS = {
    "Clubs": "black",
    "Diamonds": "red",
    "Hearts": "red",
    "Spades": "black",
    "NoTrump": "blue",
}
DOUBLED_MARK = "X"
REDOUBLED_MARK = "XX"
