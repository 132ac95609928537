"""Static texts shown by the command line, the text adapter and the web app."""

VERSION = "1.0.0"

VERSION_INFO = (
    f"yahtzee, version {VERSION}.",
    "A solitaire game of dice and a score sheet.",
    "This program is free software; see the project licence for details.",
)

RULES_TEXT = """\
Each turn begins with a roll of the dice. Select which dice to re-roll by
entering the corresponding letters (a), (b), (c), (d) and/or (e). Two
re-rolls are permitted per turn. After re-rolling, choose where to score the
dice by entering the letter or number for that line on the score sheet.

Ones through Sixes score the total of the dice showing that number. Three of
a kind, four of a kind and chance score the total of all five dice. A full
house is worth 25 points (five of a kind counts as one), a small straight
(four dice in a row) scores 30 points, a large straight (2-3-4-5-6) scores
40 points and a yahtzee scores 50 points.

If the upper section scores 63 or more points, a bonus of 35 points is
awarded.

At any time you can type (q) to exit the program, (.) to re-display the
game state, (v) to see the version information, or (?) to view this help
text again.
"""
