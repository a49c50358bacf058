"""Outcome point table - Business Configuration

category -> outcome label -> (student points, class points)
"""
from typing import Dict, Tuple

OUTCOME_TABLE: Dict[str, Dict[str, Tuple[int, int]]] = {
    "homework": {
        "Completed on time": (5, 2),
        "Late but done": (2, 1),
        "Marked absent": (0, 0),
        "Not submitted": (-3, 0),
    },
    "quiz": {
        "Score 90%+": (10, 5),
        "Score 70–89%": (7, 3),
        "Score 50–69%": (4, 2),
        "Below 50%": (1, 0),
        "Absent without reason": (-3, 0),
    },
    "assignment": {
        "Completed & Good Quality": (12, 5),
        "Completed Average": (8, 4),
        "Late Submission": (5, 2),
        "Not Submitted": (-5, 0),
    },
    "participation": {
        "Active Participation": (5, 2),
        "Passive/Attentive": (2, 1),
        "Distractive/Disengaged": (-2, 0),
    },
    "individual-noncurricular": {
        "Participated": (5, 2),
        "Won 1st Place": (15, 5),
        "Won 2nd Place": (10, 4),
        "Won 3rd Place": (7, 3),
        "Special Mention": (6, 2),
        "Absent after registering": (-3, 0),
    },
    "team-noncurricular": {
        "Participated": (4, 4),
        "Team Won 1st Place": (10, 6),
        "Team Won 2nd/3rd Place": (7, 5),
        "Team Lost": (4, 2),
        "Player of the Match/Best X": (8, 3),
        "Absent after selection": (-3, 0),
    },
}

# Records without an outcome label fall back to one of the labels above
STATUS_FALLBACKS: Dict[str, Dict[str, str]] = {
    "homework": {"absent": "Marked absent"},
    "quiz": {"absent": "Absent without reason"},
    "individual-noncurricular": {"absent": "Absent after registering"},
    "team-noncurricular": {"absent": "Absent after selection"},
}
