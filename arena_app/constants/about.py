"""Static metadata describing ArenaQt."""

APP_NAME = "ArenaQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "ArenaQt is a desktop client for module mini-games. Load the questions of a "
    "lesson module, then play the quiz, matching or rock-paper-scissors games "
    "to earn experience points."
)

HELP_TEXT = (
    "Enter the module number and press Load Questions. When the questions are ready, "
    "pick a game:\n\n"
    "Quiz Game: 10 seconds per question, one hint per question removes two wrong answers.\n"
    "Matching Game: match each question card with its answer card.\n"
    "RPS Classic: five rounds of rock-paper-scissors.\n"
    "RPS Challenge: every round may be followed by a timed bonus question."
)
