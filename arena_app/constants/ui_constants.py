"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "ArenaQt Game Arena"

MENU_DESCRIPTION: str = "Choose a module, load its questions, then pick a game."
MENU_LOAD_BUTTON: str = "Load Questions"
MENU_LOADING_MESSAGE: str = "Loading questions…"
MENU_EMPTY_MESSAGE: str = "No questions available."
MENU_READY_TEMPLATE: str = "{count} question(s) ready for module {module_id}."
MENU_IDLE_MESSAGE: str = "No module loaded yet."

GAME_BUTTON_QUIZ: str = "Quiz Game"
GAME_BUTTON_MATCHING: str = "Matching Game"
GAME_BUTTON_RPS_CLASSIC: str = "RPS Classic"
GAME_BUTTON_RPS_CHALLENGE: str = "RPS Challenge"
BACK_BUTTON: str = "← Back"
HINT_BUTTON: str = "Hint"

QUIZ_INSTRUCTIONS_TITLE: str = "Quiz Time!"
QUIZ_INSTRUCTIONS_TEXT: str = (
    "• {count} questions\n• {seconds} seconds per question\n• Use hints wisely!"
)
QUIZ_HINT_TITLE: str = "Need a Hint?"
QUIZ_HINT_TEXT: str = (
    "This will remove 2 wrong answers. You can only use this once per question!"
)
QUIZ_NEXT_BUTTON: str = "Next Question →"
QUIZ_RESULTS_BUTTON: str = "See Results"

MATCHING_INSTRUCTIONS_TITLE: str = "Matching Game"
MATCHING_INSTRUCTIONS_TEXT: str = "Match each question with the correct answer."
MATCHING_HINT_TITLE: str = "Hint"
MATCHING_HINT_TEXT: str = "Remember the card positions after flipping!"

RPS_INSTRUCTIONS_TITLE: str = "How to play"
RPS_CLASSIC_INSTRUCTIONS: str = "Win rock-paper-scissors rounds to earn points."
RPS_CHALLENGE_INSTRUCTIONS: str = (
    "Win rock-paper-scissors rounds and answer the bonus questions for extra points."
)
RPS_HINT_TITLE: str = "Hint"
RPS_HINT_TEXT: str = "Rock beats scissors, scissors beats paper, paper beats rock."

RESULT_TITLE: str = "Results"
RESULT_SAVING_MESSAGE: str = "Calculating results…"
RESULT_HOME_BUTTON: str = "Back to Menu"
RESULT_RETRY_BUTTON: str = "Retry Game"
