"""Game-related constants shared across UI and core layers."""

QUIZ_TIME_LIMIT_SECONDS: int = 10
BONUS_QUESTION_TIME_SECONDS: int = 10
TICK_INTERVAL_MS: int = 1000
TIMER_URGENT_SECONDS: int = 3

HINT_ELIMINATION_COUNT: int = 2
CHOICE_KEYS: tuple[str, ...] = ("choice_a", "choice_b", "choice_c", "choice_d")

MAX_PAIRS: int = 3
MISMATCH_HIDE_DELAY_MS: int = 700

RPS_CHOICES: tuple[str, ...] = ("rock", "paper", "scissors")
TOTAL_ROUNDS: int = 5
BONUS_QUESTION_DELAY_MS: int = 600

GAME_NAME_QUIZ: str = "Quiz Game"
GAME_NAME_MATCHING: str = "Matching Game"
GAME_NAME_RPS_CLASSIC: str = "RPS Classic"
GAME_NAME_RPS_CHALLENGE: str = "RPS Challenge"
