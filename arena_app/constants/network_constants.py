"""Network configuration constants for the arena client."""

DEFAULT_API_BASE_URL: str = "http://127.0.0.1:5000"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 10.0

QUESTIONS_PATH_TEMPLATE: str = "/api/games/questions/{module_id}"
SAVE_SCORE_PATH: str = "/api/games/save-score"
