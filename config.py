import os

# Base directories
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PACKAGE_DIR = os.path.join(BASE_DIR, "cloudplus_exam")

# Data paths (question/note/simulation JSON, images)
DATA_DIR = os.getenv("EXAM_DATA_DIR", os.path.join(PACKAGE_DIR, "data"))
QUESTION_BANK_FILE = os.path.join(DATA_DIR, "questions.json")
NOTES_FILE = os.path.join(DATA_DIR, "notes.json")
SIMULATIONS_FILE = os.path.join(DATA_DIR, "simulations.json")
IMAGES_DIR = os.path.join(DATA_DIR, "images")
PLACEHOLDER_IMAGE = os.path.join(PACKAGE_DIR, "static", "placeholder.svg")

# Per-user local storage (score history, log)
APP_HOME = os.getenv("EXAM_HOME", os.path.join(os.path.expanduser("~"), ".cloudplus_exam"))
HISTORY_FILE = os.path.join(APP_HOME, "history.json")
HISTORY_KEY = "scoreHistory"
LOG_FILE = os.path.join(APP_HOME, "launch.log")

# Server settings
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = int(os.getenv("PORT", "0"))  # 0 → pick a free port
DEFAULT_TIMEOUT = 15.0

# Exam settings
EXAM_TITLE = "Mock Cloud+ Exam"
QUESTION_COUNT = 50
EXAM_DURATION_SECONDS = 90 * 60
LOW_TIME_ALERT_SECONDS = 5 * 60
