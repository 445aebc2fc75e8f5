import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

CHURCH_NAME = os.getenv("CHURCH_NAME", "Igreja Novo Tempo em Células")
CHART_RECENT_LIMIT = int(os.getenv("CHART_RECENT_LIMIT", "8"))

# "reject": a service with zero people is treated as an accidental empty submission.
# "accept": zero attendance is recorded as a real (if unusual) event.
ZERO_TOTAL_POLICY = os.getenv("ZERO_TOTAL_POLICY", "reject")

# Load the four January 2024 example services on startup.
SEED_SAMPLE_DATA = bool(int(os.getenv("SEED_SAMPLE_DATA", "1")))
