import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CHURCH_NAME = os.getenv("CHURCH_NAME", "Igreja Novo Tempo em Células")
CHART_RECENT_LIMIT = int(os.getenv("CHART_RECENT_LIMIT", "8"))

ZERO_TOTAL_POLICY = os.getenv("ZERO_TOTAL_POLICY", "reject")

SEED_SAMPLE_DATA = bool(int(os.getenv("SEED_SAMPLE_DATA", "0")))
