SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

CHURCH_NAME = "Igreja Teste"
CHART_RECENT_LIMIT = 8

ZERO_TOTAL_POLICY = "reject"

SEED_SAMPLE_DATA = False
