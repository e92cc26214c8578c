import os


os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DISCOUNT_API_BASE_URL", "http://discounts.test")
os.environ.setdefault("LOG_LEVEL", "INFO")
