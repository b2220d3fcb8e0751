import os

os.environ.setdefault("MARKET_DB", os.path.join(os.path.dirname(__file__), "missing", "marketplace.db"))
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("DEFAULT_LANGUAGE", "ru")
