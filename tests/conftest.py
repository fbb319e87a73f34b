import os

# Never reach the real provider from tests
os.environ.setdefault("GEMINI_API_KEY", "test-key")
os.environ.setdefault("GEMINI_MODEL", "gemini-2.5-flash")
