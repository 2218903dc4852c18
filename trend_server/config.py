import os

# Search provider settings (point SEARCH_URL at mock_search.py to run offline)
SEARCH_URL = os.getenv("SEARCH_URL", "https://www.reddit.com/search.json")
SEARCH_USER_AGENT = os.getenv("SEARCH_USER_AGENT", "Mozilla/5.0 (compatible; TrendAnalyzer/1.0)")
SEARCH_LIMIT = int(os.getenv("SEARCH_LIMIT", "30"))
SEARCH_SORT = os.getenv("SEARCH_SORT", "relevance")
SEARCH_TIMEOUT = float(os.getenv("SEARCH_TIMEOUT", "10"))

# Result cache windows, in seconds
CACHE_TTL_SECONDS = int(os.getenv("CACHE_TTL_SECONDS", str(10 * 60)))
CACHE_MAX_AGE_SECONDS = int(os.getenv("CACHE_MAX_AGE_SECONDS", str(60 * 60)))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PORT = int(os.getenv("PORT", "5000"))
MOCK_SEARCH_PORT = int(os.getenv("MOCK_SEARCH_PORT", "5001"))
