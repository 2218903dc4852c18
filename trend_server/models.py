from dataclasses import dataclass

SUCCESS_MESSAGE = "Sentiment analysis completed successfully"


@dataclass(frozen=True)
class ComparisonResult:
    trend1: str
    trend2: str
    sentiment1: float
    sentiment2: float
    cached: bool
    timestamp: int
    next_refresh: int
    message: str = SUCCESS_MESSAGE

    def to_dict(self):
        return {
            "trend1": self.trend1,
            "trend2": self.trend2,
            "sentiment1": self.sentiment1,
            "sentiment2": self.sentiment2,
            "cached": self.cached,
            "timestamp": self.timestamp,
            "nextRefresh": self.next_refresh,
            "message": self.message,
        }

    def as_cached(self, expiry):
        """Serialize for a cache hit, with the expiry fields pointing at ``expiry``."""
        data = self.to_dict()
        data["cached"] = True
        data["cacheExpiry"] = expiry
        data["nextRefresh"] = expiry
        return data
