import os

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; LinkHerald/1.0)"


class Links:
    def __init__(self, config: dict | None = None) -> None:
        links_cfg = (config or {}).get("link_herald", {}).get("links", {})

        # Dedup window
        self.CACHE_EXPIRATION_MS: int = int(links_cfg.get("cache_expiration_ms", os.getenv("CACHE_EXPIRATION_MS", "3600000")))

        # Summarization request shape
        self.MAX_CONTENT_LENGTH: int = int(links_cfg.get("max_content_length", os.getenv("MAX_CONTENT_LENGTH", "10000")))
        self.SUMMARY_MAX_TOKENS: int = int(links_cfg.get("summary_max_tokens", os.getenv("SUMMARY_MAX_TOKENS", "300")))
        self.SUMMARY_TEMPERATURE: float = float(links_cfg.get("summary_temperature", os.getenv("SUMMARY_TEMPERATURE", "0.5")))

        # Network deadlines (seconds)
        self.FETCH_TIMEOUT_S: float = float(links_cfg.get("fetch_timeout_s", os.getenv("FETCH_TIMEOUT_S", "20")))
        self.AI_TIMEOUT_S: float = float(links_cfg.get("ai_timeout_s", os.getenv("AI_TIMEOUT_S", "60")))
        self.DELIVERY_TIMEOUT_S: float = float(links_cfg.get("delivery_timeout_s", os.getenv("DELIVERY_TIMEOUT_S", "15")))
        self.LINK_TIMEOUT_S: float = float(links_cfg.get("link_timeout_s", os.getenv("LINK_TIMEOUT_S", "120")))

        self.USER_AGENT: str = str(links_cfg.get("user_agent", os.getenv("USER_AGENT", DEFAULT_USER_AGENT)))

    @property
    def cache_window_s(self) -> float:
        return self.CACHE_EXPIRATION_MS / 1000
