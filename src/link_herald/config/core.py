import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_AI_API_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_AI_MODEL = "gpt-3.5-turbo"


class Core:
    def __init__(self, config: dict | None = None) -> None:
        cfg = (config or {}).get("link_herald", {})
        matrix_cfg = cfg.get("matrix", {})
        ai_cfg = cfg.get("ai", {})

        token_env = str(matrix_cfg.get("token_env", "MATRIX_ACCESS_TOKEN"))
        ai_key_env = str(ai_cfg.get("api_key_env", "AI_API_KEY"))

        # Secrets only ever come from the environment
        self.MATRIX_ACCESS_TOKEN: str | None = os.getenv(token_env)
        self.AI_API_KEY: str | None = os.getenv(ai_key_env)

        self.MATRIX_HOMESERVER_URL: str | None = matrix_cfg.get("homeserver_url") or os.getenv("MATRIX_HOMESERVER_URL")
        self.MATRIX_USER_ID: str | None = matrix_cfg.get("user_id") or os.getenv("MATRIX_USER_ID")
        self.MONITORED_ROOM_ID: str | None = matrix_cfg.get("monitored_room_id") or os.getenv("MONITORED_ROOM_ID")
        self.FORWARDING_ROOM_ID: str | None = matrix_cfg.get("forwarding_room_id") or os.getenv("FORWARDING_ROOM_ID")

        required = [
            ("MATRIX_HOMESERVER_URL", self.MATRIX_HOMESERVER_URL),
            ("MATRIX_ACCESS_TOKEN", self.MATRIX_ACCESS_TOKEN),
            ("MATRIX_USER_ID", self.MATRIX_USER_ID),
            ("MONITORED_ROOM_ID", self.MONITORED_ROOM_ID),
            ("FORWARDING_ROOM_ID", self.FORWARDING_ROOM_ID),
            ("AI_API_KEY", self.AI_API_KEY),
        ]
        missing = [name for name, val in required if not val]
        if missing:
            raise ValueError(f"Missing environment variables: {', '.join(missing)}")

        self.MATRIX_HOMESERVER_URL = self.MATRIX_HOMESERVER_URL.rstrip("/")

        api_url = ai_cfg.get("api_url") or os.getenv("AI_API_URL")
        if not api_url:
            logger.info("AI_API_URL not set, using default OpenAI API URL")
            api_url = DEFAULT_AI_API_URL
        self.AI_API_URL: str = api_url

        model = ai_cfg.get("model") or os.getenv("AI_MODEL")
        if not model:
            logger.info("AI_MODEL not set, using default '%s' model", DEFAULT_AI_MODEL)
            model = DEFAULT_AI_MODEL
        self.AI_MODEL: str = model
