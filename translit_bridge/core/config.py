import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    PORT: int = int(os.environ.get("PORT", 8080))
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
    TRANSLIT_CHANNEL: str = os.environ.get("TRANSLIT_CHANNEL", "com.ratemymantri.app/translit")
    TRANSLIT_BACKEND: str = os.environ.get("TRANSLIT_BACKEND", "aksharamukha").lower()
    DEFAULT_SCRIPT: str = os.environ.get("DEFAULT_SCRIPT", "Devanagari")
    # ICU 56 is what Android API 24 ships
    MIN_ICU_VERSION: int = int(os.environ.get("MIN_ICU_VERSION", 56))
    MAX_BATCH_SIZE: int = int(os.environ.get("MAX_BATCH_SIZE", 500))
    MAX_TEXT_LEN: int = int(os.environ.get("MAX_TEXT_LEN", 4096))
    RATE_LIMIT_PER_MIN: int = int(os.environ.get("RATE_LIMIT_PER_MIN", 60))
    API_KEY_SECRET: str = os.environ.get("API_KEY_SECRET", "change-me")
    CLIENT_ID: str = os.environ.get("CLIENT_ID", "demo-client")
    API_KEY: str = os.environ.get("API_KEY", "demo-key")


settings = Settings()
