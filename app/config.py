import os
from typing import Optional

class Settings:
    # Gemini
    GEMINI_API_KEY: Optional[str] = os.getenv("GEMINI_API_KEY")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
    GEMINI_API_BASE: str = os.getenv("GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta")
    GEMINI_TIMEOUT: float = float(os.getenv("GEMINI_TIMEOUT", "60"))
    GEMINI_TEMPERATURE: float = float(os.getenv("GEMINI_TEMPERATURE", "0.4"))

    # App
    UI_API_TOKEN: str = os.getenv("UI_API_TOKEN", "")

settings = Settings()
