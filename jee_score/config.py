"""
Settings loaded from the environment (and an optional .env file).
"""
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from .resolver import ShiftRules


class Settings(BaseModel):
    answer_keys_path: Optional[str] = None
    fetch_timeout: float = 15.0
    fetch_user_agent: str = "Mozilla/5.0"

    # Google Sheets recording is skipped unless both are set
    google_credentials: Optional[str] = None
    results_sheet: Optional[str] = None

    log_level: str = "INFO"

    shift_rules: str = "shift-1=9:00"
    shift_fallback: Optional[str] = "shift-2"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Settings":
        load_dotenv(dotenv_path)
        return cls(
            answer_keys_path=os.getenv("ANSWER_KEYS_PATH") or None,
            fetch_timeout=float(os.getenv("FETCH_TIMEOUT", "15")),
            fetch_user_agent=os.getenv("FETCH_USER_AGENT", "Mozilla/5.0"),
            google_credentials=os.getenv("GOOGLE_CREDENTIALS") or None,
            results_sheet=os.getenv("RESULTS_SHEET") or None,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            shift_rules=os.getenv("SHIFT_RULES", "shift-1=9:00"),
            shift_fallback=os.getenv("SHIFT_FALLBACK", "shift-2") or None,
        )

    def build_shift_rules(self) -> ShiftRules:
        return ShiftRules.parse(self.shift_rules, fallback=self.shift_fallback)

    @property
    def records_results(self) -> bool:
        return bool(self.google_credentials and self.results_sheet)
