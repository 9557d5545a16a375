from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    web_mode: bool = _env_flag("GRADEKEEPER_WEB", "0")
    port: int = int(os.getenv("PORT", "8550"))
    export_dir: str = os.getenv("GRADEKEEPER_EXPORT_DIR", "exports")
    seed_sample_data: bool = _env_flag("GRADEKEEPER_SAMPLE_DATA", "1")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
