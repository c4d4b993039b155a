from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"
SAMPLE_QUESTIONS_PATH = Path(__file__).resolve().parent / "data" / "sample_questions.json"

DEFAULTS = {
    "questions_file": "",
    "host": "127.0.0.1",
    "port": 8766,
    "default_question_type": "short_answer_question",
    "log_level": "INFO",
}


@dataclass
class Settings:
    questions_file: str = DEFAULTS["questions_file"]
    host: str = DEFAULTS["host"]
    port: int = DEFAULTS["port"]
    default_question_type: str = DEFAULTS["default_question_type"]
    log_level: str = DEFAULTS["log_level"]

    @property
    def project_root(self) -> Path:
        return Path(__file__).resolve().parent.parent

    @property
    def questions_full_path(self) -> Path:
        if not self.questions_file:
            return SAMPLE_QUESTIONS_PATH
        path = Path(self.questions_file)
        if path.is_absolute():
            return path
        return self.project_root / path

    def to_dict(self) -> dict:
        return {
            "questions_file": self.questions_file,
            "host": self.host,
            "port": self.port,
            "default_question_type": self.default_question_type,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        return Settings(**filtered)
    return Settings()


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4) + "\n")
