import os
from pathlib import Path

from nosticky.utilities.env.parsing import _env_int, _env_optional_str

DEFAULT_LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10 MiB
DEFAULT_LOG_FILE_BACKUPS = 5


class LoggingConfiguration:
    @classmethod
    def log_level(cls) -> str:
        return os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    @classmethod
    def log_directory(cls) -> Path | None:
        log_dir = _env_optional_str("NOSTICKY_LOG_DIR")
        if log_dir is None:
            return None
        return Path(log_dir).expanduser()

    @classmethod
    def log_file_max_bytes(cls) -> int:
        return _env_int(
            "NOSTICKY_LOG_FILE_MAX_BYTES",
            default=DEFAULT_LOG_FILE_MAX_BYTES,
            minimum=1,
        )

    @classmethod
    def log_file_backups(cls) -> int:
        return _env_int(
            "NOSTICKY_LOG_FILE_BACKUPS",
            default=DEFAULT_LOG_FILE_BACKUPS,
            minimum=1,
        )
