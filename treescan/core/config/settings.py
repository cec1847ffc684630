# File: treescan/core/config/settings.py

import os


class Settings:
    # --- Hashing ---
    # 64kb chunks: large enough that hashlib releases the GIL during update()
    CHUNK_SIZE: int = int(os.getenv("TREESCAN_CHUNK_SIZE", "65536"))

    # --- Worker Pool ---
    # Empty/unset means "size to the host's available parallelism"
    MAX_WORKERS: int = int(os.getenv("TREESCAN_MAX_WORKERS") or os.cpu_count() or 1)

    # --- Walk Policy ---
    # strict: an unreadable subdirectory aborts the whole scan
    STRICT_WALK: bool = os.getenv("TREESCAN_STRICT_WALK", "false").lower() == "true"

    # --- Output ---
    OUTPUT_FILE: str = os.getenv("TREESCAN_OUTPUT_FILE", "file_data.json")
    SQLITE_SUFFIXES = {".db", ".sqlite", ".sqlite3"}

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("TREESCAN_LOG_LEVEL", "INFO").upper()


settings = Settings()
