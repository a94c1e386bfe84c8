"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == 'true'


class Settings:
    """
    ─── SYNC LIFECYCLE ───────────────────────────────────────────────────
    One run loads one Data Dragon version. A version whose document is
    already `loaded` is skipped, so re-running a sync is always safe.
    Image URLs and blob paths are derived from DDRAGON_BASE_URL and the
    version being loaded.
    ──────────────────────────────────────────────────────────────────────
    """

    # ── Feed ───────────────────────────────────────────────────────────────
    DDRAGON_BASE_URL: str = os.getenv('DDRAGON_BASE_URL', 'https://ddragon.leagueoflegends.com')
    STATIC_DOCS_URL:  str = os.getenv('STATIC_DOCS_URL',  'https://static.developer.riotgames.com/docs/lol')
    DDRAGON_LOCALE:   str = os.getenv('DDRAGON_LOCALE',   'en_US')

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: int = int(os.getenv('REQUEST_TIMEOUT', '30'))

    # ── Loading ────────────────────────────────────────────────────────────
    # Summoner's Rift; only its items are summarised on the version document
    PRIMARY_MAP_ID:           str = os.getenv('PRIMARY_MAP_ID', '11')
    IMAGE_CACHE_CONTROL:      str = 'public, max-age=86400'
    IMAGE_UPLOAD_CONCURRENCY: int = int(os.getenv('IMAGE_UPLOAD_CONCURRENCY', '8'))

    # Hosted invocations are killed after 540s; keep the run inside that.
    SYNC_TIMEOUT_SECONDS:   float = float(os.getenv('SYNC_TIMEOUT_SECONDS', '540'))
    SYNC_LEASE_ENABLED:     bool  = _flag('SYNC_LEASE_ENABLED', 'true')
    SYNC_LEASE_TTL_SECONDS: int   = int(os.getenv('SYNC_LEASE_TTL_SECONDS', '600'))

    # ── Schedule ───────────────────────────────────────────────────────────
    SYNC_SCHEDULE_CRON:     str = os.getenv('SYNC_SCHEDULE_CRON',     '0 16 * * *')
    SYNC_SCHEDULE_TIMEZONE: str = os.getenv('SYNC_SCHEDULE_TIMEZONE', 'America/Los_Angeles')

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    DATA_DIR: Path = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data')))
    DB_DIR:   Path = DATA_DIR / 'db'
    BLOB_DIR: Path = DATA_DIR / 'blobs'
    LOG_DIR:  Path = DATA_DIR / 'logs'

    DB_FILE_NAME: str = os.getenv('DB_FILE_NAME', 'ddragon.sqlite')

    # ── Blob storage ───────────────────────────────────────────────────────
    BLOB_BACKEND:     str  = os.getenv('BLOB_BACKEND', 'local').strip().lower()
    MINIO_ENDPOINT:   str  = os.getenv('MINIO_ENDPOINT', 'localhost:9000')
    MINIO_ACCESS_KEY: str  = os.getenv('MINIO_ACCESS_KEY', '')
    MINIO_SECRET_KEY: str  = os.getenv('MINIO_SECRET_KEY', '')
    MINIO_BUCKET:     str  = os.getenv('MINIO_BUCKET', 'ddragon')
    MINIO_SECURE:     bool = _flag('MINIO_SECURE', 'false')

    # ── HTTP API ───────────────────────────────────────────────────────────
    API_HOST: str = os.getenv('API_HOST', '0.0.0.0')
    API_PORT: int = int(os.getenv('API_PORT', '8080'))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def db_path(cls) -> Path:
        return cls.DB_DIR / cls.DB_FILE_NAME

    @classmethod
    def validate(cls) -> None:
        if cls.BLOB_BACKEND not in ('local', 'minio'):
            raise ValueError(f"BLOB_BACKEND must be 'local' or 'minio', got {cls.BLOB_BACKEND!r}")
        if cls.BLOB_BACKEND == 'minio' and not (cls.MINIO_ACCESS_KEY and cls.MINIO_SECRET_KEY):
            raise ValueError("MINIO_ACCESS_KEY and MINIO_SECRET_KEY must be set in config/.env")

    @classmethod
    def create_directories(cls) -> None:
        cls.DB_DIR.mkdir(parents=True, exist_ok=True)
        cls.BLOB_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
