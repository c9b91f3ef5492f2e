"""
Zero-Configuration management for PixelTrack
All settings have sensible defaults - no .env required
"""
import os
from pathlib import Path


class Config:
    """Application configuration with zero-config defaults"""

    # Application paths (auto-created)
    BASE_DIR: Path = Path(__file__).parent.parent
    VOLUME_DIR: Path = Path('/data')  # fly.io volume mount
    DATA_DIR: Path = BASE_DIR / 'data'
    LOGS_DIR: Path = BASE_DIR / 'logs'
    DB_FILENAME: str = 'analytics.db'

    # Listener defaults
    HOST: str = '0.0.0.0'
    PORT: int = 8080

    # Logging defaults
    LOG_LEVEL: str = 'INFO'

    def __init__(self):
        """Initialize configuration"""
        # Prefer the mounted volume, fall back to a local directory for development
        if self.VOLUME_DIR.exists():
            self.DATA_DIR = self.VOLUME_DIR

        # Optional: Override with environment variables if present
        self._load_env_overrides()

        self.DB_PATH: Path = Path(os.getenv('PIXELTRACK_DB_PATH') or self.DATA_DIR / self.DB_FILENAME)

    def _load_env_overrides(self):
        """Load any environment variable overrides (optional)"""
        if os.getenv('PIXELTRACK_DATA_DIR'):
            self.DATA_DIR = Path(os.getenv('PIXELTRACK_DATA_DIR'))
        if os.getenv('PIXELTRACK_LOGS_DIR'):
            self.LOGS_DIR = Path(os.getenv('PIXELTRACK_LOGS_DIR'))
        if os.getenv('PIXELTRACK_HOST'):
            self.HOST = os.getenv('PIXELTRACK_HOST')
        if os.getenv('PIXELTRACK_PORT'):
            self.PORT = int(os.getenv('PIXELTRACK_PORT'))
        if os.getenv('LOG_LEVEL'):
            self.LOG_LEVEL = os.getenv('LOG_LEVEL')

    def ensure_dirs(self) -> None:
        """Create the data and log directories"""
        self.DB_PATH.parent.mkdir(exist_ok=True, parents=True)
        self.LOGS_DIR.mkdir(exist_ok=True, parents=True)


# Create singleton instance
config = Config()
