"""Application settings and validation."""

import os


class Settings:
    ENV: str
    BASE_URL: str
    ALLOW_CORS: bool
    LOG_LEVEL: str
    HOST: str
    PORT: int

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.BASE_URL = os.getenv("BASE_URL", "http://localhost:8080").strip()
        self.ALLOW_CORS = os.getenv("ALLOW_CORS", "true").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self._raw_port = os.getenv("PORT", "8080")
        self._validate()

    def _validate(self):
        if not self.BASE_URL.startswith(("http://", "https://")):
            raise RuntimeError(f"BASE_URL must be an absolute http(s) URL, got {self.BASE_URL!r}")
        try:
            self.PORT = int(self._raw_port)
        except ValueError:
            raise RuntimeError(f"PORT must be an integer, got {self._raw_port!r}")
        if self.ENV != "dev" and "://localhost" in self.BASE_URL:
            raise RuntimeError("BASE_URL must point at the public host in non-dev environments")


settings = Settings()
