"""Application settings read from the environment.

Domain storage configuration lives in ``[tool.protean]`` of ``pyproject.toml``;
everything the HTTP edge needs (token signing, upload directory, CORS) is here.
"""

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    jwt_secret: str
    jwt_algorithm: str
    token_ttl_seconds: int
    upload_dir: str
    cors_origins: tuple[str, ...]

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            jwt_secret=os.getenv("JWT_SECRET", "your-secret-key"),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            token_ttl_seconds=int(os.getenv("TOKEN_TTL_SECONDS", "86400")),
            upload_dir=os.getenv("UPLOAD_DIR", "uploads"),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process settings (cached after first read)."""
    return Settings.from_env()
