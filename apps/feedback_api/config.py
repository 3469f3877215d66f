from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from apps.feedback_api.services.errors import ConfigurationError


@dataclass(slots=True, frozen=True)
class StoreConfig:
    mongodb_uri: str
    database_name: str
    collection_name: str
    server_selection_timeout_ms: int = 5_000

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "StoreConfig":
        """Lee la configuración del store. Falla con todas las variables que falten."""
        env = os.environ if env is None else env

        required = {
            "DATABASE_URL": env.get("DATABASE_URL", "").strip(),
            "MONGO_INITDB_DATABASE": env.get("MONGO_INITDB_DATABASE", "").strip(),
            "MONGODB_NOTE_COLLECTION": env.get("MONGODB_NOTE_COLLECTION", "").strip(),
        }
        missing = [k for k, v in required.items() if not v]
        if missing:
            raise ConfigurationError(missing)

        try:
            timeout_ms = int(env.get("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000"))
        except ValueError as e:
            raise ConfigurationError(["MONGO_SERVER_SELECTION_TIMEOUT_MS (must be an integer)"]) from e

        return cls(
            mongodb_uri=required["DATABASE_URL"],
            database_name=required["MONGO_INITDB_DATABASE"],
            collection_name=required["MONGODB_NOTE_COLLECTION"],
            server_selection_timeout_ms=timeout_ms,
        )


def cors_origins(env: Mapping[str, str] | None = None) -> list[str]:
    env = os.environ if env is None else env
    raw = env.get("CORS_ORIGINS", "")
    if not raw.strip():
        return ["http://localhost:3000", "http://127.0.0.1:3000"]
    return [p.strip() for p in raw.split(",") if p.strip()]
