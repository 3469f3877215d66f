from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import NoReturn

from pymongo import AsyncMongoClient
from pymongo import errors as mongo_errors

from apps.feedback_api.config import StoreConfig
from apps.feedback_api.services.errors import ConfigurationError


def _load_dotenv(path: str = ".env") -> None:
    p = Path(path)
    if not p.exists():
        return
    for line in p.read_text(encoding="utf-8").splitlines():
        s = line.strip()
        if not s or s.startswith("#") or "=" not in s:
            continue
        k, v = s.split("=", 1)
        k = k.strip()
        v = v.strip().strip('"').strip("'")
        os.environ.setdefault(k, v)


async def main() -> NoReturn:
    _load_dotenv()
    try:
        cfg = StoreConfig.from_env()
    except ConfigurationError as e:
        raise SystemExit(f"{e} (ni en entorno ni en .env)")

    client: AsyncMongoClient = AsyncMongoClient(
        cfg.mongodb_uri,
        appname=cfg.database_name,
        tz_aware=True,
        serverSelectionTimeoutMS=cfg.server_selection_timeout_ms,
    )
    try:
        # 1) conectividad
        try:
            await client.admin.command("ping")
        except mongo_errors.PyMongoError as e:
            raise SystemExit(f"MongoDB no responde: {e}")
        print("ping: ok")

        # 2) base de datos y colección
        db = client[cfg.database_name]
        names = await db.list_collection_names()
        print("colecciones:", ", ".join(sorted(names)) or "(ninguna)")
        if cfg.collection_name not in names:
            # La colección se crea con el primer insert; no es un error.
            print(f"aviso: la colección {cfg.collection_name!r} aún no existe")
            raise SystemExit(0)

        collection = db[cfg.collection_name]

        # 3) índice único sobre feedback (se crea en el primer create)
        indexes = await collection.index_information()
        unique_on_feedback = any(
            info.get("unique") and [k for k, _ in info.get("key", [])] == ["feedback"]
            for info in indexes.values()
        )
        print(f"índice único sobre 'feedback': {unique_on_feedback}")
        if not unique_on_feedback:
            raise SystemExit("Falta el índice único sobre 'feedback'")

        # 4) recuento y documentos mal formados
        n_docs = await collection.count_documents({})
        required = ("name", "email", "feedback", "rating", "status", "createdAt", "updatedAt")
        n_bad = await collection.count_documents({"$or": [{k: {"$exists": False}} for k in required]})
        print(f"count(feedbacks)={n_docs} mal formados={n_bad}")
        if n_bad:
            raise SystemExit(f"{n_bad} documento(s) sin campos requeridos")

        print("OK")
        raise SystemExit(0)
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
