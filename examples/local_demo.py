import asyncio
import os
import sys
from pathlib import Path

# Ensure the repo root is on sys.path when running as a script.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from wallet import MongoDBWallet, NotFoundError


async def main() -> None:
    # Needs a MongoDB listening locally (e.g. `docker run -p 27017:27017 mongo`).
    uri = os.getenv("MONGODB_WALLET_URI", "mongodb://localhost:27017/walletDemo")
    org1 = MongoDBWallet(
        {
            "uri": uri,
            "collectionName": "demoWallet",
            "namePrefix": "org1",
            "options": {"serverSelectionTimeoutMS": 2000},
        }
    )
    org2 = MongoDBWallet({"uri": uri, "collectionName": "demoWallet", "namePrefix": "org2"})

    try:
        await org1.ensure_indexes()

        await org1.put("admin@org1", "-----BEGIN CERTIFICATE-----\n...")
        await org1.put("admin@org1.key", os.urandom(32))
        await org2.put("admin@org1", "same name, different wallet")

        print("org1 names:", sorted(await org1.list_names()))
        print("org2 names:", sorted(await org2.list_names()))

        key = await org1.get("admin@org1.key")
        print("org1 key bytes:", len(key))

        await org1.remove("admin@org1.key")
        try:
            await org1.get("admin@org1.key")
        except NotFoundError as e:
            print("after remove:", e)

        snapshot = await org1.get_all()
        print("org1 snapshot:", {k: type(v).__name__ for k, v in snapshot.items()})

        for name in await org1.list_names():
            await org1.remove(name)
        for name in await org2.list_names():
            await org2.remove(name)
    finally:
        await org1.close()
        await org2.close()


if __name__ == "__main__":
    asyncio.run(main())
