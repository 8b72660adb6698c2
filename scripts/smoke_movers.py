# scripts/smoke_movers.py
import asyncio
import os

import httpx

BASE_URL = os.environ.get("MOVERHUB_URL", "http://127.0.0.1:8080")


async def main():
    async with httpx.AsyncClient(base_url=BASE_URL, timeout=10) as client:
        r = await client.get("/movers")
        print("GET /movers:", r.status_code)
        for m in r.json()[:5] if r.status_code == 200 else []:
            print(" ", m["id"], m["name"], m["rating"], m["jobs_done"])

        r = await client.post("/movers/1/review", json={"rating": 5.0})
        print("POST /movers/1/review:", r.status_code, r.text[:200])

        r = await client.post("/movers/1/review", json={"rating": 5.1})
        print("POST /movers/1/review (out of range):", r.status_code, r.text[:200])


if __name__ == "__main__":
    asyncio.run(main())
