"""
auth_load.py: simple async load script against the Basic-auth endpoint

Each request picks a random directory user; roughly --bad-ratio of them send a
wrong password so both the match and the reject paths are exercised.

Usage:
  python auth_load.py --base http://127.0.0.1:8000 --count 15000 --concurrency 200
"""
import argparse
import asyncio
import random
import time
from datetime import datetime, timezone

import httpx

from demo_services.auth.codec import Credential
from demo_services.auth.config import load_directory_seed

def _now_iso():
    return datetime.now(timezone.utc).isoformat()

async def _hit_one(client: httpx.AsyncClient, base: str, cred: Credential, bad: bool):
    if bad:
        cred = Credential(cred.username, cred.password + "-wrong")
    try:
        r = await client.get(f"{base}/", headers={"Authorization": cred.header()}, timeout=10)
        expected = 401 if bad else 200
        return r.status_code == expected
    except httpx.HTTPError:
        return False

async def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--base", default="http://127.0.0.1:8000")
    parser.add_argument("--count", type=int, default=15000)
    parser.add_argument("--concurrency", type=int, default=200)
    parser.add_argument("--bad-ratio", type=float, default=0.2)
    args = parser.parse_args()

    users = load_directory_seed()
    if not users:
        print("No directory users configured.")
        return

    start_iso = _now_iso()
    t0 = time.perf_counter()
    success = 0

    limit = httpx.Limits(max_connections=args.concurrency, max_keepalive_connections=args.concurrency)
    async with httpx.AsyncClient(limits=limit) as client:
        sem = asyncio.Semaphore(args.concurrency)

        async def _task(i):
            nonlocal success
            async with sem:
                bad = random.random() < args.bad_ratio
                ok = await _hit_one(client, args.base, random.choice(users), bad)
                if ok:
                    success += 1

        await asyncio.gather(*(_task(i) for i in range(args.count)))

    dt = time.perf_counter() - t0
    end_iso = _now_iso()
    print(f"START: {start_iso}")
    print(f"END:   {end_iso}")
    print(f"TOTAL: {dt:.3f} s")
    print(f"OPS:   requests={args.count}, as_expected={success}, unexpected={args.count - success}")
    if dt > 0:
        print(f"RPS:   {args.count/dt:.1f} req/s")

if __name__ == "__main__":
    asyncio.run(main())
