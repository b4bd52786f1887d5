#!/usr/bin/env python3
"""Load hotel records from a JSON array file into the hotels table."""

import asyncio
import json
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from hotel_browser.config import get_app_settings
from hotel_browser.db import acquire, close_db, init_db
from hotel_browser.models import Hotel

COLUMNS = ["id", "hotel_name", "hotel_rating", "city"] + [f"feature_{i}" for i in range(1, 10)] + ["hotel_price"]


async def seed_hotels(path: str) -> int:
    with open(path, encoding="utf-8") as f:
        hotels = [Hotel.model_validate(item) for item in json.load(f)]

    table = get_app_settings().database.table
    placeholders = ", ".join(f"${i}" for i in range(1, len(COLUMNS) + 1))
    updates = ", ".join(f"{column} = EXCLUDED.{column}" for column in COLUMNS[1:])

    await init_db()
    try:
        async with acquire() as conn:
            await conn.executemany(
                f"INSERT INTO {table} ({', '.join(COLUMNS)}) VALUES ({placeholders}) "
                f"ON CONFLICT (id) DO UPDATE SET {updates}",
                [tuple(getattr(hotel, column) for column in COLUMNS) for hotel in hotels]
            )
    finally:
        await close_db()

    return len(hotels)


if __name__ == '__main__':
    if len(sys.argv) != 2:
        print(f'Usage: {sys.argv[0]} HOTELS_JSON', file=sys.stderr)
        sys.exit(2)

    try:
        count = asyncio.run(seed_hotels(sys.argv[1]))
    except Exception as e:
        print(f'Error: {e}')
        sys.exit(1)

    print(f'Seeded {count} hotels')
