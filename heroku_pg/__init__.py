"""
heroku_pg
---------
Given a DATABASE_URL, connecting to Heroku Postgres should be dead simple.

    from heroku_pg import get_client, get_pool, smoke_test

    client = get_client(database_url)
    smoke_test(client)

    pool = get_pool(database_url, max_size=20)
    with pool.connection() as conn:
        conn.execute("SELECT 1")

Heroku requires TLS but only offers self-signed certificates, so every
connection made here is encrypted with certificate verification turned off.
"""

from heroku_pg.db.connection import (
    ConnectionFailed,
    TransportConfig,
    get_client,
    get_connector,
    get_pool,
)
from heroku_pg.services.smoke_test import SmokeTestRow, smoke_test, smoke_test_pool

__version__ = "0.1.0"

__all__ = [
    "ConnectionFailed",
    "SmokeTestRow",
    "TransportConfig",
    "get_client",
    "get_connector",
    "get_pool",
    "smoke_test",
    "smoke_test_pool",
]
