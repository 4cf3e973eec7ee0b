"""
Connection layer: transport settings, single clients and pools.
"""

from heroku_pg.db.connection import (
    ConnectionFailed,
    TransportConfig,
    check_database_url,
    get_client,
    get_connector,
    get_pool,
    mask_database_url,
)

__all__ = [
    "ConnectionFailed",
    "TransportConfig",
    "check_database_url",
    "get_client",
    "get_connector",
    "get_pool",
    "mask_database_url",
]
