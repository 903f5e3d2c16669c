"""HTTP client for talking to the POS server from a till."""

from src.infrastructure.client.pos_client import POSClient

__all__ = ["POSClient"]
