"""HTTP clients."""

from oss_client.clients.oss_client import OssClient

__all__ = ["OssClient"]
