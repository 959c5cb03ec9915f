from ._base import RestClientAdapter, get_default_executor
from ._httpx_adapter import HttpxClientAdapter

__all__ = [
    "HttpxClientAdapter",
    "RestClientAdapter",
    "get_default_executor",
]
