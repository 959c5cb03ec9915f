from typing import Any, Dict, Optional

from .._config import ClientConfig


def get_httpx_client_kwargs(config: Optional[ClientConfig] = None) -> Dict[str, Any]:
    """Get standardized httpx client configuration."""
    config = config or ClientConfig.from_env()
    client_kwargs: Dict[str, Any] = {
        "follow_redirects": config.follow_redirects,
        "timeout": config.timeout,
    }

    if config.base_url:
        client_kwargs["base_url"] = config.base_url

    if config.default_headers:
        client_kwargs["headers"] = dict(config.default_headers)

    # HTTP_PROXY, HTTPS_PROXY, NO_PROXY are read by httpx by default
    return client_kwargs
