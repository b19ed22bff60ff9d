import os
from dataclasses import dataclass


@dataclass
class ServerConfig:
    api_key: str
    host: str = "0.0.0.0"
    port: int = 8730
    audit_enabled: bool = True


def get_server_config() -> ServerConfig:
    """Get API server configuration from environment variables.

    Expected env vars: OAKWIRE_API_KEY (required),
    OAKWIRE_SERVER_HOST, OAKWIRE_SERVER_PORT, OAKWIRE_AUDIT_ENABLED (optional)
    """

    return ServerConfig(
        api_key=os.environ["OAKWIRE_API_KEY"],
        host=os.environ.get("OAKWIRE_SERVER_HOST", "0.0.0.0"),
        port=int(os.environ.get("OAKWIRE_SERVER_PORT", "8730")),
        audit_enabled=os.environ.get("OAKWIRE_AUDIT_ENABLED", "true").lower()
        not in ("0", "false", "no"),
    )
