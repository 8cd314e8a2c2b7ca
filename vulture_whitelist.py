"""Vulture whitelist — false positives that are actually used by consumers or frameworks."""

# ---------------------------------------------------------------------------
# Public API (used by consumers, not internally)
# ---------------------------------------------------------------------------
from realip.realip import RealIP

RealIP.resolve
RealIP.fastapi_dependency

from realip.integrations.fastapi import create_client_ip_dep, get_client_ip

create_client_ip_dep
get_client_ip

# ---------------------------------------------------------------------------
# Dataclass hooks (called by dataclasses machinery)
# ---------------------------------------------------------------------------
_.__post_init__
