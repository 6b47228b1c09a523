"""External match-history providers."""

from providers.opendota import OpenDotaClient, PlayerProfile, steam_id64_to_32

__all__ = ["OpenDotaClient", "PlayerProfile", "steam_id64_to_32"]
