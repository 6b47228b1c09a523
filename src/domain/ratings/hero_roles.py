"""Hero role classification used to normalise KDA across positions.

Supports typically finish games with a lower KDA than carries, so a
player's KDA is compared against the baseline of the role they played
rather than against a single global value.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType


class HeroRole(str, Enum):
    """Typical position a hero is played in."""

    HARD_CARRY = "HARD_CARRY"
    CORE = "CORE"
    OFFLANE = "OFFLANE"
    SOFT_SUPPORT = "SOFT_SUPPORT"
    HARD_SUPPORT = "HARD_SUPPORT"


DEFAULT_ROLE = HeroRole.CORE

ROLE_EXPECTED_KDA: Mapping[HeroRole, float] = MappingProxyType(
    {
        HeroRole.HARD_CARRY: 4.0,
        HeroRole.CORE: 3.5,
        HeroRole.OFFLANE: 3.0,
        HeroRole.SOFT_SUPPORT: 2.0,
        HeroRole.HARD_SUPPORT: 1.5,
    }
)

_HARD_CARRY = HeroRole.HARD_CARRY
_CORE = HeroRole.CORE
_OFFLANE = HeroRole.OFFLANE
_SOFT_SUPPORT = HeroRole.SOFT_SUPPORT
_HARD_SUPPORT = HeroRole.HARD_SUPPORT

HERO_ROLES: Mapping[int, HeroRole] = MappingProxyType(
    {
        # Position 1
        1: _HARD_CARRY,  # Anti-Mage
        6: _HARD_CARRY,  # Drow Ranger
        8: _HARD_CARRY,  # Juggernaut
        10: _HARD_CARRY,  # Morphling
        12: _HARD_CARRY,  # Phantom Lancer
        18: _HARD_CARRY,  # Sven
        41: _HARD_CARRY,  # Faceless Void
        42: _HARD_CARRY,  # Wraith King
        44: _HARD_CARRY,  # Phantom Assassin
        48: _HARD_CARRY,  # Luna
        54: _HARD_CARRY,  # Lifestealer
        63: _HARD_CARRY,  # Weaver
        67: _HARD_CARRY,  # Spectre
        70: _HARD_CARRY,  # Ursa
        72: _HARD_CARRY,  # Gyrocopter
        77: _HARD_CARRY,  # Lycan
        80: _HARD_CARRY,  # Lone Druid
        81: _HARD_CARRY,  # Chaos Knight
        82: _HARD_CARRY,  # Meepo
        89: _HARD_CARRY,  # Naga Siren
        93: _HARD_CARRY,  # Slark
        94: _HARD_CARRY,  # Medusa
        95: _HARD_CARRY,  # Troll Warlord
        109: _HARD_CARRY,  # Terrorblade
        114: _HARD_CARRY,  # Monkey King
        145: _HARD_CARRY,  # Kez
        # Position 2 and flexible cores
        4: _CORE,  # Bloodseeker
        11: _CORE,  # Shadow Fiend
        13: _CORE,  # Puck
        15: _CORE,  # Razor
        17: _CORE,  # Storm Spirit
        19: _CORE,  # Tiny
        22: _CORE,  # Zeus
        32: _CORE,  # Riki
        34: _CORE,  # Tinker
        35: _CORE,  # Sniper
        36: _CORE,  # Necrophos
        39: _CORE,  # Queen of Pain
        43: _CORE,  # Death Prophet
        45: _CORE,  # Pugna
        46: _CORE,  # Templar Assassin
        47: _CORE,  # Viper
        49: _CORE,  # Dragon Knight
        52: _CORE,  # Leshrac
        53: _CORE,  # Nature's Prophet
        56: _CORE,  # Clinkz
        59: _CORE,  # Huskar
        60: _CORE,  # Night Stalker
        61: _CORE,  # Broodmother
        73: _CORE,  # Alchemist
        74: _CORE,  # Invoker
        76: _CORE,  # Outworld Destroyer
        78: _CORE,  # Brewmaster
        98: _CORE,  # Timbersaw
        99: _CORE,  # Bristleback
        104: _CORE,  # Legion Commander
        106: _CORE,  # Ember Spirit
        113: _CORE,  # Arc Warden
        120: _CORE,  # Pangolier
        126: _CORE,  # Void Spirit
        135: _CORE,  # Dawnbreaker
        138: _CORE,  # Muerta
        # Position 3
        2: _OFFLANE,  # Axe
        14: _OFFLANE,  # Pudge
        23: _OFFLANE,  # Kunkka
        28: _OFFLANE,  # Slardar
        29: _OFFLANE,  # Tidehunter
        33: _OFFLANE,  # Enigma
        38: _OFFLANE,  # Beastmaster
        51: _OFFLANE,  # Clockwerk
        55: _OFFLANE,  # Dark Seer
        65: _OFFLANE,  # Batrider
        69: _OFFLANE,  # Doom
        71: _OFFLANE,  # Spirit Breaker
        88: _OFFLANE,  # Nyx Assassin
        96: _OFFLANE,  # Centaur Warrunner
        97: _OFFLANE,  # Magnus
        100: _OFFLANE,  # Tusk
        103: _OFFLANE,  # Elder Titan
        105: _OFFLANE,  # Techies
        107: _OFFLANE,  # Earth Spirit
        108: _OFFLANE,  # Underlord
        129: _OFFLANE,  # Mars
        137: _OFFLANE,  # Primal Beast
        # Position 4
        7: _SOFT_SUPPORT,  # Earthshaker
        9: _SOFT_SUPPORT,  # Mirana
        16: _SOFT_SUPPORT,  # Sand King
        20: _SOFT_SUPPORT,  # Vengeful Spirit
        21: _SOFT_SUPPORT,  # Windranger
        25: _SOFT_SUPPORT,  # Lina
        26: _SOFT_SUPPORT,  # Lion
        27: _SOFT_SUPPORT,  # Shadow Shaman
        40: _SOFT_SUPPORT,  # Venomancer
        62: _SOFT_SUPPORT,  # Bounty Hunter
        64: _SOFT_SUPPORT,  # Jakiro
        75: _SOFT_SUPPORT,  # Silencer
        79: _SOFT_SUPPORT,  # Shadow Demon
        84: _SOFT_SUPPORT,  # Ogre Magi
        85: _SOFT_SUPPORT,  # Undying
        86: _SOFT_SUPPORT,  # Rubick
        87: _SOFT_SUPPORT,  # Disruptor
        92: _SOFT_SUPPORT,  # Visage
        101: _SOFT_SUPPORT,  # Skywrath Mage
        102: _SOFT_SUPPORT,  # Abaddon
        110: _SOFT_SUPPORT,  # Phoenix
        119: _SOFT_SUPPORT,  # Dark Willow
        121: _SOFT_SUPPORT,  # Grimstroke
        123: _SOFT_SUPPORT,  # Hoodwink
        128: _SOFT_SUPPORT,  # Snapfire
        131: _SOFT_SUPPORT,  # Ringmaster
        136: _SOFT_SUPPORT,  # Marci
        # Position 5
        3: _HARD_SUPPORT,  # Bane
        5: _HARD_SUPPORT,  # Crystal Maiden
        30: _HARD_SUPPORT,  # Witch Doctor
        31: _HARD_SUPPORT,  # Lich
        37: _HARD_SUPPORT,  # Warlock
        50: _HARD_SUPPORT,  # Dazzle
        57: _HARD_SUPPORT,  # Omniknight
        58: _HARD_SUPPORT,  # Enchantress
        66: _HARD_SUPPORT,  # Chen
        68: _HARD_SUPPORT,  # Ancient Apparition
        83: _HARD_SUPPORT,  # Treant Protector
        90: _HARD_SUPPORT,  # Keeper of the Light
        91: _HARD_SUPPORT,  # Io
        111: _HARD_SUPPORT,  # Oracle
        112: _HARD_SUPPORT,  # Winter Wyvern
        155: _HARD_SUPPORT,  # Largo
    }
)


def hero_role(hero_id: int) -> HeroRole:
    """Return the hero's usual role; unknown heroes count as cores."""
    return HERO_ROLES.get(hero_id, DEFAULT_ROLE)


def expected_kda(hero_id: int) -> float:
    return ROLE_EXPECTED_KDA[hero_role(hero_id)]


def normalize_kda(kda: float, hero_id: int) -> float:
    """Scale a KDA so that 1.0 means average for the hero's role."""
    return kda / expected_kda(hero_id)


__all__ = [
    "DEFAULT_ROLE",
    "HERO_ROLES",
    "HeroRole",
    "ROLE_EXPECTED_KDA",
    "expected_kda",
    "hero_role",
    "normalize_kda",
]
