"""Request models for the hatchery API."""

from typing import Optional

from pydantic import BaseModel


class HatchRequest(BaseModel):
    """Request to hatch one creature.

    ``rarity`` forces a tier ("common", "uncommon", "rare", "legendary");
    ``seed`` makes the draws reproducible. When both are given the seed drives
    every draw except the rarity roll.
    """

    rarity: Optional[str] = None
    seed: Optional[int] = None


class BatchHatchRequest(BaseModel):
    """Request to hatch several creatures in one call."""

    count: int = 1
    rarity: Optional[str] = None
    seed: Optional[int] = None
