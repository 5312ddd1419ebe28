"""Genetics API endpoints.

This router provides endpoints for:
- Hatching a creature (optionally with a forced rarity or a seed)
- Hatching a batch of creatures
- Reading hatch statistics and the generator's table summary
- Listing rarity tiers and species
"""

import logging
from typing import Any, List, Optional

import orjson
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from backend.models import BatchHatchRequest, HatchRequest
from hatchery.config.server import MAX_BATCH_HATCH
from hatchery.exceptions import ConfigurationError, InvalidOverrideError
from hatchery.genetics.generator import CreatureGeneticsGenerator
from hatchery.genetics.profile import GeneticProfile
from hatchery.genetics.profile_codec import profile_to_dict
from hatchery.util.rng import RandomSource, rng_from_seed

logger = logging.getLogger(__name__)


def _json_response(payload: Any, status_code: int = status.HTTP_200_OK) -> Response:
    return Response(
        content=orjson.dumps(payload),
        media_type="application/json",
        status_code=status_code,
    )


def _hatch(
    generator: CreatureGeneticsGenerator,
    rarity: Optional[str],
    rng: Optional[RandomSource],
) -> GeneticProfile:
    try:
        return generator.generate(rarity=rarity, rng=rng)
    except InvalidOverrideError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except ConfigurationError as e:
        logger.error("Genetics tables failed during hatch: %s", e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Genetics configuration error",
        ) from e


def setup_router(context) -> APIRouter:
    """Setup the genetics router.

    Args:
        context: AppContext holding the generator and stats recorder

    Returns:
        Configured APIRouter
    """
    router = APIRouter(prefix="/api/genetics", tags=["genetics"])
    generator: CreatureGeneticsGenerator = context.generator

    @router.post("/hatch")
    async def hatch(request: HatchRequest):
        """Hatch one creature and return its genetic profile."""
        rng = rng_from_seed(request.seed) if request.seed is not None else None
        profile = _hatch(generator, request.rarity, rng)
        logger.info(
            "Hatched %s %s (%s)", profile.rarity.value, profile.species, profile.id
        )
        return _json_response(profile_to_dict(profile))

    @router.post("/hatch/batch")
    async def hatch_batch(request: BatchHatchRequest):
        """Hatch ``count`` creatures; a seed makes the whole batch reproducible."""
        if not 1 <= request.count <= MAX_BATCH_HATCH:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"count must be between 1 and {MAX_BATCH_HATCH}",
            )
        rng = rng_from_seed(request.seed) if request.seed is not None else None
        profiles: List[dict] = [
            profile_to_dict(_hatch(generator, request.rarity, rng)) for _ in range(request.count)
        ]
        logger.info("Hatched batch of %d creatures", len(profiles))
        return _json_response({"count": len(profiles), "profiles": profiles})

    @router.get("/stats")
    async def get_stats():
        """Hatch counters plus the generator's table summary."""
        return _json_response(
            {
                "hatches": context.stats.snapshot(),
                "system": generator.system_stats(),
                "uptime_seconds": context.uptime_seconds,
            }
        )

    @router.get("/rarities")
    async def list_rarities():
        """Rarity tiers in ascending order with their selection weights."""
        return _json_response(
            [
                {"tier": profile.tier.value, "weight": profile.weight}
                for profile in generator.tables.rarities
            ]
        )

    @router.get("/species")
    async def list_species():
        """Species templates with their weights and tendencies."""
        return _json_response(
            [
                {
                    "species": template.species_id,
                    "weight": template.weight,
                    "wing_type": template.wing_type,
                    "preferred_body_shape": template.body_shape.preferred,
                    "personality_tendencies": list(template.personality_tendencies),
                    "cosmic_affinities": list(template.cosmic_affinities),
                }
                for template in generator.tables.species
            ]
        )

    return router
