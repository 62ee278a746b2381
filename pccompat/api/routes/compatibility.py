"""
Compatibility API routes
"""
import json
from typing import Any, Dict, List, Sequence
from fastapi import APIRouter, HTTPException, status, Depends

from pccompat.core.cache import cache, generate_cache_key
from pccompat.core.config import settings
from pccompat.core.dependencies import get_engine
from pccompat.core.logging import get_logger
from pccompat.api.models.base import ERROR_RESPONSES
from pccompat.api.models.component import ComponentCategory, ComponentSpecification, COMPONENT_CATEGORIES_VI
from pccompat.api.models.compatibility import (
    CartCheckRequest,
    CartCheckResponse,
    CategoryLabel,
    CompatibilityCheckRequest,
    CompatibilityReport,
    Severity,
    SuggestionRequest,
    SuggestionResponse,
)
from pccompat.api.services.catalog_mapper import cart_to_components, has_pc_components
from pccompat.api.services.compatibility_engine import CompatibilityEngine
from pccompat.api.services.performance import estimate_performance

logger = get_logger(__name__)

router = APIRouter()


def _reject_unknown_categories(components: Sequence[ComponentSpecification]) -> None:
    if not settings.reject_unknown_categories:
        return
    unknown = [c.id for c in components if c.component_category is None]
    if unknown:
        logger.warning(f"Rejecting components with unknown categories: {unknown}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error": "Unknown component category",
                "components": unknown,
                "allowed": [category.value for category in ComponentCategory],
            }
        )


async def _build_report(components: Sequence[ComponentSpecification], engine: CompatibilityEngine) -> Dict[str, Any]:
    """Run the check, reusing a cached report for an identical build"""
    cache_key = None
    if settings.enable_result_cache:
        payload = json.dumps(
            {
                "components": [c.model_dump(mode="json") for c in components],
                "sockets": {socket: list(gens) for socket, gens in engine.socket_registry.items()},
            },
            sort_keys=True,
            ensure_ascii=False,
        )
        cache_key = generate_cache_key("compatibility", payload)
        cached_report = await cache.get(cache_key)
        if cached_report is not None:
            logger.info(f"[CACHE HIT] Compatibility report for {len(components)} component(s)")
            return {**cached_report, "cached": True}

    result = engine.check(components)
    report = {
        **result.model_dump(mode="json"),
        "error_count": result.count(Severity.ERROR),
        "warning_count": result.count(Severity.WARNING),
        "info_count": result.count(Severity.INFO),
        "performance": estimate_performance(components).model_dump(),
    }

    if cache_key is not None:
        await cache.set(cache_key, report, settings.result_cache_ttl)
    return {**report, "cached": False}


@router.get(
    "/compatibility/categories",
    status_code=status.HTTP_200_OK,
    summary="List component categories",
    description="Component categories with their Vietnamese display labels"
)
async def list_categories() -> List[CategoryLabel]:
    return [CategoryLabel(category=category, label=label) for category, label in COMPONENT_CATEGORIES_VI.items()]


@router.get(
    "/compatibility/sockets",
    status_code=status.HTTP_200_OK,
    summary="List socket registry",
    description="CPU generations considered supported for each known socket"
)
async def list_sockets(engine: CompatibilityEngine = Depends(get_engine)) -> Dict[str, List[str]]:
    return {socket: list(generations) for socket, generations in engine.socket_registry.items()}


@router.post(
    "/compatibility/check",
    response_model=CompatibilityReport,
    responses=ERROR_RESPONSES,
    status_code=status.HTTP_200_OK,
    summary="Check build compatibility",
    description="Check a set of PC components for compatibility and compute total power draw and price"
)
async def check_compatibility(
    request: CompatibilityCheckRequest,
    engine: CompatibilityEngine = Depends(get_engine)
):
    """Check a set of components"""
    logger.info(f"Compatibility check requested for {len(request.components)} component(s)")
    _reject_unknown_categories(request.components)
    return await _build_report(request.components, engine)


@router.post(
    "/compatibility/suggestions",
    response_model=SuggestionResponse,
    responses=ERROR_RESPONSES,
    status_code=status.HTTP_200_OK,
    summary="Suggest next component",
    description="Guidance for choosing a component of the target category given the parts already chosen"
)
async def compatibility_suggestions(
    request: SuggestionRequest,
    engine: CompatibilityEngine = Depends(get_engine)
):
    _reject_unknown_categories(request.existing_components)
    suggestions = engine.suggest(request.existing_components, request.target_category, request.locale)
    logger.debug(f"{len(suggestions)} suggestion(s) for {request.target_category}")
    return SuggestionResponse(target_category=request.target_category.strip().upper(), suggestions=suggestions)


@router.post(
    "/compatibility/cart/check",
    response_model=CartCheckResponse,
    responses=ERROR_RESPONSES,
    status_code=status.HTTP_200_OK,
    summary="Check cart before checkout",
    description="Map catalog products in a cart to components, check them and report whether checkout may proceed"
)
async def check_cart(
    request: CartCheckRequest,
    engine: CompatibilityEngine = Depends(get_engine)
):
    components = cart_to_components(request.items)
    logger.info(f"Cart check for {len(request.items)} item(s)")
    report = await _build_report(components, engine)
    return {
        **report,
        "checkout_allowed": report["is_compatible"],
        "compatibility_check_recommended": has_pc_components(components),
    }
