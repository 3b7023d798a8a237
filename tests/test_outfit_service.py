"""Tests for the outfit service wiring the wardrobe into the generator."""

from __future__ import annotations

from datetime import date

import pytest
import pytest_mock
from prometheus_client import REGISTRY
from sqlalchemy.ext.asyncio import AsyncSession

from closet.recommender import Category, OutfitGenerator
from closet.services.outfit import OutfitService
from closet.services.wardrobe import WardrobeService

TODAY = date(2026, 10, 19)
RED = (204, 36, 36)
BLUE = (36, 36, 204)


def _empty_requests() -> float:
    return REGISTRY.get_sample_value("outfit_generation_empty_total") or 0.0


@pytest.mark.asyncio
async def test_empty_wardrobe_yields_no_outfits(session: AsyncSession, wardrobe: WardrobeService) -> None:
    before = _empty_requests()

    suggestions = await OutfitService(wardrobe).suggest(session, today=TODAY)

    assert suggestions == []
    assert _empty_requests() == before + 1


@pytest.mark.asyncio
async def test_tops_without_bottoms_yield_no_outfits(
    session: AsyncSession,
    wardrobe: WardrobeService,
    image_bytes,
) -> None:
    await wardrobe.add_garment(session, file_name="t.png", file_data=image_bytes(RED), category="top")
    await wardrobe.add_garment(session, file_name="s.png", file_data=image_bytes(BLUE), category="shoes")

    assert await OutfitService(wardrobe).suggest(session, count=3, today=TODAY) == []


@pytest.mark.asyncio
async def test_suggestions_reference_stored_garments(
    session: AsyncSession,
    wardrobe: WardrobeService,
    image_bytes,
) -> None:
    top = await wardrobe.add_garment(session, file_name="t.png", file_data=image_bytes(RED), category="top")
    bottom = await wardrobe.add_garment(session, file_name="b.png", file_data=image_bytes(BLUE), category="bottom")

    suggestions = await OutfitService(wardrobe).suggest(session, count=3, today=TODAY)

    assert [s.rank for s in suggestions] == [1, 2, 3]
    assert suggestions[0].label == "Outfit 1"
    for suggestion in suggestions:
        assert suggestion.pieces == {Category.TOP: top, Category.BOTTOM: bottom}
        assert suggestion.score == 58
        assert suggestion.colors() == [[200, 32, 32], [32, 32, 200]]


@pytest.mark.asyncio
async def test_default_count_and_date_are_forwarded(
    session: AsyncSession,
    wardrobe: WardrobeService,
    image_bytes,
    mocker: pytest_mock.MockerFixture,
) -> None:
    await wardrobe.add_garment(session, file_name="t.png", file_data=image_bytes(RED), category="top")
    await wardrobe.add_garment(session, file_name="b.png", file_data=image_bytes(BLUE), category="bottom")
    generator = OutfitGenerator()
    spy = mocker.spy(generator, "generate")

    suggestions = await OutfitService(wardrobe, generator=generator, default_count=4).suggest(session, today=TODAY)

    assert len(suggestions) == 4
    spy.assert_called_once()
    assert spy.call_args.args[1] == 4
    assert spy.call_args.kwargs["today"] == TODAY
