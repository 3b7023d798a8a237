"""FastAPI entrypoint and HTTP routes.

Serve with ``uvicorn closet.api.main:create_app --factory``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import date
from pathlib import Path
from typing import AsyncIterator

from fastapi import Depends, FastAPI, File, Form, HTTPException, Query, Request, UploadFile, status
from fastapi.responses import FileResponse, JSONResponse
from prometheus_client import make_asgi_app
from sqlalchemy.ext.asyncio import AsyncSession

from closet.api.schemas import GarmentCount, GarmentOut, OutfitOut
from closet.config.settings import Settings, get_settings
from closet.db.session import create_engine, create_session_factory, init_db
from closet.errors import ClosetError, GarmentNotFoundError, ImageDecodeError, UnknownCategoryError
from closet.imgproc.color_extract import ColorExtractor
from closet.imgproc.thumbnail import ThumbnailMaker
from closet.monitoring.logging import configure_logging
from closet.services.outfit import OutfitService
from closet.services.wardrobe import WardrobeService, resolve_category
from closet.storage.backend import LocalStorage

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[ClosetError], int] = {
    GarmentNotFoundError: 404,
    UnknownCategoryError: 422,
    ImageDecodeError: 400,
}


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield a managed asynchronous SQLAlchemy session."""

    async with request.app.state.session_factory() as session:
        yield session


def get_wardrobe(request: Request) -> WardrobeService:
    return request.app.state.wardrobe


def get_outfits(request: Request) -> OutfitService:
    return request.app.state.outfits


def get_today() -> date:
    """Calendar date used to seed today's outfits."""

    return date.today()


async def _closet_error_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code = next(
        (code for error_cls, code in ERROR_STATUS.items() if isinstance(exc, error_cls)),
        500,
    )
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Initialise the FastAPI application."""

    settings = settings or get_settings()
    configure_logging(settings)

    engine = create_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()

    app = FastAPI(
        title="Laundry Closet API",
        version="0.1.0",
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
        lifespan=lifespan,
    )

    wardrobe = WardrobeService(
        LocalStorage(Path(settings.media_root)),
        thumbnails=ThumbnailMaker(settings.thumbnail_max_width, settings.thumbnail_quality),
        colors=ColorExtractor(),
    )
    app.state.session_factory = create_session_factory(engine)
    app.state.wardrobe = wardrobe
    app.state.outfits = OutfitService(wardrobe, default_count=settings.outfit_count)
    app.add_exception_handler(ClosetError, _closet_error_handler)
    app.mount("/metrics", make_asgi_app())

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok"}

    @app.post(
        "/garments",
        tags=["closet"],
        response_model=GarmentOut,
        status_code=status.HTTP_201_CREATED,
    )
    async def add_garment(
        file: UploadFile = File(...),
        category: str = Form(...),
        session: AsyncSession = Depends(get_session),
        service: WardrobeService = Depends(get_wardrobe),
    ) -> GarmentOut:
        """Store a garment photo under the given category."""

        data = await file.read()
        if not data:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Uploaded file is empty.")
        garment = await service.add_garment(
            session,
            file_name=file.filename or "garment.jpg",
            file_data=data,
            category=category,
        )
        return GarmentOut.from_model(garment)

    @app.get("/garments", tags=["closet"], response_model=list[GarmentOut])
    async def list_garments(
        category: str = Query("all", description="Category or alias, e.g. 'top' or 'jeans'"),
        session: AsyncSession = Depends(get_session),
        service: WardrobeService = Depends(get_wardrobe),
    ) -> list[GarmentOut]:
        """List garments, newest first."""

        resolved = None if category == "all" else resolve_category(category)
        garments = await service.list_garments(session, category=resolved)
        return [GarmentOut.from_model(garment) for garment in garments]

    @app.get("/garments/count", tags=["closet"], response_model=GarmentCount)
    async def count_garments(
        session: AsyncSession = Depends(get_session),
        service: WardrobeService = Depends(get_wardrobe),
    ) -> GarmentCount:
        return GarmentCount(count=await service.count_garments(session))

    @app.get("/garments/{garment_id}", tags=["closet"], response_model=GarmentOut)
    async def get_garment(
        garment_id: int,
        session: AsyncSession = Depends(get_session),
        service: WardrobeService = Depends(get_wardrobe),
    ) -> GarmentOut:
        return GarmentOut.from_model(await service.get_garment(session, garment_id))

    @app.get("/garments/{garment_id}/image", tags=["closet"])
    async def get_garment_image(
        garment_id: int,
        session: AsyncSession = Depends(get_session),
        service: WardrobeService = Depends(get_wardrobe),
    ) -> FileResponse:
        garment = await service.get_garment(session, garment_id)
        return FileResponse(garment.storage_path)

    @app.get("/garments/{garment_id}/thumbnail", tags=["closet"])
    async def get_garment_thumbnail(
        garment_id: int,
        session: AsyncSession = Depends(get_session),
        service: WardrobeService = Depends(get_wardrobe),
    ) -> FileResponse:
        """Return the thumbnail, or the full photo when no thumbnail is stored."""

        garment = await service.get_garment(session, garment_id)
        path = garment.thumbnail_path
        if not path or not Path(path).exists():
            path = garment.storage_path
        return FileResponse(path)

    @app.delete(
        "/garments/{garment_id}",
        tags=["closet"],
        status_code=status.HTTP_204_NO_CONTENT,
    )
    async def remove_garment(
        garment_id: int,
        session: AsyncSession = Depends(get_session),
        service: WardrobeService = Depends(get_wardrobe),
    ) -> None:
        await service.remove_garment(session, garment_id)

    @app.get("/outfits/today", tags=["outfits"], response_model=list[OutfitOut])
    async def todays_outfits(
        count: int | None = Query(None, ge=1, le=20),
        session: AsyncSession = Depends(get_session),
        service: OutfitService = Depends(get_outfits),
        today: date = Depends(get_today),
    ) -> list[OutfitOut]:
        """Ranked outfits for the current calendar day."""

        suggestions = await service.suggest(session, count=count, today=today)
        return [OutfitOut.from_suggestion(suggestion) for suggestion in suggestions]

    return app
