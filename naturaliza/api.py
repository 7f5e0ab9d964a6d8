"""Ponto de entrada REST do coletor de naturalizações."""
from __future__ import annotations

import logging
import traceback
from typing import Optional, Union

import uvicorn
from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from naturaliza.container import AppContainer, build_container
from naturaliza.domain import FetchResult, NaturalizationRecord, ResultEntry, SearchDate
from naturaliza.settings import get_settings

MISSING_DATE_ERROR = "Missing ?date=DD-MM-YYYY"


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class NaturalizationResponse(_CamelModel):
    """Naturalizando extraído da versão certificada."""

    name: str
    id: str
    origin: str
    birth_date: str = Field(alias="birthDate")
    parent1: str
    parent2: str
    process: str


class PortariaResponse(_CamelModel):
    """Portaria encontrada na listagem diária."""

    title: str
    detail_url: str = Field(alias="detailUrl")
    #: Endereço da versão certificada; ``null`` quando não localizada.
    certified_url: Optional[str] = Field(alias="certifiedUrl")


class ResultEntryResponse(_CamelModel):
    """Resultado de uma portaria; ``warning`` só aparece em falhas parciais."""

    portaria: PortariaResponse
    naturalizados: list[NaturalizationResponse]
    warning: Optional[str] = None


class FetchResponse(_CamelModel):
    """Corpo devolvido por ``GET /fetch``."""

    date: str
    results: list[ResultEntryResponse]


def _map_record(record: NaturalizationRecord) -> NaturalizationResponse:
    return NaturalizationResponse(
        name=record.name,
        id=record.id,
        origin=record.origin,
        birth_date=record.birth_date,
        parent1=record.parent1,
        parent2=record.parent2,
        process=record.process,
    )


def _map_entry(entry: ResultEntry) -> ResultEntryResponse:
    values = {
        "portaria": PortariaResponse(
            title=entry.portaria.title,
            detail_url=entry.portaria.detail_url,
            certified_url=entry.certified_url,
        ),
        "naturalizados": [_map_record(record) for record in entry.naturalizados],
    }
    if entry.warning is not None:
        values["warning"] = entry.warning
    return ResultEntryResponse(**values)


def map_fetch_response(result: FetchResult) -> FetchResponse:
    """Converte o resultado do serviço no modelo publicado pela API."""

    return FetchResponse(
        date=result.date.value,
        results=[_map_entry(entry) for entry in result.results],
    )


def configure_cors(app: FastAPI) -> None:
    """Aplica a configuração padrão de CORS."""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def include_routes(app: FastAPI, container: AppContainer, *, prefix: str = "") -> None:
    """Registra as rotas de consulta na aplicação informada."""

    router = APIRouter(prefix=prefix, tags=["Naturalizações"])
    log = logging.getLogger("naturaliza.api")

    @router.get("/health")
    def health() -> dict[str, bool]:
        return {"ok": True}

    @router.get(
        "/fetch",
        response_model=FetchResponse,
        response_model_by_alias=True,
        response_model_exclude_unset=True,
    )
    def fetch_naturalizations(
        date: Optional[str] = Query(default=None, description="Data no formato DD-MM-YYYY"),
    ) -> Union[FetchResponse, JSONResponse]:
        """Consulta a edição do dia e retorna as naturalizações encontradas."""

        if not date:
            return JSONResponse(status_code=400, content={"error": MISSING_DATE_ERROR})

        search_date = SearchDate.normalize(date)
        try:
            result = container.fetch_service.fetch(search_date)
        except Exception as exc:
            log.exception("falha ao consultar %s", search_date)
            return JSONResponse(
                status_code=500,
                content={"error": str(exc), "stack": traceback.format_exc()},
            )
        return map_fetch_response(result)

    app.include_router(router)


def create_app(container: AppContainer | None = None) -> FastAPI:
    """Cria a aplicação FastAPI com as rotas configuradas."""

    container = container or build_container()
    app = FastAPI(
        title="Naturaliza API",
        version="1.0.0",
        description=(
            "Consulta as portarias do Diário Oficial da União e extrai as "
            "concessões de nacionalidade brasileira publicadas na data."
        ),
    )
    configure_cors(app)
    include_routes(app, container)
    return app


def run() -> None:
    """Executa a API utilizando o Uvicorn."""

    load_dotenv()
    settings = get_settings()
    uvicorn.run(
        "naturaliza.api:create_app",
        host=settings.bind_host,
        port=settings.port,
        factory=True,
    )


__all__ = [
    "FetchResponse",
    "MISSING_DATE_ERROR",
    "configure_cors",
    "create_app",
    "include_routes",
    "map_fetch_response",
    "run",
]
