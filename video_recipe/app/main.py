# video_recipe/app/main.py
from __future__ import annotations

import logging
import sys

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from video_recipe.app.config import settings
from video_recipe.app.deps import close_http_client
from video_recipe.app.routers.recipes import router as recipes_router, status_for_error
from video_recipe.services.errors import ServiceError

INTERNAL_ERROR_MESSAGE = "Internal server error"

# Logging simples no stdout (bom para dev e containers)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

app = FastAPI(title="Video Recipe API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recipes_router)


# Erros levantados fora dos handlers (ex.: dependencias sem configuracao)
@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logging.getLogger("recipes").error("%s em %s: %s", type(exc).__name__, request.url.path, exc)
    return JSONResponse(status_code=status_for_error(exc), content={"detail": exc.public_message})


# Qualquer outra falha: traceback no log, mensagem curta para o cliente
@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.getLogger("recipes").exception("Erro inesperado em %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": INTERNAL_ERROR_MESSAGE})


@app.on_event("shutdown")
async def shutdown() -> None:
    close_http_client()


@app.get("/health")
def health():
    return {"ok": True}
