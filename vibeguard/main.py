"""
VibeGuard FastAPI Application.

Pattern-based SAST scanner with an optional AI logic audit:
  POST /scan       → findings, quality score and grade
  POST /scan/text  → the same as a plain-text audit report
  POST /score      → score an externally assembled findings list
  GET  /rules      → rule catalog, optionally filtered by language
  GET  /health     → {"status": "ok", ...}
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vibeguard.api.routes.health import router as health_router
from vibeguard.api.routes.rules import router as rules_router
from vibeguard.api.routes.scan import router as scan_router
from vibeguard.config import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("vibeguard")

app = FastAPI(
    title="VibeGuard",
    description="Static security and quality scanner for JavaScript, TypeScript and Python",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(rules_router)
app.include_router(scan_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = await request.body()
    logger.error(f"Validation Error. Raw body: {body.decode('utf-8')[:500]} | Errors: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": exc.errors(), "body": body.decode("utf-8")[:100]},
    )
