import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import models  # noqa: F401  registers tables on Base.metadata
from .db import Base, engine
from .gemini_client import get_rephraser
from .questions import get_question_bank
from .settings import settings
from .routers import admin, quiz

logger = logging.getLogger(__name__)

app = FastAPI(title="German Level Quiz API")

_allowed_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
if _allowed_origins:
	app.add_middleware(
		CORSMiddleware,
		allow_origins=_allowed_origins,
		allow_methods=["GET", "POST", "OPTIONS"],
		allow_headers=["Content-Type", "x-api-key"],
	)

app.include_router(quiz.router)
app.include_router(admin.router)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
	return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
	logger.info("rejected request to %s: %s", request.url.path, exc.errors())
	return JSONResponse(status_code=400, content={"error": "Invalid request data"})


@app.get("/info")
def info():
	return {
		"status": "ok",
		"rephrase_configured": get_rephraser() is not None,
		"questions": len(get_question_bank()),
	}


@app.on_event("startup")
async def startup_event():
	Base.metadata.create_all(bind=engine)
	logger.info("database ready at %s", engine.url.render_as_string(hide_password=True))
