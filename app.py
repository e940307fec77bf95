from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import config
from exceptions import MalformedResponseError, MissingFieldError, ServiceError
from schemas import AnalysisRequest, AnalysisResult, ErrorResponse, HealthOut
from analysis.service import AnalysisService

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared analysis service once per process."""
    service = AnalysisService()
    if not service.configured:
        logger.warning("OPENAI_API_KEY is not set; analysis requests will fail")
    logger.info(f"Using model {service.model} at {service.base_url}")
    app.state.analysis_service = service

    yield
    logger.info("Application shutting down.")


class PreflightCORSMiddleware(CORSMiddleware):
    """CORSMiddleware whose successful preflight answers carry no body."""

    def preflight_response(self, request_headers):
        response = super().preflight_response(request_headers)
        if response.status_code != 200:
            return response
        headers = {
            k: v for k, v in response.headers.items()
            if k not in ("content-length", "content-type")
        }
        return Response(status_code=200, headers=headers)


app = FastAPI(title="Resume Tailor", lifespan=lifespan)
app.add_middleware(
    PreflightCORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


def _error(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


def get_analysis_service(request: Request) -> AnalysisService:
    service = getattr(request.app.state, "analysis_service", None)
    if service is None:
        service = AnalysisService()
        request.app.state.analysis_service = service
    return service


# -------------------------------------------------------------------
# Error handlers: every failure is {"error": "..."}
# -------------------------------------------------------------------
@app.exception_handler(MissingFieldError)
async def missing_field_handler(request: Request, exc: MissingFieldError):
    return _error(400, exc.message)


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected request body: {exc.errors()}")
    return _error(400, "Invalid request body")


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return _error(500, exc.message)


@app.exception_handler(MalformedResponseError)
async def malformed_response_handler(request: Request, exc: MalformedResponseError):
    return _error(500, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Analyze API error")
    # runs outside the CORS middleware, so the header is set here
    return _error(500, "Internal server error", headers={"Access-Control-Allow-Origin": "*"})


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------
@app.post(
    "/api/analyze",
    response_model=AnalysisResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def analyze(payload: AnalysisRequest, service: AnalysisService = Depends(get_analysis_service)):
    """Critique a resume for a role (and optional company) with the LLM."""
    return service.analyze(payload)


@app.options("/api/analyze", include_in_schema=False)
def analyze_preflight():
    return Response(status_code=200)


@app.get("/health", response_model=HealthOut)
def health(service: AnalysisService = Depends(get_analysis_service)):
    return HealthOut(status="ok", model=service.model)
