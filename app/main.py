import json, logging, time, uuid
from datetime import datetime, timezone
from fastapi import Request
from fastapi import FastAPI, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from app import config
from app.dog_client import DogApiClient
from app.errors import (
    NetworkFailure,
    Result,
    Success,
    UpstreamError,
    UpstreamTimeout,
)
from app.models import ErrorBody

class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        #include structured context if present
        for field in (
            "request_id",
            "path",
            "status_code",
            "duration_ms",
            "breed",
            "upstream_url",
            "error_kind",
            "error",
            "service",
            "environment",
        ):
            if hasattr(record, field):
                log_record[field] = getattr(record, field)

        return json.dumps(log_record)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

handler = logging.StreamHandler()
handler.setFormatter(JsonFormatter())

logger = logging.getLogger("dog-proxy")
logger.setLevel(config.LOG_LEVEL)
logger.addHandler(handler)
logger.propagate = False

app = FastAPI(title=config.SERVICE_NAME)

@app.middleware("http")
async def add_request_id(request: Request, call_next):
    start_time = time.time()
    request_id = str(uuid.uuid4())
    # attach to request state
    request.state.request_id = request_id

    logger.info(
        "Request started",
        extra={"request_id": request_id, "path": request.url.path},
    )

    response = None
    try:
        response = await call_next(request)
        return response

    finally:
        # AFTER request
        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "path": request.url.path,
                "status_code": response.status_code if response is not None else 500,
                "duration_ms": round(duration_ms, 2),
            },
        )
        if response is not None:
            response.headers["X-Request-ID"] = request_id

def get_dog_client() -> DogApiClient:
    return DogApiClient()

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorBody(message=message).model_dump(),
    )

def to_response(request: Request, result: Result[BaseModel]) -> JSONResponse:
    """Map a client result onto exactly one HTTP response.

    Success -> 200 with ``{"data": ...}``; NetworkFailure -> 500;
    UpstreamError -> the upstream status; UpstreamTimeout -> 504;
    anything else -> 400. Failures use ``{"status": "error", "message": ...}``.
    """
    if isinstance(result, Success):
        return JSONResponse(status_code=200, content=result.value.model_dump())

    if isinstance(result, NetworkFailure):
        status_code = 500
    elif isinstance(result, UpstreamError):
        status_code = result.status_code
    elif isinstance(result, UpstreamTimeout):
        status_code = 504
    else:
        status_code = 400

    logger.warning(
        "Upstream failure mapped",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "path": request.url.path,
            "status_code": status_code,
            "error_kind": type(result).__name__,
        },
    )
    return error_response(status_code, result.message)

@app.get("/list")
async def list_breeds(request: Request, client: DogApiClient = Depends(get_dog_client)):
    result = await client.fetch_breed_list()
    return to_response(request, result)

@app.get("/pics/{breed:path}")
async def breed_pics(breed: str, request: Request, client: DogApiClient = Depends(get_dog_client)):
    logger.debug(
        "Fetching breed pictures",
        extra={"request_id": getattr(request.state, "request_id", None), "breed": breed},
    )
    result = await client.fetch_breed_pics(breed)
    return to_response(request, result)

@app.get("/health")
def health(request: Request):
    return {
        "status": "ok",
        "service": config.SERVICE_NAME,
        "environment": config.ENVIRONMENT,
        "request_id": getattr(request.state, "request_id", None),
    }

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled error",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "path": request.url.path,
            "error": str(exc),
        },
    )
    response = error_response(500, "Internal server error")
    # raised past the middleware, so the header is set here
    request_id = getattr(request.state, "request_id", None)
    if request_id is not None:
        response.headers["X-Request-ID"] = request_id
    return response

logger.info(
    "Service starting",
    extra={
        "service": config.SERVICE_NAME,
        "environment": config.ENVIRONMENT,
    },
)
