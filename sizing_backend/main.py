import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sizing.config import get_settings
from sizing.core.pump import size_pump
from sizing.errors import ComputationFault, from_error_list
from sizing.models import PumpRequest, PumpSizingResult
from sizing.service import health_document, server_error_body, validation_error_body

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Pump Sizing API", version=settings.api_version)

# === CORS ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# === Error surface: {"error": ...} bodies instead of FastAPI's {"detail": ...} ===
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    err = from_error_list(list(exc.errors()))
    logger.info("Rejected %s %s: %s", request.method, request.url.path, err.message)
    return JSONResponse(status_code=400, content=validation_error_body(err))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = "Method not allowed" if exc.status_code == 405 else exc.detail
    return JSONResponse(status_code=exc.status_code, content={"error": message},
                        headers=getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=server_error_body(exc))


@app.get("/")
@app.get("/health")
def read_health():
    return health_document(settings)


@app.post("/calculate/pump", response_model=PumpSizingResult)
def run_pump_sizing(data: PumpRequest):
    """
    Centrifugal pump sizing at the requested duty point.
    """
    logger.info("Pump sizing: n=%s q=%s tdhm=%s", data.n, data.q, data.tdhm)
    try:
        return size_pump(data)
    except ComputationFault as exc:
        logger.exception("Pump calculation error: %s", data.model_dump())
        return JSONResponse(status_code=500, content=server_error_body(exc))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
