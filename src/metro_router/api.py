"""FastAPI web interface for the metro router."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Optional

from .config import CORS_ORIGINS, HOST, PORT, configure_logging
from .exceptions import InvalidInput, MetroRouterError, NoRouteFound, UnknownStation
from .network import get_network
from .routing import find_route

logger = logging.getLogger(__name__)

SAME_STATION_MESSAGE = "You are already at your destination!"

# HTTP status for each error the handlers can raise
ERROR_STATUS_CODES = {
    InvalidInput: 400,
    UnknownStation: 400,
    NoRouteFound: 404,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the metro network before serving; a broken topology stops startup."""
    network = get_network()
    logger.info(f"Metro Router ready: {len(network)} stations")
    yield


app = FastAPI(
    title="Metro Router",
    description="Shortest routes between stations on a multi-line metro network",
    version="0.1.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class RouteRequest(BaseModel):
    start: Optional[str] = None
    end: Optional[str] = None


@app.exception_handler(MetroRouterError)
async def metro_router_error_handler(request: Request, exc: MetroRouterError):
    status_code = ERROR_STATUS_CODES.get(type(exc), 500)
    if status_code >= 500:
        logger.error(f"Unhandled router error [{exc.code}]: {exc.message}")
    return JSONResponse(status_code=status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are reported like missing fields."""
    logger.debug(f"Rejected request body: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": InvalidInput().message})


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Metro Router"}


@app.post("/calculate-route")
async def calculate_route(request: Optional[RouteRequest] = None):
    """Calculate the cheapest route between two stations."""
    if request is None or not request.start or not request.end:
        raise InvalidInput()

    start, end = request.start, request.end
    logger.info(f"Route requested: {start!r} -> {end!r}")

    network = get_network()
    for station in (start, end):
        if station not in network:
            raise UnknownStation(station)

    if start == end:
        return {
            "path": [start],
            "time": 0,
            "cost": 0,
            "message": SAME_STATION_MESSAGE,
        }

    route = find_route(start, end)
    if route is None:
        raise NoRouteFound()

    return route.to_dict()


@app.get("/stations")
async def list_stations(line: Optional[str] = None):
    """List all stations, optionally only those on one line."""
    network = get_network()
    if line is not None:
        return network.stations_on_line(line)
    return network.stations()


def run_server(host: str = HOST, port: int = PORT):
    """Run the FastAPI server."""
    import uvicorn

    configure_logging()
    logger.info(f"Server running on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
