import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hexgraph import __version__, config
from hexgraph.api.routes import router
from hexgraph.errors import HexGraphError, UnknownFormatError
from hexgraph.logging_setup import configure_logging
from hexgraph.registry import current_graph
from hexgraph.schemas import ErrorResponse

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Architecture Graph Introspection",
    version=__version__,
)

# Middleware FIRST
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes AFTER middleware
app.include_router(router)


@app.exception_handler(HexGraphError)
def handle_hexgraph_error(request: Request, exc: HexGraphError):
    status_code = 404 if isinstance(exc, UnknownFormatError) else 500
    if status_code == 500:
        logger.error("Request %s failed: %s", request.url.path, exc)
    body = ErrorResponse(code=exc.code, message=exc.message, next_steps=exc.next_steps)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.on_event("startup")
def startup():
    graph = current_graph()
    logger.info(
        "Serving architecture graph: %d nodes, %d edges", graph.node_count(), graph.edge_count()
    )
