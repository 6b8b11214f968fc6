from contextlib import asynccontextmanager
from fastapi import FastAPI
from dotenv import load_dotenv

load_dotenv()

from domain.config import get_service_config
from infrastructure.db.database import init_db, close_db
from infrastructure.logging.structlog_logs import logger
from infrastructure.metrics.metrics import metrics_endpoint
from app.middleware.request_logging import RequestLogMiddleware
from app.routers.transactions import router

service_config = get_service_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("service_starting", service=service_config.service_name, port=service_config.port)
    await init_db()
    yield
    logger.info("service_stopping", service=service_config.service_name)
    await close_db()


app = FastAPI(title="transactions", lifespan=lifespan)
app.add_middleware(RequestLogMiddleware)

@app.get("/metrics")
async def metrics():
    return metrics_endpoint()

@app.get("/health")
async def health():
    return {"status": "ok", "service": service_config.service_name}

app.include_router(router)


def run():
    """Console entry point: serve the app with uvicorn."""
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=service_config.port)
