"""Courier API service entrypoint."""

import logging
import os

from fastapi import FastAPI

from services.courier.app.routers.order import router as order_router


def configure_logging() -> None:
    level = os.getenv("COURIER_LOG_LEVEL", "INFO").strip().upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


configure_logging()

app = FastAPI(title="Courier API")

app.include_router(order_router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
