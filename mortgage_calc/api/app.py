"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mortgage_calc.config import settings
from mortgage_calc.api.routes import schedule

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(
    title="Mortgage Calculator",
    description="Fixed-rate amortization schedules with PMI and cumulative totals",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(schedule.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
