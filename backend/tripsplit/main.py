"""FastAPI app entrypoint."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tripsplit.config import ALLOWED_ORIGINS, LOG_LEVEL
from tripsplit.routers import balances, exports

logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(
    title="Trip Split API",
    description="Work out who owes whom on a shared trip, and the fewest transfers to settle up.",
    version="1.0.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(balances.router, prefix="/api")
app.include_router(exports.router, prefix="/api")


@app.get("/")
def root():
    return {"message": "Trip Split API", "docs": "/docs"}
