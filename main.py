import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config

# Routers
from routers.game import router as game_router
from routers.practice import router as practice_router

logger = logging.getLogger("arithmetic-game")
logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO))

app = FastAPI(title="Arithmetic Game API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(game_router)  # /game, /game/settings, /game/answer, ...
app.include_router(practice_router)  # /levels, /operators, /generate, /check
