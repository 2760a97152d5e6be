import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from routers import (
    auth as auth_router,
    user as user_router,
    language as language_router,
)
from routers.auth import security
from core.config import settings
import uvicorn

logging.basicConfig(level=settings.LOG_LEVEL)


app = FastAPI(title="WordChain")
security.handle_errors(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router.router)
app.include_router(user_router.router)
app.include_router(language_router.router)


@app.get("/status")
async def status():
    return {"status": "ok"}

if __name__ == "__main__":
    uvicorn.run("main:app", reload=True, host="127.0.0.1", port=8000)
