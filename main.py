import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core import config
from app.db.base import Base
from app.db.session import engine, log_database_version
from app.routers import post
from app.routers import like

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    log_database_version(engine)
    yield
    engine.dispose()


app = FastAPI(title="Twitter API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(post.router, prefix="/posts", tags=["Posts"])
app.include_router(like.router, prefix="/likes", tags=["Likes"])


@app.get("/")
def home():
    return {"message": "Welcome to the twitter API!"}


if __name__ == "__main__":
    import uvicorn

    logging.info(f"App is listening on port {config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT)
