from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import uvicorn
from dotenv import load_dotenv
import logging
import os

# Load environment variables from .env file
load_dotenv()

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

from api.router import router as collections_router
from mongo.client import mongo_connection


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the MongoDB pool on startup and close it on shutdown"""
    try:
        await mongo_connection.connect()
    except Exception as e:
        # Requests retry the connection lazily
        logger.error(f"MongoDB not connected at startup: {e}")
    yield
    await mongo_connection.disconnect()


app = FastAPI(
    title="Document Pagination API",
    description="Paginated, populated and aliased reads over MongoDB collections",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(collections_router)


@app.get("/api/health")
async def health():
    return {"status": "ok", "mongo_connected": mongo_connection.connected}


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=False,
    )
