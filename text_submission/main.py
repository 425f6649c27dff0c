import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .config import ALLOWED_ORIGINS, LOG_LEVEL, PORT
from .database import create_db_and_tables
from .errors import register_error_handlers
from .routers import text_submission

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Text Submission API",
    description="Stores short text submissions and serves them back to the dashboard"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(text_submission.router)

@app.on_event("startup")
def on_startup():
    create_db_and_tables()
    logger.info("Database tables ready")


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Text Submission API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
