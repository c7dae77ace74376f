"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI

from error_handlers import register_error_handlers
from routes import transcribe_router

patch_all()

app = FastAPI(title="Speech Recap Transcribe Service")
register_error_handlers(app)
app.include_router(transcribe_router)
