import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from config import configure_logging
from routers import billing, estimates, packages

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Stay Packages API",
    description="Stay estimates, package pricing and host package management backed by Firebase Firestore",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"]
)

app.include_router(packages.router)
app.include_router(estimates.router)
app.include_router(billing.router)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": str(exc) or "Unknown error"})


@app.get("/")
def root():
    return {
        "status":  "ok",
        "message": "Stay Packages API is running",
        "docs":    "/docs"
    }
