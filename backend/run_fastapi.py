"""
Main entry point for the FastAPI application.
Run this file to start the server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn officeops.fastapi_app:create_fastapi_app --factory --host 0.0.0.0 --port 5001
"""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

if __name__ == "__main__":
    env = os.getenv("OFFICEOPS_ENV", "development")
    debug = env == "development"
    port = int(os.getenv("PORT", 5001))
    host = os.getenv("HOST", "0.0.0.0")

    uvicorn.run(
        "officeops.fastapi_app:create_fastapi_app",
        factory=True,
        host=host,
        port=port,
        reload=debug,
        log_level="info" if debug else "warning",
    )
