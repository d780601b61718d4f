"""
Main entry point for the FastAPI application.
Run this file to start the server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn contact_api.fastapi_app:app --host 0.0.0.0 --port 5000 --no-proxy-headers
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from contact_api.config.settings import Config


def main():
    reload = Config.APP_ENV == "development"

    print(f"Starting FastAPI application in {Config.APP_ENV} mode...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")

    uvicorn.run(
        "contact_api.fastapi_app:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=reload,
        # X-Forwarded-For is handled by the app (TRUSTED_PROXIES)
        proxy_headers=False,
        log_level="info" if reload else "warning",
    )


if __name__ == "__main__":
    main()
