#!/usr/bin/env python3
"""
Helper script to run the FastAPI API.
Run from the project root so Python finds the 'api' module.
"""

import sys

from dietmind_core.config import get_settings

if __name__ == "__main__":
    try:
        import uvicorn
    except ImportError as e:
        print("❌ Error: could not import uvicorn. Did you activate the venv?")
        print("   Run: pip install -e .")
        print(f"   Error: {e}")
        sys.exit(1)

    settings = get_settings()
    print(f"✅ Server running on port {settings.port}")
    print(f"📖 Docs available at http://localhost:{settings.port}/docs")
    uvicorn.run("api.main:app", host=settings.host, port=settings.port, reload=settings.environment == "local")
