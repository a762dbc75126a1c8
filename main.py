"""
Detour Planner Backend
======================
Entry point. Run with: uvicorn main:app --reload
"""

import uvicorn

from detour_planner.api.app import create_app
from detour_planner.config import settings

app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=True)
