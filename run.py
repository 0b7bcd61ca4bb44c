"""
Run the API from the repository root.
"""
import uvicorn

from survey_backend.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "survey_backend.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
    )
