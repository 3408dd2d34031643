#!/usr/bin/env python3
"""
Profile OCR Service

This FastAPI service accepts profile screenshots, reads them with a vision
model and returns the extracted profiles.
"""

from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Dict, List, Optional

import psutil
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ...config import settings
from ...exceptions import InvalidInput
from ...logging_config import setup_logging
from ...models import DEFAULT_MIME_TYPE, ImageUpload
from .extractor import ProfileExtractor

# Load environment variables
load_dotenv()

# Create module-specific logger
logger = setup_logging("ocr_api")


@lru_cache(maxsize=1)
def get_extractor() -> ProfileExtractor:
    """Shared extractor for all requests."""
    return ProfileExtractor()


app = FastAPI(
    title="Profile OCR Service",
    description="Extracts creator profile metadata from social media screenshots",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests with the same error body as other rejections."""
    logger.warning("Rejected malformed request", extra={"path": request.url.path, "errors": str(exc.errors())})
    return JSONResponse(status_code=400, content={"error": "Invalid request"})


@app.post("/api/ocr/process")
async def process_images(
    images: Optional[List[UploadFile]] = File(None),
    extractor: ProfileExtractor = Depends(get_extractor),
):
    """Extract one profile per uploaded screenshot."""
    if not images:
        return JSONResponse(status_code=400, content={"error": "No files provided"})

    try:
        uploads = [
            ImageUpload(
                file_name=image.filename or "",
                content=await image.read(),
                mime_type=image.content_type or DEFAULT_MIME_TYPE,
            )
            for image in images
        ]
        result = await extractor.extract_batch(uploads)
    except InvalidInput as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception:
        logger.exception("OCR processing error", extra={"images": len(images)})
        return JSONResponse(status_code=500, content={"error": "Processing failed"})

    return {
        "success": True,
        "profiles": [profile.to_api_dict() for profile in result.profiles],
        "failures": [failure.model_dump(by_alias=True) for failure in result.failures],
    }


@app.get("/health")
async def health_check() -> Dict[str, Any]:
    """Health check endpoint."""
    extractor = get_extractor()
    metrics = {
        "cpu_percent": psutil.cpu_percent(),
        "memory_percent": psutil.virtual_memory().percent,
    }
    return {
        "status": "healthy",
        "model": extractor.llm.model,
        "credentials": "configured" if extractor.llm.is_configured else "missing",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "metrics": metrics,
    }


def main():
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
