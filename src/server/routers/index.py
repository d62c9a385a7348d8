"""This module defines the FastAPI router for the service's landing endpoint."""

from typing import Any, Dict

from fastapi import APIRouter

from videoembed import info

from ..server_config import EXAMPLE_VIDEOS

router = APIRouter()


@router.get("/")
async def home() -> Dict[str, Any]:
    """
    Describe the service and show what it detects for a few example URLs.

    Returns
    -------
    Dict[str, Any]
        The available endpoints and the detected reference for each example video.
    """
    return {
        "endpoints": ["/api/info", "/api/embed", "/api/image"],
        "examples": [
            {**example, "video": info(example["url"]).model_dump(mode="json")}
            for example in EXAMPLE_VIDEOS
        ],
    }
