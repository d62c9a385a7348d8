"""Schemas package for detected videos and their options."""

from .video_schema import EmbedOptions, ImageOptions, ImageResult, Provider, VideoReference

__all__ = ["EmbedOptions", "ImageOptions", "ImageResult", "Provider", "VideoReference"]
