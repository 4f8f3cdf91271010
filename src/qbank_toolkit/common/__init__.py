"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .thresholds import (
    HEADER_THRESHOLDS,
    METADATA_THRESHOLDS,
    SEGMENTATION_THRESHOLDS,
    HeaderThresholds,
    MetadataThresholds,
    SegmentationThresholds,
)

__all__ = [
    "HEADER_THRESHOLDS",
    "METADATA_THRESHOLDS",
    "SEGMENTATION_THRESHOLDS",
    "HeaderThresholds",
    "MetadataThresholds",
    "SegmentationThresholds",
]
