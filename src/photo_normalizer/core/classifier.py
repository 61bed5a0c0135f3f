"""Orientation-aware aspect classification."""

from typing import Optional, Tuple

from .exceptions import InvalidDimensions
from .models import AspectCategory, CorrectedDimensions

# EXIF orientations that store the image rotated by 90 or 270 degrees
ROTATED_ORIENTATIONS = frozenset({5, 6, 7, 8})

PANORAMA_RATIO = 2


def correct_dimensions(
    raw_width: Optional[int], raw_height: Optional[int], orientation: Optional[int]
) -> CorrectedDimensions:
    """
    Return the displayed width and height of an image.

    Raises:
        InvalidDimensions: If either dimension is missing, zero or negative.
    """
    width, height = raw_width, raw_height
    if orientation is not None and orientation in ROTATED_ORIENTATIONS:
        width, height = raw_height, raw_width

    if not width or not height or width < 0 or height < 0:
        raise InvalidDimensions(
            f"Image dimensions are not defined. Width: {width}, Height: {height}"
        )

    return CorrectedDimensions(width=width, height=height)


def categorize(dimensions: CorrectedDimensions) -> AspectCategory:
    """Bucket corrected dimensions; panorama wins over landscape."""
    width, height = dimensions.width, dimensions.height

    if width / height > PANORAMA_RATIO:
        return AspectCategory.PANORAMA
    if width > height:
        return AspectCategory.LANDSCAPE
    if width < height:
        return AspectCategory.PORTRAIT
    return AspectCategory.SQUARE


def classify(
    raw_width: Optional[int], raw_height: Optional[int], orientation: Optional[int]
) -> Tuple[CorrectedDimensions, AspectCategory]:
    """
    Correct dimensions for orientation and pick the aspect category.

    Args:
        raw_width: Stored pixel width
        raw_height: Stored pixel height
        orientation: EXIF orientation code, if any

    Returns:
        The corrected dimensions and their aspect category

    Raises:
        InvalidDimensions: If either corrected dimension is not positive
    """
    dimensions = correct_dimensions(raw_width, raw_height, orientation)
    return dimensions, categorize(dimensions)
