"""Image decoding and re-encoding utilities for the photo normalizer."""

import io
from typing import Optional

from PIL import Image, ImageCms, ImageOps

from .exceptions import ImageProcessingError
from .logging_config import get_logger
from .models import ImageMetrics, ResizeSpec

ORIENTATION_TAG = 0x0112
JPEG_QUALITY = 60
OUTPUT_FORMAT = "JPEG"
CONTENT_TYPE = "image/jpeg"

SRGB_PROFILE = ImageCms.createProfile("sRGB")

_DECODE_ERRORS = (OSError, SyntaxError, ValueError, Image.DecompressionBombError)


def read_metrics(image_bytes: bytes) -> ImageMetrics:
    """
    Read stored dimensions and EXIF orientation without a full decode.

    Args:
        image_bytes: Encoded image

    Returns:
        ImageMetrics for the stored (unrotated) pixels

    Raises:
        ImageProcessingError: If the bytes are not a readable image
    """
    try:
        with Image.open(io.BytesIO(image_bytes)) as image:
            orientation = image.getexif().get(ORIENTATION_TAG)
            return ImageMetrics(
                raw_width=image.width,
                raw_height=image.height,
                orientation=int(orientation) if orientation is not None else None,
            )
    except _DECODE_ERRORS as e:
        raise ImageProcessingError(f"Failed to read image metadata: {e}") from e


def convert_to_srgb(image: Image.Image, icc_profile: Optional[bytes]) -> Image.Image:
    """
    Convert an image to plain RGB in the sRGB color space.

    An embedded ICC profile is applied first; a profile LittleCMS cannot use
    is ignored and the pixels are converted as if untagged.
    """
    if icc_profile:
        try:
            source_profile = ImageCms.ImageCmsProfile(io.BytesIO(icc_profile))
            converted = ImageCms.profileToProfile(
                image, source_profile, SRGB_PROFILE, outputMode="RGB"
            )
            if converted is not None:
                image = converted
        except (ImageCms.PyCMSError, OSError) as e:
            get_logger("image").warning(f"Ignoring unusable ICC profile: {e}")

    if image.mode != "RGB":
        image = image.convert("RGB")
    return image


def resize_to_spec(image: Image.Image, spec: ResizeSpec) -> Image.Image:
    """
    Resize an image to a ResizeSpec.

    With only a target width the height follows the aspect ratio. With both
    the image is scaled to cover the box and centre-cropped to it.
    """
    if spec.target_height is None:
        target_height = max(1, round(image.height * spec.target_width / image.width))
        return image.resize(
            (spec.target_width, target_height), Image.Resampling.LANCZOS
        )

    return ImageOps.fit(
        image,
        (spec.target_width, spec.target_height),
        method=Image.Resampling.LANCZOS,
    )


def render(image_bytes: bytes, spec: ResizeSpec, quality: int = JPEG_QUALITY) -> bytes:
    """
    Decode, rotate upright, resize and re-encode an image as sRGB JPEG.

    EXIF and XMP metadata are carried over with the orientation reset, since
    the rotation is applied to the pixels. IPTC blocks are not kept. The
    output is written untagged, which readers interpret as sRGB.

    Args:
        image_bytes: Encoded source image
        spec: Target box in displayed (upright) orientation
        quality: JPEG quality on a 0-100 scale

    Returns:
        Encoded JPEG bytes

    Raises:
        ImageProcessingError: If decoding or encoding fails
    """
    try:
        with Image.open(io.BytesIO(image_bytes)) as source:
            source.load()
            exif = source.getexif()
            icc_profile = source.info.get("icc_profile")

            image = ImageOps.exif_transpose(source)
            # Read after the transpose, which drops any XMP orientation
            xmp = image.info.get("xmp")
            image = convert_to_srgb(image, icc_profile)
            image = resize_to_spec(image, spec)

        save_kwargs = {
            "format": OUTPUT_FORMAT,
            "quality": quality,
        }
        if len(exif):
            if ORIENTATION_TAG in exif:
                exif[ORIENTATION_TAG] = 1
            save_kwargs["exif"] = exif.tobytes()
        if xmp:
            save_kwargs["xmp"] = xmp.encode() if isinstance(xmp, str) else xmp

        output_stream = io.BytesIO()
        image.save(output_stream, **save_kwargs)
        return output_stream.getvalue()

    except _DECODE_ERRORS as e:
        raise ImageProcessingError(f"Failed to transform image: {e}") from e
