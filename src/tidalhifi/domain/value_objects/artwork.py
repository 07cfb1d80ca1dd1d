"""Artwork URL helper.

TIDAL image ids look like "12345678-abcd-..." and the CDN path is the same id with
every dash turned into a slash, followed by "<res>x<res>.jpg". Pure string formatting,
no network involved.
"""

DEFAULT_IMAGES_BASE_URL = "https://resources.tidal.com/images"
DEFAULT_RESOLUTION = 1280


def get_art_url(
    image_id: str,
    resolution: int = DEFAULT_RESOLUTION,
    base_url: str = DEFAULT_IMAGES_BASE_URL,
) -> str:
    """Build the CDN URL for an album/artist/playlist image.

    Args:
        image_id: TIDAL image id (cover/picture field of an API object)
        resolution: Square edge length in pixels
        base_url: Image CDN base URL

    Returns:
        Full artwork URL

    Example:
        >>> get_art_url("ab-cd", 640)
        'https://resources.tidal.com/images/ab/cd/640x640.jpg'
    """
    path = image_id.replace("-", "/")
    return f"{base_url}/{path}/{resolution}x{resolution}.jpg"
