"""
Placeholder image adapter - Implements ImageProvider protocol.

Produces a labelled placeholder URL for products without a stored photo.
"""

from urllib.parse import quote_plus


class PlaceholderImageProvider:
    """
    Implements ImageProvider protocol with a URL template.

    The template must contain a ``{text}`` field, filled with the
    URL-encoded product name.
    """

    def __init__(self, url_template: str) -> None:
        self._url_template = url_template

    async def image_for(self, product_name: str) -> str:
        return self._url_template.format(text=quote_plus(product_name))
