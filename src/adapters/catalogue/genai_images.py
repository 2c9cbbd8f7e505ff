"""
Generated image adapter - Implements ImageProvider protocol via Google GenAI.

Asks an Imagen model for a product photo and returns it inline as a
data URL. Failures propagate; CatalogueService decides the fallback.
"""

import base64
import logging

from google import genai
from google.genai import types

from src.config.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "imagen-4.0-generate-001"

PROMPT_TEMPLATE = (
    "A delicious-looking {name} coffee in a minimalist cafe setting, "
    "photorealistic, high quality, centered."
)


class GenAIImageProvider:
    """
    Implements ImageProvider protocol with the google-genai async client.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, client: genai.Client, model: str = DEFAULT_MODEL) -> None:
        self._client = client
        self._model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> "GenAIImageProvider":
        if not settings.genai_api_key:
            raise ValueError("genai_api_key is required for the genai image backend")
        return cls(genai.Client(api_key=settings.genai_api_key), settings.genai_image_model)

    async def image_for(self, product_name: str) -> str:
        response = await self._client.aio.models.generate_images(
            model=self._model,
            prompt=PROMPT_TEMPLATE.format(name=product_name),
            config=types.GenerateImagesConfig(
                number_of_images=1,
                output_mime_type="image/jpeg",
                aspect_ratio="1:1",
            ),
        )

        if not response.generated_images:
            raise RuntimeError(f"No image returned for {product_name}")

        image_bytes = response.generated_images[0].image.image_bytes
        logger.info("Generated image for %s (%d bytes)", product_name, len(image_bytes))
        return "data:image/jpeg;base64," + base64.b64encode(image_bytes).decode("ascii")
