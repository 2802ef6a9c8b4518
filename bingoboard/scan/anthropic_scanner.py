"""
Card scanning with Claude vision.

Sends the photo as a base64 image block together with the extraction
prompt, then hands the text reply to parse_scan_payload().
"""

import base64
import logging
from typing import Any, cast

import anthropic
from anthropic.types import MessageParam, TextBlock

from bingoboard.config import settings
from bingoboard.models.card import GridDimensions
from bingoboard.models.failure import ScanError
from bingoboard.scan.adapter import ScanResult, build_prompt, parse_scan_payload

logger = logging.getLogger(__name__)

# (magic prefix, media type) pairs accepted by the Messages API
_IMAGE_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
)


def sniff_media_type(image: bytes) -> str:
    """Detect the image media type from its leading bytes, defaulting to JPEG."""
    for signature, media_type in _IMAGE_SIGNATURES:
        if image.startswith(signature):
            return media_type
    if image[:4] == b"RIFF" and image[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"


class AnthropicScanAdapter:
    """
    ScanAdapter backed by the Anthropic Messages API.

    A preconfigured client may be passed in, in which case api_key and
    max_retries are ignored.
    """

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        max_tokens: int | None = None,
        max_retries: int | None = None,
        client: anthropic.AsyncAnthropic | None = None,
    ) -> None:
        self.model = model or settings.scan_model
        self.max_tokens = max_tokens or settings.scan_max_tokens
        self._client = client or anthropic.AsyncAnthropic(
            api_key=api_key,
            max_retries=settings.scan_max_retries if max_retries is None else max_retries,
        )

    def _build_messages(
        self, image: bytes, dimensions: GridDimensions | None
    ) -> list[MessageParam]:
        return [
            {
                "role": "user",
                "content": [
                    {
                        "type": "image",
                        "source": {
                            "type": "base64",
                            "media_type": cast(Any, sniff_media_type(image)),
                            "data": base64.b64encode(image).decode("ascii"),
                        },
                    },
                    {"type": "text", "text": build_prompt(dimensions)},
                ],
            }
        ]

    async def scan(self, image: bytes, dimensions: GridDimensions | None = None) -> ScanResult:
        """
        Read a card grid from an image.

        Raises:
            ScanError: SCAN_FAILED on API errors or an empty reply,
                NOT_A_CARD if the model rejects the image
        """
        if dimensions is None:
            logger.info("Scanning card, detecting size")
        else:
            logger.info("Scanning %dx%d card", dimensions.rows, dimensions.cols)

        try:
            response = await self._client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=self._build_messages(image, dimensions),
            )
        except anthropic.APIError as e:
            logger.warning("Scan request failed: %s", e)
            raise ScanError("Failed to scan card", detail=type(e).__name__) from e

        if response.usage:
            logger.info(
                "scan_token_usage",
                extra={
                    "input_tokens": response.usage.input_tokens,
                    "output_tokens": response.usage.output_tokens,
                },
            )

        text = "".join(block.text for block in response.content if isinstance(block, TextBlock))
        if not text.strip():
            raise ScanError("Failed to scan card", detail="no text returned from model")

        if settings.debug:
            logger.debug("Raw scan response: %s", text)

        return parse_scan_payload(text, dimensions)
