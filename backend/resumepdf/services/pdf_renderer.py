import logging
from typing import Dict, Sequence

from playwright.async_api import async_playwright

from resumepdf.core.exceptions import RenderFailure

logger = logging.getLogger(__name__)

STANDARD_MARGIN = "20mm"
COMPACT_MARGIN = "5mm"

# Chromium refuses to start as root inside containers without these
DEFAULT_LAUNCH_ARGS = ("--no-sandbox", "--disable-setuid-sandbox")


def uniform_margin(margin: str) -> Dict[str, str]:
    return {"top": margin, "right": margin, "bottom": margin, "left": margin}


class PdfRenderer:
    """
    Turns an HTML document into PDF bytes with headless Chromium.

    Every call launches its own browser and closes it before returning,
    whether or not rendering succeeded.
    """

    def __init__(
        self,
        viewport_width: int = 794,
        viewport_height: int = 1123,
        page_format: str = "A4",
        launch_args: Sequence[str] = DEFAULT_LAUNCH_ARGS,
    ):
        self.viewport = {"width": viewport_width, "height": viewport_height}
        self.page_format = page_format
        self.launch_args = list(launch_args)

    async def render(self, html: str, margin: str = STANDARD_MARGIN) -> bytes:
        logger.info("Rendering PDF (%d chars of HTML, margin %s)", len(html), margin)
        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=True, args=self.launch_args)
                try:
                    page = await browser.new_page(viewport=self.viewport)
                    await page.set_content(html, wait_until="networkidle")
                    pdf = await page.pdf(
                        format=self.page_format,
                        print_background=True,
                        margin=uniform_margin(margin),
                    )
                finally:
                    await browser.close()
        except Exception as e:
            logger.warning("PDF generation error: %s", e)
            raise RenderFailure("Failed to generate PDF") from e

        logger.info("Rendered PDF, %d bytes", len(pdf))
        return pdf

