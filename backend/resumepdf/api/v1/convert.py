import logging
from pathlib import PurePath
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import Response

from resumepdf.api import deps
from resumepdf.core.config import Settings
from resumepdf.core.exceptions import PayloadTooLarge, ValidationError
from resumepdf.schemas.convert import ConvertRequest
from resumepdf.services.pdf_renderer import PdfRenderer

logger = logging.getLogger(__name__)

router = APIRouter()

HTML_EXTENSIONS = {".html", ".htm"}
HTML_CONTENT_TYPES = {"text/html"}


def safe_filename(filename: str, default: str = "resume.pdf") -> str:
    """Strip path parts, quotes and control characters; keep any Unicode characters."""
    name = PurePath(filename.replace("\\", "/")).name
    name = "".join(ch for ch in name if ch >= " " and ch != '"').strip()
    return name or default


def _stem(name: str) -> str:
    return name.rsplit(".", 1)[0] if "." in name else name


def pdf_filename_for(upload_name: Optional[str]) -> str:
    """Uploaded name with its extension swapped for .pdf."""
    stem = _stem(safe_filename(upload_name or "", default=""))
    return f"{stem}.pdf" if stem else "resume.pdf"


def content_disposition(filename: str) -> str:
    """
    Attachment header with an ASCII ``filename`` and, for non-ASCII names,
    the RFC 5987 ``filename*`` carrying the UTF-8 original.
    """
    ascii_name = filename.encode("ascii", "ignore").decode("ascii").strip()
    if not _stem(ascii_name).strip():
        ascii_name = "resume.pdf"
    header = f'attachment; filename="{ascii_name}"'
    if ascii_name != filename:
        header += f"; filename*=UTF-8''{quote(filename, safe='')}"
    return header


def pdf_response(pdf: bytes, filename: str) -> Response:
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(filename)},
    )


def is_html_upload(upload: UploadFile) -> bool:
    suffix = PurePath(upload.filename or "").suffix.lower()
    content_type = (upload.content_type or "").split(";")[0].strip().lower()
    return suffix in HTML_EXTENSIONS or content_type in HTML_CONTENT_TYPES


# 1. Inline HTML
@router.post("/convert")
async def convert_html(
    request: ConvertRequest,
    renderer: PdfRenderer = Depends(deps.get_renderer),
    settings: Settings = Depends(deps.get_settings),
):
    pdf = await renderer.render(request.html, margin=settings.PDF_STANDARD_MARGIN)
    return pdf_response(pdf, safe_filename(request.filename))


# 2. Uploaded HTML file
@router.post("/upload")
async def upload_html(
    htmlFile: Optional[UploadFile] = File(None),
    renderer: PdfRenderer = Depends(deps.get_renderer),
    settings: Settings = Depends(deps.get_settings),
):
    if htmlFile is None:
        raise ValidationError("No file uploaded")

    try:
        if not is_html_upload(htmlFile):
            logger.warning(
                "Rejected upload %s (%s)", htmlFile.filename, htmlFile.content_type
            )
            raise ValidationError("Only HTML files are allowed")

        # One byte past the limit is enough to know it is too large
        data = await htmlFile.read(settings.MAX_UPLOAD_BYTES + 1)
        if len(data) > settings.MAX_UPLOAD_BYTES:
            logger.warning("Rejected upload %s: over size limit", htmlFile.filename)
            raise PayloadTooLarge(
                f"File too large, limit is {settings.MAX_UPLOAD_BYTES} bytes"
            )

        try:
            html = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValidationError("HTML file must be UTF-8 encoded") from e

        pdf = await renderer.render(html, margin=settings.PDF_COMPACT_MARGIN)
    finally:
        # Closing the spooled upload removes its temporary file
        await htmlFile.close()

    return pdf_response(pdf, pdf_filename_for(htmlFile.filename))
