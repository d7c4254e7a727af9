import io
import zipfile
from xml.etree import ElementTree as ET

from legalitea.document.exceptions import DocxExtractionError

_WORD_NS = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"
_BODY_PART = "word/document.xml"

DEFAULT_MAX_BODY_BYTES = 20 * 1024 * 1024


class DocxAdapter:
    """Extracts raw paragraph text from a Word (.docx) document body."""

    def __init__(self, max_body_bytes: int = DEFAULT_MAX_BODY_BYTES) -> None:
        self._max_body_bytes = max_body_bytes

    def extract(self, docx_bytes: bytes) -> str:
        """Return the document body as plain text, one paragraph per line.

        The body's uncompressed size is checked against ``max_body_bytes``
        before it is inflated.

        Raises:
            DocxExtractionError: if the archive or its body part is unreadable
                or the body is too large.
        """
        try:
            with zipfile.ZipFile(io.BytesIO(docx_bytes)) as archive:
                body_size = archive.getinfo(_BODY_PART).file_size
                if body_size > self._max_body_bytes:
                    raise DocxExtractionError(
                        f"{_BODY_PART} is {body_size} bytes uncompressed, "
                        f"limit is {self._max_body_bytes}"
                    )
                # zipfile stops at the declared size and fails the CRC check
                # if the stream inflates past it.
                xml_payload = archive.read(_BODY_PART)
            root = ET.fromstring(xml_payload)
        except (zipfile.BadZipFile, KeyError, ET.ParseError) as exc:
            raise DocxExtractionError(f"Could not read {_BODY_PART}: {exc}") from exc

        paragraphs = [self._paragraph_text(p) for p in root.iter(f"{_WORD_NS}p")]
        return "\n".join(paragraphs).strip()

    @staticmethod
    def _paragraph_text(paragraph: ET.Element) -> str:
        parts: list[str] = []
        for node in paragraph.iter():
            if node.tag == f"{_WORD_NS}t" and node.text:
                parts.append(node.text)
            elif node.tag == f"{_WORD_NS}tab":
                parts.append("\t")
            elif node.tag in (f"{_WORD_NS}br", f"{_WORD_NS}cr"):
                parts.append("\n")
        return "".join(parts)
