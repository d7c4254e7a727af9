import io
import zipfile

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

LEASE_TEXT = (
    "RESIDENTIAL LEASE AGREEMENT. This lease is entered into between ABC Property "
    "Management (Landlord) and John Smith (Tenant). Tenant agrees to pay monthly rent "
    "of $2,500.00 due on the 1st day of each month."
)


def _pdf(pages: list[list[str]]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


def make_docx(paragraphs: list[str]) -> bytes:
    """Build a minimal .docx archive whose body holds the given paragraphs."""
    ns = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
    body = "".join(f"<w:p><w:r><w:t>{text}</w:t></w:r></w:p>" for text in paragraphs)
    document_xml = (
        f'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{ns}"><w:body>{body}</w:body></w:document>'
    )
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as archive:
        archive.writestr("[Content_Types].xml", "<Types/>")
        archive.writestr("word/document.xml", document_xml)
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Single-page PDF with enough text to skip OCR."""
    return _pdf([[
        "RESIDENTIAL LEASE AGREEMENT",
        "Tenant agrees to pay monthly rent of 2500 dollars.",
        "Either party may terminate with 30 days written notice.",
    ]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Three-page PDF with known text on each page."""
    return _pdf([
        ["Page one content of the service agreement between the parties."],
        ["Page two content describing payment terms and late fees."],
        ["Page three content covering termination and governing law."],
    ])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Valid PDF with no text content (blank page)."""
    return _pdf([[]])


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    return make_docx([
        "NON-DISCLOSURE AGREEMENT",
        "The Receiving Party agrees to keep all confidential information strictly confidential.",
    ])


@pytest.fixture()
def lease_text() -> str:
    return LEASE_TEXT


@pytest.fixture()
def docx_factory():
    """Return a builder for .docx bytes from a list of paragraphs."""
    return make_docx


def make_analysis_payload() -> dict:
    """A well-formed analysis in its camelCase wire form."""
    return {
        "summary": {
            "tldr": "A one-year residential lease with monthly rent and a security deposit.",
            "keyPoints": [
                "Rent is $2,500 per month",
                "Lease runs for twelve months",
                "Either party may end the lease with 30 days notice",
            ],
            "confidence": 0.92,
        },
        "keyInformation": {
            "parties": ["ABC Property Management", "John Smith"],
            "dates": [
                {"date": "2024-01-01", "description": "Lease start", "importance": "high"},
            ],
            "monetaryAmounts": [
                {
                    "amount": "$2,500.00",
                    "currency": "USD",
                    "description": "Monthly rent",
                    "type": "payment",
                },
                {
                    "amount": "$5,000.00",
                    "currency": "USD",
                    "description": "Security deposit",
                    "type": "deposit",
                },
            ],
            "obligations": ["Pay rent on the 1st of each month"],
        },
        "riskAssessment": {
            "overallRisk": "medium",
            "redFlags": [
                {
                    "clause": "Late fee",
                    "risk": "Fees add up quickly",
                    "severity": "medium",
                    "explanation": "A $100 fee applies after the 5th day.",
                    "originalText": "A late fee of $100 will be charged.",
                },
            ],
            "recommendations": ["Set up automatic rent payments"],
        },
        "actionPlan": [
            {
                "id": "1",
                "task": "Review the late fee clause",
                "priority": "high",
                "deadline": "Before signing",
                "completed": False,
            },
        ],
    }


@pytest.fixture()
def analysis_payload() -> dict:
    return make_analysis_payload()


SAMPLE_LEASE = """RESIDENTIAL LEASE AGREEMENT

This lease agreement is entered into on January 1, 2024, between ABC Property Management (Landlord) and John Smith (Tenant) for the property located at 123 Main Street, Anytown, ST 12345.

TERM: This lease shall commence on January 1, 2024, and terminate on December 31, 2024, unless renewed or extended.

RENT: Tenant agrees to pay monthly rent of $2,500.00, due on the 1st day of each month. Late fees of $100.00 will be charged for payments received after the 5th day of the month.

SECURITY DEPOSIT: Tenant shall pay a security deposit of $2,500.00 prior to occupancy.

UTILITIES: Tenant is responsible for electricity, gas, internet, and cable. Landlord pays for water, sewer, and trash collection.

PETS: No pets are allowed without prior written consent from Landlord. If approved, a pet deposit of $500.00 is required.

MAINTENANCE: Tenant shall maintain the premises in good condition. Tenant is responsible for repairs under $100.00. Landlord is responsible for major repairs and maintenance.

RENT INCREASES: Landlord reserves the right to increase rent by up to 10% upon lease renewal or extension.

TERMINATION: Either party may terminate this lease with 30 days written notice. Early termination by tenant may result in forfeiture of security deposit.

INSPECTION: Landlord may inspect the premises with 24 hours written notice to tenant.

This agreement constitutes the entire agreement between the parties and may only be modified in writing signed by both parties."""

SAMPLE_NDA = """NON-DISCLOSURE AGREEMENT

This Non-Disclosure Agreement ("Agreement") is entered into on [DATE] between TechCorp Inc., a Delaware corporation ("Disclosing Party") and [RECIPIENT NAME] ("Receiving Party").

PURPOSE: The parties wish to explore a potential business relationship and need to share confidential information.

CONFIDENTIAL INFORMATION: Any information disclosed by either party, whether oral, written, or electronic, including but not limited to business plans, financial information, customer lists, technical data, and trade secrets.

OBLIGATIONS: Receiving Party agrees to:
1. Keep all confidential information strictly confidential
2. Not disclose confidential information to third parties
3. Use confidential information solely for evaluation purposes
4. Return or destroy all confidential information upon request

TERM: This agreement shall remain in effect for 2 years from the date of signing.

EXCEPTIONS: This agreement does not apply to information that:
- Is publicly available
- Was known prior to disclosure
- Is independently developed
- Is required to be disclosed by law

REMEDIES: Breach of this agreement may result in irreparable harm, and the disclosing party may seek injunctive relief and monetary damages.

GOVERNING LAW: This agreement shall be governed by the laws of Delaware."""

SAMPLE_SERVICE_AGREEMENT = """SERVICE AGREEMENT

This Service Agreement is entered into on [DATE] between Digital Solutions LLC ("Provider") and [CLIENT NAME] ("Client").

SERVICES: Provider agrees to provide web development and digital marketing services as detailed in Exhibit A.

TERM: This agreement begins on [START DATE] and continues for 12 months, with automatic renewal unless terminated.

COMPENSATION: Client agrees to pay $5,000 per month, due on the 1st of each month. Late payments incur a 5% monthly penalty.

INTELLECTUAL PROPERTY: All work product created by Provider shall be owned by Client upon full payment. Provider retains rights to general methodologies and know-how.

CONFIDENTIALITY: Both parties agree to maintain confidentiality of proprietary information shared during this engagement.

TERMINATION: Either party may terminate with 30 days written notice. Client remains liable for all work completed through termination date.

LIABILITY: Provider's liability is limited to the amount paid by Client in the 12 months preceding any claim.

INDEMNIFICATION: Client agrees to indemnify Provider against claims arising from Client's use of the services.

GOVERNING LAW: This agreement is governed by the laws of [STATE]."""

SAMPLE_DOCUMENTS = {
    "lease": SAMPLE_LEASE,
    "nda": SAMPLE_NDA,
    "contract": SAMPLE_SERVICE_AGREEMENT,
}


@pytest.fixture()
def sample_documents() -> dict[str, str]:
    """Full-length lease, NDA and service agreement texts."""
    return dict(SAMPLE_DOCUMENTS)
