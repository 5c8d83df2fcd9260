from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from academics.core.config import INSTITUTION_NAME
from academics.engine.types import SemesterSummary, Transcript

HEADER_COLOR = colors.HexColor("#1f4788")
ROW_ALT_COLOR = colors.HexColor("#f0f0f0")

_TABLE_STYLE = TableStyle([
    ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
    ("ALIGN", (0, 0), (-1, -1), "CENTER"),
    ("ALIGN", (1, 0), (1, -1), "LEFT"),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, 0), 9),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, ROW_ALT_COLOR]),
    ("FONTSIZE", (0, 1), (-1, -1), 8),
])


def _summary_text(summary: SemesterSummary) -> str:
    return (
        f"<b>Average:</b> {summary.average_grade:.2f} / 20 &nbsp;|&nbsp; "
        f"<b>Credits validated:</b> {summary.validated_credits} / {summary.total_credits} &nbsp;|&nbsp; "
        f"<b>Courses:</b> {summary.courses_count}"
    )


def render_transcript_pdf(transcript: Transcript) -> bytes:
    """
    Render a transcript as PDF.

    The document is built in reportlab's invariant mode and carries no
    generation date, so the same transcript always yields the same bytes.
    """
    buffer = BytesIO()
    title = f"Transcript {transcript.student.registration_number} {transcript.academic_year}"
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        topMargin=20,
        bottomMargin=20,
        title=title,
        author=INSTITUTION_NAME,
        creator=INSTITUTION_NAME,
        invariant=1,
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "TranscriptTitle",
        parent=styles["Heading1"],
        fontSize=16,
        textColor=HEADER_COLOR,
        spaceAfter=6,
        alignment=TA_CENTER,
    )
    info_style = styles["Normal"]
    heading_style = styles["Heading3"]

    elements = [
        Paragraph(escape(INSTITUTION_NAME), info_style),
        Paragraph(f"Academic Transcript - {escape(transcript.student.full_name)}", title_style),
        Paragraph(
            f"<b>Student number:</b> {escape(transcript.student.registration_number)} &nbsp;|&nbsp; "
            f"<b>Academic year:</b> {escape(transcript.academic_year)}",
            info_style,
        ),
        Spacer(1, 12),
    ]

    for block in transcript.semesters:
        elements.append(Paragraph(f"Semester {escape(block.summary.semester)}", heading_style))

        rows = [["Code", "Course", "Credits", "Grade", "Result"]]
        for line in block.lines:
            rows.append([
                line.course_code,
                line.course_name,
                str(line.credits),
                f"{line.grade:.2f}",
                "Validated" if line.validated else "Not validated",
            ])

        table = Table(rows, colWidths=[0.9 * inch, 2.9 * inch, 0.7 * inch, 0.7 * inch, 1.1 * inch])
        table.setStyle(_TABLE_STYLE)
        elements.append(table)
        elements.append(Spacer(1, 6))
        elements.append(Paragraph(_summary_text(block.summary), info_style))
        elements.append(Spacer(1, 12))

    elements.append(Paragraph("Cumulative summary", heading_style))
    elements.append(Paragraph(_summary_text(transcript.cumulative), info_style))

    doc.build(elements)
    return buffer.getvalue()
