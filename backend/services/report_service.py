import logging
import re
from datetime import date
from io import BytesIO
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from backend.models.analysis import AIAnalysis
from backend.models.request import StartupInput
from backend.models.valuations import ValuationResult
from backend.valuation.formatting import format_currency, format_number

logger = logging.getLogger(__name__)

BRAND = "ValuAte"
ACCENT = colors.HexColor("#10b981")
MUTED = colors.HexColor("#646464")

_SWOT_SECTIONS = [
    ("Strengths", "strengths", colors.HexColor("#16a34a")),
    ("Weaknesses", "weaknesses", colors.HexColor("#dc2626")),
    ("Opportunities", "opportunities", colors.HexColor("#2563eb")),
    ("Threats", "threats", colors.HexColor("#d97706")),
]


def report_filename(company_name: str, on: Optional[date] = None) -> str:
    """File name for a downloaded report, e.g. 'Acme_Inc__Valuation_2024-06-01.pdf'."""
    on = on or date.today()
    safe_name = re.sub(r"[^a-zA-Z0-9]", "_", company_name)
    return f"{safe_name}_Valuation_{on.isoformat()}.pdf"


def _stage_label(stage: str) -> str:
    return stage[:1].upper() + stage[1:].replace("-", " ", 1)


def _footer(canvas, doc):
    canvas.saveState()
    canvas.setFont("Helvetica", 8)
    canvas.setFillColor(colors.HexColor("#969696"))
    canvas.drawCentredString(
        A4[0] / 2, 10 * mm, f"Generated by {BRAND} - Page {doc.page}",
    )
    canvas.restoreState()


def generate_valuation_pdf(
    startup: StartupInput,
    result: ValuationResult,
    analysis: Optional[AIAnalysis] = None,
) -> BytesIO:
    """Render a valuation (and optional AI analysis) as a PDF report."""
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        topMargin=20 * mm,
        bottomMargin=20 * mm,
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        title=f"{startup.company_name} Valuation",
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "BrandTitle", parent=styles["Heading1"], fontSize=24, spaceAfter=2,
    )
    subtitle_style = ParagraphStyle(
        "BrandSubtitle", parent=styles["Normal"], fontSize=10, textColor=MUTED, spaceAfter=12,
    )
    heading_style = ParagraphStyle(
        "SectionHeading", parent=styles["Heading2"], fontSize=14,
        textColor=colors.HexColor("#3c3c3c"), spaceBefore=14, spaceAfter=8,
    )
    body_style = ParagraphStyle(
        "Body", parent=styles["Normal"], fontSize=9, textColor=colors.HexColor("#505050"),
    )
    hero_style = ParagraphStyle(
        "Hero", parent=styles["Normal"], fontSize=28, leading=34, textColor=ACCENT,
        fontName="Helvetica-Bold",
    )

    story = []

    # Header
    story.append(Paragraph(BRAND, title_style))
    story.append(Paragraph(f"Startup Valuation Report - {date.today().isoformat()}", subtitle_style))

    # Company info
    story.append(Paragraph(escape(startup.company_name), styles["Heading1"]))
    story.append(Paragraph(escape(startup.description), body_style))
    story.append(Spacer(1, 4 * mm))
    story.append(Paragraph(
        f"Stage: {_stage_label(startup.stage)} &bull; "
        f"Revenue: {format_currency(startup.revenue)} &bull; "
        f"Growth: {format_number(startup.growth_rate)}% &bull; "
        f"EBITDA: {format_number(startup.ebitda_margin)}%",
        body_style,
    ))

    # Blended valuation
    hero_table = Table(
        [
            [Paragraph("Blended Valuation", body_style)],
            [Paragraph(format_currency(result.blended), hero_style)],
            [Paragraph(
                f"Range: {format_currency(result.range.low)} - {format_currency(result.range.high)}",
                body_style,
            )],
        ],
        colWidths=[170 * mm],
    )
    hero_table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), colors.HexColor("#f3f4f6")),
        ("LEFTPADDING", (0, 0), (-1, -1), 8),
        ("TOPPADDING", (0, 0), (-1, -1), 4),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
    ]))
    story.append(Spacer(1, 6 * mm))
    story.append(hero_table)

    # Valuation methods
    story.append(Paragraph("Valuation Methods", heading_style))
    method_rows = [["Method", "Value", "Basis"]]
    for method in (result.dcf, result.revenue_multiple, result.comparables):
        method_rows.append([
            method.label,
            format_currency(method.value),
            Paragraph(escape(method.description), body_style),
        ])
    method_table = Table(method_rows, colWidths=[40 * mm, 30 * mm, 100 * mm])
    method_table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#18181b")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, 1), (0, -1), "Helvetica-Bold"),
        ("TEXTCOLOR", (1, 1), (1, -1), ACCENT),
        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#f7fafc")]),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#c8c8c8")),
    ]))
    story.append(method_table)

    if result.dcf.warnings:
        story.append(Spacer(1, 3 * mm))
        for warning in result.dcf.warnings:
            story.append(Paragraph(f"Note: {escape(warning)}", body_style))

    if analysis:
        story.extend(_analysis_section(analysis, heading_style, body_style))

    doc.build(story, onFirstPage=_footer, onLaterPages=_footer)
    buffer.seek(0)
    logger.info(f"Rendered PDF report for '{startup.company_name}' ({len(buffer.getvalue())} bytes)")
    return buffer


def _analysis_section(analysis: AIAnalysis, heading_style, body_style) -> list:
    subheading = ParagraphStyle(
        "Subheading", parent=body_style, fontSize=11, leading=14,
        fontName="Helvetica-Bold", textColor=colors.HexColor("#3c3c3c"), spaceBefore=6, spaceAfter=2,
    )

    def bullets(items: list[str]) -> list:
        return [Paragraph(f"&bull; {escape(item)}", body_style) for item in items]

    flowables = [Paragraph("AI Analysis", heading_style)]

    flowables.append(Paragraph("Summary", subheading))
    flowables.append(Paragraph(escape(analysis.summary), body_style))

    flowables.append(Paragraph("Key Assumptions", subheading))
    flowables.extend(bullets(analysis.assumptions))

    flowables.append(Paragraph("SWOT Analysis", subheading))
    for title, field_name, color in _SWOT_SECTIONS:
        flowables.append(Paragraph(
            title, ParagraphStyle(f"Swot{title}", parent=subheading, fontSize=10, textColor=color),
        ))
        flowables.extend(bullets(getattr(analysis.swot, field_name)))

    flowables.append(Paragraph("Investor Talking Points", subheading))
    flowables.extend(bullets(analysis.investor_points))
    return flowables
