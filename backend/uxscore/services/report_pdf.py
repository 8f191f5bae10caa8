"""PDF rendering of evaluation reports with ReportLab."""
from dataclasses import dataclass
from io import BytesIO
from typing import List, Optional, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.pdfgen import canvas

from uxscore.schemas.report import ReportRow
from uxscore.utils.serialization import utcnow

HEADERS = ["Project", "Website", "Category", "Score", "Comment", "Notes", "Avg"]
COLUMN_WIDTHS = [120, 150, 150, 40, 120, 120, 50]
ROW_HEIGHT = 25
LEFT_MARGIN = 40
TABLE_TOP = 80
CONTINUATION_TOP = 40
BOTTOM_LIMIT = 80
MAX_CELL_CHARS = 30
SCORE_COLUMN = 3

FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"

ROW_BACKGROUNDS = (colors.white, colors.HexColor("#EEF2F7"))
HEADER_BACKGROUND = colors.lightgrey
HEADER_TEXT = colors.darkblue
GRID = colors.darkgrey


@dataclass
class TableRow:
    """One drawn table row."""
    cells: List[str]
    shade: int
    score: Optional[int] = None
    placeholder: bool = False


def truncate(text: Optional[str], max_length: int = MAX_CELL_CHARS) -> str:
    """Shorten text to max_length characters, ending with '...' when cut."""
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def score_color(score: int) -> colors.Color:
    if score >= 4:
        return colors.green
    if score >= 3:
        return colors.orange
    return colors.red


def table_rows(rows: Sequence[ReportRow]) -> List[TableRow]:
    """
    Lay report rows out as table rows.

    One row per category score and a single "No scores" row for an
    evaluation without any. The shade alternates per evaluation.
    """
    result: List[TableRow] = []
    for position, row in enumerate(rows):
        shade = position % 2
        average = f"{row.averageScore}"

        if not row.categoryScores:
            result.append(
                TableRow(
                    cells=[
                        truncate(row.projectName),
                        truncate(row.websiteUrl),
                        "No scores",
                        "",
                        "",
                        truncate(row.notes),
                        average,
                    ],
                    shade=shade,
                    placeholder=True,
                )
            )
            continue

        for score in row.categoryScores:
            result.append(
                TableRow(
                    cells=[
                        truncate(row.projectName),
                        truncate(row.websiteUrl),
                        truncate(score.category),
                        str(score.score),
                        truncate(score.comment),
                        truncate(row.notes),
                        average,
                    ],
                    shade=shade,
                    score=score.score,
                )
            )
    return result


class _ReportCanvas:
    """Top-down drawing helper over a ReportLab canvas."""

    def __init__(self, buffer: BytesIO, total_evaluations: int):
        self.page_width, self.page_height = landscape(A4)
        self.canvas = canvas.Canvas(buffer, pagesize=(self.page_width, self.page_height))
        self.canvas.setTitle("Evaluation Report")
        self.total_evaluations = total_evaluations
        self.page_number = 1
        self.y = TABLE_TOP

    def _baseline(self, top: float, height: float, font_size: float) -> float:
        # Convert a top-left box into a ReportLab baseline, vertically centered
        return self.page_height - top - height / 2 - font_size / 3

    def _rect(self, x: float, top: float, width: float, height: float, fill) -> None:
        self.canvas.setStrokeColor(GRID)
        self.canvas.setFillColor(fill)
        self.canvas.rect(x, self.page_height - top - height, width, height, stroke=1, fill=1)

    def title(self) -> None:
        c = self.canvas
        c.setFillColor(colors.darkblue)
        c.setFont(FONT_BOLD, 14)
        c.drawCentredString(self.page_width / 2, self.page_height - 40, "Evaluation Report")
        c.setFillColor(colors.darkgrey)
        c.setFont(FONT, 8)
        c.drawCentredString(
            self.page_width / 2, self.page_height - 58, f"Generated on {utcnow().strftime('%d/%m/%Y')}"
        )

    def empty_notice(self) -> None:
        self.canvas.setFillColor(colors.grey)
        self.canvas.setFont(FONT_BOLD, 10)
        self.canvas.drawCentredString(self.page_width / 2, self.page_height - 115, "No evaluations found")

    def header_row(self) -> None:
        x = LEFT_MARGIN
        for header, width in zip(HEADERS, COLUMN_WIDTHS):
            self._rect(x, self.y, width, ROW_HEIGHT, HEADER_BACKGROUND)
            self.canvas.setFillColor(HEADER_TEXT)
            self.canvas.setFont(FONT_BOLD, 10)
            self.canvas.drawCentredString(x + width / 2, self._baseline(self.y, ROW_HEIGHT, 10), header)
            x += width
        self.y += ROW_HEIGHT

    def footer(self) -> None:
        self.canvas.setFillColor(colors.grey)
        self.canvas.setFont(FONT, 8)
        self.canvas.drawString(
            LEFT_MARGIN,
            30,
            f"Page {self.page_number} • Total Evaluations: {self.total_evaluations} "
            f"• Report generated by Website Evaluator",
        )

    def new_page(self) -> None:
        self.footer()
        self.canvas.showPage()
        self.page_number += 1
        self.y = CONTINUATION_TOP
        self.header_row()

    def row(self, table_row: TableRow) -> None:
        if self.y > self.page_height - BOTTOM_LIMIT:
            self.new_page()

        x = LEFT_MARGIN
        background = ROW_BACKGROUNDS[table_row.shade]
        for column, (value, width) in enumerate(zip(table_row.cells, COLUMN_WIDTHS)):
            self._rect(x, self.y, width, ROW_HEIGHT, background)

            text_color = colors.black
            if table_row.placeholder:
                text_color = colors.darkgrey
            elif column == SCORE_COLUMN and table_row.score is not None:
                text_color = score_color(table_row.score)

            self.canvas.setFillColor(text_color)
            self.canvas.setFont(FONT, 8)
            self.canvas.drawString(x + 5, self._baseline(self.y, ROW_HEIGHT, 8), value)
            x += width
        self.y += ROW_HEIGHT

    def finish(self) -> None:
        self.footer()
        self.canvas.save()


def render_pdf(rows: Sequence[ReportRow]) -> bytes:
    """Render the report as a landscape PDF table."""
    buffer = BytesIO()
    report = _ReportCanvas(buffer, total_evaluations=len(rows))
    report.title()

    if not rows:
        report.empty_notice()
    else:
        report.header_row()
        for table_row in table_rows(rows):
            report.row(table_row)

    report.finish()
    return buffer.getvalue()
