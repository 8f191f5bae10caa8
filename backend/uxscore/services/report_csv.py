"""CSV rendering of evaluation reports."""
from typing import Iterable, List, Optional

from uxscore.schemas.report import ReportRow

CSV_HEADER = (
    "Project Name,Project Description,Evaluation Website URL,Notes,"
    "Created At,User,Category,Score,Comment,Average Score"
)
DATE_FORMAT = "%d/%m/%Y"


def quote(value: Optional[object]) -> str:
    """Wrap a value in double quotes, doubling any embedded quote."""
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '""') + '"'


def csv_lines(rows: Iterable[ReportRow]) -> List[str]:
    """
    Flatten report rows into CSV lines, header first.

    Each category score gets its own line repeating the evaluation columns;
    an evaluation without scores gets one line with the category, score and
    comment columns left empty.
    """
    lines = [CSV_HEADER]
    for row in rows:
        base = ",".join(
            [
                quote(row.projectName),
                quote(row.projectDescription),
                quote(row.websiteUrl),
                quote(row.notes),
                quote(row.createdAt.strftime(DATE_FORMAT)),
                quote(row.userId),
            ]
        )
        average = f"{row.averageScore}"

        if not row.categoryScores:
            lines.append(f"{base},,,,{average}")
            continue

        for score in row.categoryScores:
            lines.append(f"{base},{quote(score.category)},{score.score},{quote(score.comment)},{average}")
    return lines


def render_csv(rows: Iterable[ReportRow]) -> bytes:
    """Render the report as UTF-8 CSV bytes."""
    return ("\n".join(csv_lines(rows)) + "\n").encode("utf-8")
