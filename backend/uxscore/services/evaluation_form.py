"""Parsing of the multipart evaluation form."""
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from starlette.datastructures import FormData, UploadFile

from uxscore.config import settings
from uxscore.constants import COMMENT_MAX, MAX_SCORE, MIN_SCORE, NOTES_MAX, WEBSITE_URL_MAX
from uxscore.utils.exceptions import ValidationError
from uxscore.utils.logger import logger


@dataclass
class ScoreEntry:
    """One valid ``categoryScores[i]`` group."""
    index: int
    category_id: uuid.UUID
    score: int
    comment: str = ""
    annotation: str = ""
    screenshot: Optional[bytes] = None


@dataclass
class EvaluationForm:
    """Evaluation header fields plus the valid score entries, in index order."""
    project_id: str = ""
    website_url: str = ""
    notes: str = ""
    scores: List[ScoreEntry] = field(default_factory=list)


def _text(form: FormData, key: str) -> Optional[str]:
    """Plain-text value of a form field, ignoring file parts."""
    value = form.get(key)
    if value is None or isinstance(value, UploadFile):
        return None
    return str(value)


def _parse_score(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    try:
        score = int(raw.strip())
    except ValueError:
        return None
    if score < MIN_SCORE or score > MAX_SCORE:
        return None
    return score


def _parse_category_id(raw: Optional[str]) -> Optional[uuid.UUID]:
    if raw is None:
        return None
    try:
        return uuid.UUID(raw.strip())
    except ValueError:
        return None


async def _read_screenshot(form: FormData, key: str) -> Optional[bytes]:
    upload = form.get(key)
    if not isinstance(upload, UploadFile):
        return None

    data = await upload.read()
    if not data:
        return None
    if len(data) > settings.max_screenshot_bytes:
        raise ValidationError(
            f"Screenshot {key} exceeds the {settings.max_screenshot_bytes} byte limit"
        )
    return data


def _check_length(value: str, limit: int, label: str) -> str:
    if len(value) > limit:
        raise ValidationError(f"{label} must be at most {limit} characters.")
    return value


async def parse_evaluation_form(form: FormData) -> EvaluationForm:
    """
    Read the header fields and the zero-indexed ``categoryScores[i]`` groups.

    Enumeration stops at the first index where both ``.categoryId`` and
    ``.score`` are absent. Entries whose category ID is not a UUID or whose
    score is not an integer in 1..5 are skipped without failing the request.

    Raises:
        ValidationError: If a text field is too long or a screenshot too large
    """
    parsed = EvaluationForm(
        project_id=(_text(form, "projectId") or "").strip(),
        website_url=_check_length((_text(form, "websiteUrl") or "").strip(), WEBSITE_URL_MAX, "Website URL"),
        notes=_check_length(_text(form, "notes") or "", NOTES_MAX, "Notes"),
    )

    index = 0
    while True:
        prefix = f"categoryScores[{index}]"
        raw_category = _text(form, f"{prefix}.categoryId")
        raw_score = _text(form, f"{prefix}.score")
        if raw_category is None and raw_score is None:
            break

        category_id = _parse_category_id(raw_category)
        score = _parse_score(raw_score)
        if category_id is None or score is None:
            logger.debug(f"Skipping invalid score entry {prefix}: categoryId={raw_category!r} score={raw_score!r}")
            index += 1
            continue

        parsed.scores.append(
            ScoreEntry(
                index=index,
                category_id=category_id,
                score=score,
                comment=_check_length(_text(form, f"{prefix}.comment") or "", COMMENT_MAX, "Comment"),
                annotation=_check_length(_text(form, f"{prefix}.annotation") or "", COMMENT_MAX, "Annotation"),
                screenshot=await _read_screenshot(form, f"{prefix}.screenshot"),
            )
        )
        index += 1

    return parsed
