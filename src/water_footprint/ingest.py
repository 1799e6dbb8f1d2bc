from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import pandas as pd

from .calculator import FootprintCalculator
from .errors import AnswersFormatError
from .models import SurveyResponse
from .utils import question_sort_key, read_json

logger = logging.getLogger(__name__)

SUBMISSION_COL = "survey_answer_id"
QUESTION_COL = "question_id"
ANSWER_COL = "answer"
REQUIRED_COLUMNS = (SUBMISSION_COL, QUESTION_COL, ANSWER_COL)

RESULT_COLUMNS = ["survey_answer_id", "calculated_footprint", "tier", "interpretation"]


def _records_to_response(records: list[Any], source: Path) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for i, rec in enumerate(records):
        if not isinstance(rec, dict) or QUESTION_COL not in rec or ANSWER_COL not in rec:
            raise AnswersFormatError(
                f"{source}: record[{i}] must be an object with '{QUESTION_COL}' and '{ANSWER_COL}'."
            )
        out[str(rec[QUESTION_COL])] = rec[ANSWER_COL]
    return out


def load_answers(path: Path) -> dict[str, Any]:
    """
    Read one survey response from JSON.

    Accepted shapes:
      {"1": "Producer", "2": "10000"}
      [{"question_id": 1, "answer": "Producer"}, ...]
    """
    if not path.exists():
        raise FileNotFoundError(f"Answers file not found: {path}")
    try:
        data = read_json(path)
    except json.JSONDecodeError as e:
        raise AnswersFormatError(f"{path} is not valid JSON: {e}") from e

    if isinstance(data, dict):
        return {str(k): v for k, v in data.items()}
    if isinstance(data, list):
        return _records_to_response(data, path)
    raise AnswersFormatError(f"{path} must contain a JSON object or a list of answer records.")


def load_submissions_csv(path: Path) -> dict[str, dict[str, Any]]:
    """
    Group a long-format answers export into one response per submission.

    Expects columns survey_answer_id, question_id, answer. Answers are kept as
    text, the way they are stored; empty cells are dropped.
    """
    if not path.exists():
        raise FileNotFoundError(f"Submissions file not found: {path}")
    df = pd.read_csv(path, dtype=str, keep_default_na=False)

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise AnswersFormatError(f"{path}: missing required columns {missing}")

    df = df[df[ANSWER_COL].str.strip() != ""]
    submissions: dict[str, dict[str, Any]] = {}
    for sub_id, group in df.groupby(SUBMISSION_COL, sort=False):
        submissions[str(sub_id)] = dict(zip(group[QUESTION_COL], group[ANSWER_COL]))
    logger.info("Loaded %d submission(s) from %s", len(submissions), path)
    return submissions


def score_submissions(
    submissions: dict[str, SurveyResponse],
    calculator: Optional[FootprintCalculator] = None,
) -> pd.DataFrame:
    """
    One row per submission with its calculated_footprint (None when the
    answers are insufficient), ordered by submission id.
    """
    calc = calculator or FootprintCalculator()
    rows: list[dict[str, Any]] = []
    for sub_id in sorted(submissions, key=question_sort_key):
        report = calc.evaluate(submissions[sub_id])
        rows.append(
            {
                "survey_answer_id": sub_id,
                "calculated_footprint": report.footprint,
                "tier": report.tier,
                "interpretation": report.interpretation,
            }
        )
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
