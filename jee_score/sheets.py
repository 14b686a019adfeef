import json
import logging
from typing import List, Optional

import gspread
from oauth2client.service_account import ServiceAccountCredentials

from .models import Subject
from .pipeline import ScoredSheet

logger = logging.getLogger(__name__)

SCOPE = ["https://spreadsheets.google.com/feeds", "https://www.googleapis.com/auth/drive"]


def get_gs_client(credentials_json: str):
    creds_dict = json.loads(credentials_json)
    creds = ServiceAccountCredentials.from_json_keyfile_dict(creds_dict, SCOPE)
    return gspread.authorize(creds)


def result_row(scored: ScoredSheet, contact: str = "", source_url: str = "") -> List:
    info = scored.sheet.general_info
    report = scored.report
    per_subject = [
        report.subject_stats[s.value].correct if s.value in report.subject_stats else 0
        for s in (Subject.PHYSICS, Subject.CHEMISTRY, Subject.MATHS)
    ]
    return [
        contact, info.candidate_name, info.application_number, info.roll_number,
        info.test_date, info.test_time, scored.exam_id,
        report.correct_count, report.incorrect_count, report.unattempted_count, report.dropped_count,
        *per_subject,
        report.total_score, source_url,
    ]


class ResultSheet:
    """Appends one row per scored response sheet to a worksheet."""

    def __init__(self, worksheet):
        self.worksheet = worksheet

    @classmethod
    def open(cls, credentials_json: str, sheet_name: str) -> "ResultSheet":
        client = get_gs_client(credentials_json)
        return cls(client.open(sheet_name).sheet1)

    def append(self, scored: ScoredSheet, contact: Optional[str] = None, source_url: Optional[str] = None):
        row = result_row(scored, contact or "", source_url or "")
        self.worksheet.append_row(row)
        logger.info("Recorded %s (%s) in results sheet", scored.sheet.general_info.roll_number, scored.exam_id)
