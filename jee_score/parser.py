"""Extract candidate details and responses from a digialm response sheet.

The sheet is loosely structured HTML: meaning lives in label text and in
which cell sits next to which. Every field is read by its own matcher that
returns ``None`` when the field is absent, so a missing row never stops the
rest of the sheet from being read.
"""
import logging
import re
from typing import Dict, List, Optional, Union

from bs4 import BeautifulSoup, Tag

from .errors import ParseError
from .models import NO_ANSWER, GeneralInfo, ParsedSheet, QuestionResponse, QuestionType, Subject

logger = logging.getLogger(__name__)

INFO_TABLE_STYLE = re.compile(r"width:\s*500px")
PANEL_CLASS = "question-pnl"
SECTION_CLASS = "section-cntnr"
SECTION_LABEL_CLASS = "section-lbl"
SHORT_ANSWER_CELL = 'td.bold[style*="word-break"]'

# first substring hit wins, in this order
INFO_LABELS = (
    ("application", "application_number"),
    ("name", "candidate_name"),
    ("roll", "roll_number"),
    ("date", "test_date"),
    ("time", "test_time"),
)

SECTION_SUBJECTS = (
    ("Physics", Subject.PHYSICS),
    ("Chemistry", Subject.CHEMISTRY),
    ("Mathematics", Subject.MATHS),
)

BLANK_ANSWERS = {"", "--"}


def parse_response_sheet(document: Union[str, bytes]) -> ParsedSheet:
    soup = BeautifulSoup(document, "html.parser")
    panels = soup.find_all(class_=PANEL_CLASS)
    if not panels:
        raise ParseError("Document has no question panels")

    info = extract_general_info(soup)

    questions: List[QuestionResponse] = []
    seen = set()
    for panel in panels:
        response = read_panel(panel)
        if response is None:
            continue
        if response.question_id in seen:
            raise ParseError(f"Question {response.question_id} appears more than once")
        seen.add(response.question_id)
        questions.append(response)

    logger.debug("Parsed %d of %d panels for roll number %r", len(questions), len(panels), info.roll_number)
    return ParsedSheet(general_info=info, questions=tuple(questions))


def extract_general_info(soup: BeautifulSoup) -> GeneralInfo:
    fields: Dict[str, str] = {}
    for table in soup.find_all("table", style=INFO_TABLE_STYLE):
        for row in table.find_all("tr"):
            cols = row.find_all("td")
            if len(cols) < 2:
                continue
            label = cols[0].get_text(strip=True).lower()
            value = cols[1].get_text(strip=True)
            for needle, field in INFO_LABELS:
                if needle in label:
                    fields.setdefault(field, value)
                    break
    return GeneralInfo(**fields)


def read_panel(panel: Tag) -> Optional[QuestionResponse]:
    question_id = cell_after(panel, "Question ID")
    if not question_id:
        return None

    raw_type = cell_after(panel, "Question Type") or ""
    if raw_type == QuestionType.MCQ.value:
        question_type = QuestionType.MCQ
        given = chosen_option_text(panel)
    elif raw_type == QuestionType.SA.value:
        question_type = QuestionType.SA
        given = short_answer_text(panel)
    else:
        question_type = QuestionType.UNKNOWN
        given = None

    if given is None or given in BLANK_ANSWERS:
        given = NO_ANSWER

    return QuestionResponse(
        question_id=question_id,
        given_answer=given,
        subject=panel_subject(panel),
        question_type=question_type,
    )


def cell_after(scope: Tag, label: Union[str, re.Pattern]) -> Optional[str]:
    """Text of the cell right after the first leaf cell whose text matches ``label``."""
    pattern = label if isinstance(label, re.Pattern) else re.compile(re.escape(label))
    for td in scope.find_all("td"):
        if td.find("td") is not None:
            continue
        if not pattern.search(td.get_text()):
            continue
        value = td.find_next_sibling("td")
        if value is not None:
            return value.get_text(strip=True)
    return None


def chosen_option_text(panel: Tag) -> Optional[str]:
    chosen = cell_after(panel, "Chosen Option")
    if not chosen or chosen in BLANK_ANSWERS:
        return None
    return cell_after(panel, re.compile(rf"\bOption {re.escape(chosen)}\b"))


def short_answer_text(panel: Tag) -> Optional[str]:
    cell = panel.select_one(SHORT_ANSWER_CELL)
    if cell is None:
        return None
    return cell.get_text(strip=True)


def panel_subject(panel: Tag) -> Subject:
    section = panel.find_parent(class_=SECTION_CLASS)
    if section is None:
        return Subject.UNKNOWN
    label = section.find(class_=SECTION_LABEL_CLASS)
    text = label.get_text() if label is not None else ""
    for needle, subject in SECTION_SUBJECTS:
        if needle in text:
            return subject
    return Subject.UNKNOWN
