import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from jee_score import AnswerKeyStore, ScoreError, format_report, score_document
from jee_score.config import Settings
from jee_score.fetch import fetch_document
from jee_score.sheets import ResultSheet

logger = logging.getLogger(__name__)


class StudentInput(BaseModel):
    url: Optional[str] = None
    html: Optional[str] = None
    phone: Optional[str] = None


def load_store(settings: Settings) -> AnswerKeyStore:
    if not settings.answer_keys_path:
        logger.warning("ANSWER_KEYS_PATH is not set; every sheet will report missing keys")
        return AnswerKeyStore.empty()
    return AnswerKeyStore.from_json(settings.answer_keys_path)


def create_app(settings: Optional[Settings] = None, store: Optional[AnswerKeyStore] = None, recorder=None) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    store = store if store is not None else load_store(settings)
    rules = settings.build_shift_rules()

    app = FastAPI(title="JEE Score Calculator")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def get_recorder():
        if recorder is not None:
            return recorder
        if settings.records_results:
            return ResultSheet.open(settings.google_credentials, settings.results_sheet)
        return None

    @app.get("/")
    async def health():
        return {"status": "Live", "answer_keys": len(store)}

    @app.post("/calculate")
    def process_student(data: StudentInput):
        if bool(data.url) == bool(data.html):
            return {"status": "error", "kind": "input", "message": "Send exactly one of url or html"}

        try:
            document = data.html if data.html else fetch_document(
                data.url, timeout=settings.fetch_timeout, user_agent=settings.fetch_user_agent
            )
            scored = score_document(document, store, rules)
        except ScoreError as e:
            logger.info("Could not score sheet (%s): %s", e.kind, e)
            return {"status": "error", "kind": e.kind, "message": e.user_message, "detail": str(e)}

        try:
            sheet = get_recorder()
            if sheet is not None:
                sheet.append(scored, contact=data.phone, source_url=data.url)
        except Exception:
            logger.exception("Failed to record result for %s", scored.sheet.general_info.roll_number)

        info = scored.sheet.general_info
        report = scored.report
        return {
            "status": "success",
            "exam_id": scored.exam_id,
            "name": info.candidate_name,
            "application_number": info.application_number,
            "roll_number": info.roll_number,
            "total": report.total_score,
            "max": report.max_score,
            "correct": report.correct_count,
            "incorrect": report.incorrect_count,
            "unattempted": report.unattempted_count,
            "dropped": report.dropped_count,
            "attempted": report.attempted_count,
            "total_questions": report.total_questions,
            "subjects": {name: stats.model_dump() for name, stats in report.subject_stats.items()},
            "report": format_report(info, report),
        }

    return app


app = create_app()
