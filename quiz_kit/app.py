"""FastAPI application with all routes."""
from __future__ import annotations

import logging

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse

from quiz_kit.config import Settings, load_settings, save_settings
from quiz_kit.models import Question, QuestionType
from quiz_kit.parsers.question_parser import parse_questions_file
from quiz_kit.question_set import (
    all_same_type,
    append_blank,
    change_type_by_id,
    duplicate_in_sequence,
    edit_option,
    filter_non_empty,
    filter_published,
    find_by_id,
    names_of,
    publish_all,
    remove_by_id,
    rename_by_id,
    to_answers,
    to_csv,
    total_points,
    total_published_points,
)
from quiz_kit.widgets import CycleHoliday, DoubleHalf, StartAttempt, WidgetActionError

app = FastAPI(title="Quiz Kit")

_log = logging.getLogger("quiz_kit.api")

# Global state (initialized in startup)
_settings: Settings | None = None
_questions: list[Question] = []
_double_half = DoubleHalf()
_holiday = CycleHoliday()
_attempt = StartAttempt()


def get_settings() -> Settings:
    assert _settings is not None
    return _settings


def _load_questions(settings: Settings) -> list[Question]:
    path = settings.questions_full_path
    if not path.exists():
        _log.warning("Questions file not found: %s, starting empty", path)
        return []
    questions = parse_questions_file(path)
    _log.info("Loaded %d questions from %s", len(questions), path.name)
    return questions


def _next_id() -> int:
    return max((q.id for q in _questions), default=0) + 1


def _require(body: dict, key: str):
    if key not in body:
        raise HTTPException(400, f"Missing field: {key}")
    return body[key]


def _str_field(body: dict, key: str) -> str:
    value = _require(body, key)
    if not isinstance(value, str):
        raise HTTPException(400, f"Field {key} must be a string")
    return value


def _int_field(body: dict, key: str, default: int) -> int:
    value = body.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise HTTPException(400, f"Field {key} must be an integer")
    return value


def _valid_log_level(level) -> bool:
    return isinstance(level, str) and level.upper() in logging.getLevelNamesMapping()


def _apply_log_level(settings: Settings) -> None:
    level = settings.log_level
    if not _valid_log_level(level):
        _log.warning("Unknown log level %r, using INFO", level)
        level = "INFO"
    logging.getLogger().setLevel(level.upper())


def _check_type(type_: str) -> str:
    if type_ not in QuestionType.ALL:
        raise HTTPException(400, f"Unknown question type: {type_}")
    return type_


def _get_or_404(question_id: int) -> Question:
    q = find_by_id(_questions, question_id)
    if q is None:
        raise HTTPException(404, "Question not found")
    return q


@app.on_event("startup")
async def startup():
    global _settings, _questions
    if _settings is not None:
        return  # Already initialized (e.g. by tests)
    _settings = load_settings()
    _apply_log_level(_settings)
    _questions = _load_questions(_settings)


# ── API: Questions ────────────────────────────────────────────────────────

@app.get("/api/questions")
async def api_list_questions(published: bool = False, non_empty: bool = False):
    questions = _questions
    if published:
        questions = filter_published(questions)
    if non_empty:
        questions = filter_non_empty(questions)
    return [q.to_dict() for q in questions]


@app.get("/api/questions.csv")
async def api_questions_csv(published: bool = False):
    questions = filter_published(_questions) if published else _questions
    return PlainTextResponse(to_csv(questions), media_type="text/csv")


@app.post("/api/questions/publish")
async def api_publish_all():
    global _questions
    _questions = publish_all(_questions)
    _log.info("Published all %d questions", len(_questions))
    return [q.to_dict() for q in _questions]


@app.get("/api/questions/{question_id}")
async def api_get_question(question_id: int):
    return _get_or_404(question_id).to_dict()


@app.post("/api/questions")
async def api_add_question(request: Request):
    global _questions
    body = await request.json()
    name = _str_field(body, "name")
    type_ = _check_type(body.get("type", get_settings().default_question_type))
    new_id = _int_field(body, "id", _next_id())
    if find_by_id(_questions, new_id) is not None:
        raise HTTPException(409, f"Question {new_id} already exists")
    _questions = append_blank(_questions, new_id, name, type_)
    return _get_or_404(new_id).to_dict()


@app.delete("/api/questions/{question_id}")
async def api_remove_question(question_id: int):
    global _questions
    _get_or_404(question_id)
    _questions = remove_by_id(_questions, question_id)
    return {"removed": question_id, "remaining": len(_questions)}


@app.put("/api/questions/{question_id}/name")
async def api_rename_question(question_id: int, request: Request):
    global _questions
    body = await request.json()
    name = _str_field(body, "name")
    _get_or_404(question_id)
    _questions = rename_by_id(_questions, question_id, name)
    return _get_or_404(question_id).to_dict()


@app.put("/api/questions/{question_id}/type")
async def api_change_question_type(question_id: int, request: Request):
    global _questions
    body = await request.json()
    type_ = _check_type(_require(body, "type"))
    _get_or_404(question_id)
    _questions = change_type_by_id(_questions, question_id, type_)
    return _get_or_404(question_id).to_dict()


@app.put("/api/questions/{question_id}/options")
async def api_edit_option(question_id: int, request: Request):
    global _questions
    body = await request.json()
    option = _str_field(body, "option")
    index = _int_field(body, "index", -1)
    q = _get_or_404(question_id)
    if index != -1 and not 0 <= index < len(q.options):
        raise HTTPException(400, f"Option index {index} out of range")
    _questions = edit_option(_questions, question_id, index, option)
    return _get_or_404(question_id).to_dict()


@app.post("/api/questions/{question_id}/duplicate")
async def api_duplicate_question(question_id: int, request: Request):
    global _questions
    body = await request.json() if await request.body() else {}
    _get_or_404(question_id)
    new_id = _int_field(body, "new_id", _next_id())
    if find_by_id(_questions, new_id) is not None:
        raise HTTPException(409, f"Question {new_id} already exists")
    _questions = duplicate_in_sequence(_questions, question_id, new_id)
    return _get_or_404(new_id).to_dict()


@app.get("/api/answers")
async def api_answers():
    return [a.to_dict() for a in to_answers(_questions)]


@app.get("/api/stats")
async def api_stats():
    return {
        "names": names_of(_questions),
        "total_questions": len(_questions),
        "published_questions": len(filter_published(_questions)),
        "non_empty_questions": len(filter_non_empty(_questions)),
        "total_points": total_points(_questions),
        "total_published_points": total_published_points(_questions),
        "all_same_type": all_same_type(_questions),
    }


@app.post("/api/reset")
async def api_reset():
    global _questions
    _questions = _load_questions(get_settings())
    return {"total_questions": len(_questions)}


# ── API: Widgets ──────────────────────────────────────────────────────────

@app.get("/api/widgets/double-half")
async def api_double_half():
    return _double_half.to_dict()


@app.post("/api/widgets/double-half/double")
async def api_double():
    return _double_half.double()


@app.post("/api/widgets/double-half/halve")
async def api_halve():
    return _double_half.halve()


@app.get("/api/widgets/holiday")
async def api_holiday():
    return _holiday.to_dict()


@app.post("/api/widgets/holiday/next")
async def api_next_holiday(order: str = "year"):
    if order == "year":
        return _holiday.next_by_year()
    elif order == "alphabet":
        return _holiday.next_by_alphabet()
    raise HTTPException(400, f"Unknown order: {order}")


@app.get("/api/widgets/attempt")
async def api_attempt():
    return _attempt.to_dict()


@app.post("/api/widgets/attempt/{action}")
async def api_attempt_action(action: str):
    actions = {
        "start": _attempt.start,
        "stop": _attempt.stop,
        "mulligan": _attempt.mulligan,
    }
    if action not in actions:
        raise HTTPException(404, f"Unknown action: {action}")
    try:
        return actions[action]()
    except WidgetActionError as e:
        raise HTTPException(409, str(e))


# ── API: Settings ─────────────────────────────────────────────────────────

@app.get("/api/settings")
async def api_get_settings():
    return get_settings().to_dict()


@app.put("/api/settings")
async def api_update_settings(request: Request):
    body = await request.json()
    s = get_settings()
    if "log_level" in body and not _valid_log_level(body["log_level"]):
        raise HTTPException(400, f"Unknown log level: {body['log_level']}")
    known = {f.name for f in Settings.__dataclass_fields__.values()}
    for k, v in body.items():
        if k in known:
            setattr(s, k, v)
    save_settings(s)
    _apply_log_level(s)
    return s.to_dict()
