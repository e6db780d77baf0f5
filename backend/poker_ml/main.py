# poker_ml/main.py
import logging
from pathlib import Path
from fastapi import FastAPI, HTTPException, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, PlainTextResponse
from pydantic import ValidationError
from .config import INSUFFICIENT_DATA, LOG_LEVEL, MODEL_FILE
from .schemas import GameStateIn, ObservationIn
from .repository import ObservationRepository
from .poker_service import (
    decision_stats,
    format_accuracy,
    predict_decision,
    record_and_retrain,
)

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

INDEX_HTML = Path(__file__).parent / "static" / "index.html"

app = FastAPI(title="Poker Decision ML")


def get_repository() -> ObservationRepository:
    return ObservationRepository()  # reads POKER_DATA_FILE from env


def get_model_file() -> str:
    return MODEL_FILE


def _parse(model, form: dict):
    try:
        return model.model_validate(form)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Schema validation error: {e}")


@app.get("/", response_class=HTMLResponse)
def index():
    return HTMLResponse(INDEX_HTML.read_text(encoding="utf-8"))


@app.post("/", response_class=PlainTextResponse)
async def submit(
    request: Request,
    repo: ObservationRepository = Depends(get_repository),
    model_file: str = Depends(get_model_file),
):
    form = dict(await request.form())

    if "save" in form:
        observation = _parse(ObservationIn, form).to_entity()
        try:
            accuracy = await run_in_threadpool(
                record_and_retrain, repo, observation, model_file
            )
        except Exception as e:
            logger.exception("save failed")
            raise HTTPException(status_code=500, detail=f"save error: {e}")
        return PlainTextResponse(format_accuracy(accuracy))

    if "predict" in form:
        state = _parse(GameStateIn, form)
        try:
            prediction = await run_in_threadpool(predict_decision, repo, state)
        except Exception as e:
            logger.exception("prediction failed")
            raise HTTPException(status_code=500, detail=f"prediction error: {e}")
        if prediction is None:
            return PlainTextResponse(INSUFFICIENT_DATA)
        return PlainTextResponse(prediction)

    raise HTTPException(status_code=400, detail="expected a 'save' or 'predict' field")


@app.get("/records")
def get_records(repo: ObservationRepository = Depends(get_repository)):
    return [r.to_dict() for r in repo.load()]


@app.get("/stats")
def get_stats(repo: ObservationRepository = Depends(get_repository)):
    return decision_stats(repo.load())
