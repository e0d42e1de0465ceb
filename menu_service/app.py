from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException

from .normalizer.config import DEFAULT_NORMALIZER_CONFIG
from .normalizer.models import MenuDocument
from .normalizer.summary import summarize_menu
from .normalizer.transform import build_menu_document, load_source_records

app = FastAPI(title="Menu Normalization API", version="1.0.0")


def _load_configured_menu() -> MenuDocument:
    try:
        records = load_source_records(DEFAULT_NORMALIZER_CONFIG.input_path)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Menu source file not found")
    return build_menu_document(records, DEFAULT_NORMALIZER_CONFIG)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/menu", response_model=MenuDocument, response_model_exclude_unset=True)
def menu() -> MenuDocument:
    return _load_configured_menu()


@app.get("/menu/summary")
def menu_summary() -> dict[str, Any]:
    return summarize_menu(_load_configured_menu())


@app.post("/menu/normalize", response_model=MenuDocument, response_model_exclude_unset=True)
def normalize(records: list[dict[str, Any]]) -> MenuDocument:
    return build_menu_document(records, DEFAULT_NORMALIZER_CONFIG)
