import os
import logging
import logging.config

import yaml
from fastapi import FastAPI, HTTPException

from api.schemas import (
    DecodeResponse,
    EncodeRequest,
    EncodeResponse,
    SpanSchema,
    TagsRequest,
    ValidateResponse,
    VocabularyResponse,
)
from spantags.codec import get_codec
from spantags.models import Span
from spantags.validators import is_valid_sequence


def setup_logging():
    cfg_path = os.path.join("configs", "logging.yaml")
    if os.path.exists(cfg_path):
        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            os.makedirs("logs", exist_ok=True)
            logging.config.dictConfig(config)
        except Exception as e:
            print(f"[logging] Failed to load logging.yaml: {e}")
            logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.INFO)


setup_logging()
logger = logging.getLogger("api")

app = FastAPI(
    title="spantags",
    version="0.1.0",
    description="Span <-> BIO/BILOU tag sequence codec.",
)


def _codec(scheme: str):
    try:
        return get_codec(scheme)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/encode", response_model=EncodeResponse)
def encode(req: EncodeRequest) -> EncodeResponse:
    logger.info("Received /encode request (%s, %d spans)", req.scheme, len(req.spans))
    codec = _codec(req.scheme)

    if req.tokens is None and req.length is None:
        raise HTTPException(status_code=422, detail="Either tokens or length is required")
    if req.tokens is not None and req.length is not None and len(req.tokens) != req.length:
        raise HTTPException(
            status_code=422,
            detail=f"length {req.length} does not match {len(req.tokens)} tokens",
        )
    length = len(req.tokens) if req.tokens is not None else req.length

    try:
        names = [Span(s.start, s.end, s.type) for s in req.spans]
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    for name in names:
        if name.end > length:
            raise HTTPException(
                status_code=422,
                detail=f"Name span {name} is outside of sentence with {length} tokens",
            )

    return EncodeResponse(tags=codec.encode(names, length))


@app.post("/decode", response_model=DecodeResponse)
def decode(req: TagsRequest) -> DecodeResponse:
    logger.info("Received /decode request (%s, %d tags)", req.scheme, len(req.tags))
    spans = _codec(req.scheme).decode(req.tags)
    return DecodeResponse(
        spans=[SpanSchema(start=s.start, end=s.end, type=s.type) for s in spans]
    )


@app.post("/vocabulary/check", response_model=VocabularyResponse)
def check_vocabulary(req: TagsRequest) -> VocabularyResponse:
    codec = _codec(req.scheme)
    consistent = codec.is_vocabulary_consistent(req.tags)
    if not consistent:
        logger.warning("Inconsistent %s vocabulary: %s", codec.name, sorted(set(req.tags)))
    return VocabularyResponse(scheme=codec.name, consistent=consistent)


@app.post("/validate", response_model=ValidateResponse)
def validate(req: TagsRequest) -> ValidateResponse:
    codec = _codec(req.scheme)
    return ValidateResponse(valid=is_valid_sequence(req.tags, codec.make_validator()))
