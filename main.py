import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from models import (CandidateResponse, DictionaryInfoResponse,
                    LetterValuesResponse, SolveRequest, SolveResponse)
from solver.constants import BLANK_TILE, DICTIONARY_SOURCE, LETTER_SCORES
from solver.dictionary import load_dictionary
from solver.engine import DEFAULT_SORT_MODE, format_results, solve
from solver.filters import WordFilters

logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

app = FastAPI(title="Scrabble Word Finder")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"]
)

# Loaded once and only ever read afterwards
solver_dictionary = load_dictionary()


@app.post("/api/solver/solve", response_model=SolveResponse, tags=["Solver"])
async def solve_rack(request: SolveRequest):
    if not solver_dictionary:
        raise HTTPException(status_code=503, detail="Dictionary is not loaded.")

    mode = (request.sort_method or DEFAULT_SORT_MODE).resolve()
    filters = WordFilters(request.starts_with,
                          request.ends_with, request.contains)
    candidates = solve(solver_dictionary, request.letters, filters, mode)
    logger.info(
        f"Solved rack '{request.letters}' (starts: '{filters.starts_with or ''}', ends: '{filters.ends_with or ''}', "
        f"contains: '{filters.contains or ''}', sort: {mode.value}). {len(candidates)} words found.")

    return SolveResponse(
        results=[CandidateResponse(word=c.word, score=c.score)
                 for c in candidates],
        count=len(candidates), sort_method=mode,
        formatted=format_results(candidates)
    )


@app.get("/api/solver/letters", response_model=LetterValuesResponse, tags=["Solver Info"])
async def get_letter_values():
    return LetterValuesResponse(letter_scores=dict(LETTER_SCORES), blank_tile=BLANK_TILE)


@app.get("/api/solver/dictionary", response_model=DictionaryInfoResponse, tags=["Solver Info"])
async def get_dictionary_info():
    return DictionaryInfoResponse(source=DICTIONARY_SOURCE, word_count=len(solver_dictionary))

if __name__ == "__main__":
    import uvicorn
    logger.info("Starting Scrabble word finder server...")
    if not solver_dictionary:
        logger.critical(
            "Word dictionary issue: Dictionary is empty or not loaded. Exiting.")
        exit(1)
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
