from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from solver.constants import MAX_INPUT_LENGTH
from solver.engine import SortMode


class SolveRequest(BaseModel):
    letters: str = Field(..., min_length=1, max_length=MAX_INPUT_LENGTH)
    starts_with: Optional[str] = Field(None, max_length=MAX_INPUT_LENGTH)
    ends_with: Optional[str] = Field(None, max_length=MAX_INPUT_LENGTH)
    contains: Optional[str] = Field(None, max_length=MAX_INPUT_LENGTH)
    sort_method: Optional[SortMode] = None


class CandidateResponse(BaseModel):
    word: str
    score: int


class SolveResponse(BaseModel):
    results: List[CandidateResponse]
    count: int
    sort_method: SortMode
    formatted: str


class LetterValuesResponse(BaseModel):
    letter_scores: Dict[str, int]
    blank_tile: str
    blank_score: int = 0


class DictionaryInfoResponse(BaseModel):
    source: str
    word_count: int
