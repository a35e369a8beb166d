"""Vote-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from civicos.models.vote import VOTE_ABSTAIN, VOTE_NO, VOTE_YES
from civicos.schemas.common import CamelModel

_VOTE_WORDS = {"yes": VOTE_YES, "no": VOTE_NO, "abstain": VOTE_ABSTAIN, "neutral": VOTE_ABSTAIN}


class VoteTallyResponse(BaseModel):
    """Vote counts for a single item; keys stay snake_case."""

    total_votes: int = 0
    yes_votes: int = 0
    no_votes: int = 0
    abstentions: int = 0


class VoteCreate(CamelModel):
    """Schema for casting a vote."""

    item_id: int = Field(..., description="Identifier of the item being voted on")
    item_type: str = Field("bill", min_length=1, max_length=32)
    vote: int = Field(..., description="1 (yes), 0 (abstain) or -1 (no)")
    verification_id: str | None = Field(None, max_length=128)
    reasoning: str | None = Field(None, max_length=2000)

    @field_validator("vote", mode="before")
    @classmethod
    def _parse_vote(cls, value: object) -> int:
        if isinstance(value, bool):
            raise ValueError("vote must be 1, 0, -1, 'yes', 'no' or 'abstain'")
        if isinstance(value, str):
            word = value.strip().lower()
            if word in _VOTE_WORDS:
                return _VOTE_WORDS[word]
            try:
                value = int(word)
            except ValueError as err:
                raise ValueError("vote must be 1, 0, -1, 'yes', 'no' or 'abstain'") from err
        if value not in (VOTE_YES, VOTE_NO, VOTE_ABSTAIN):
            raise ValueError("vote must be 1, 0, -1, 'yes', 'no' or 'abstain'")
        return int(value)  # type: ignore[arg-type]


class VoteResponse(CamelModel):
    """A stored vote."""

    id: int
    user_id: int
    item_id: int
    item_type: str
    vote_value: int
    label: str
    reasoning: str | None
    verification_id: str
    integrity_hash: str
    created_at: datetime


class VoteCastResponse(CamelModel):
    """Result of a successful vote."""

    success: bool = True
    vote: VoteResponse
    tally: VoteTallyResponse
