# src/civicos/api/v1/endpoints/voting.py
"""Vote-related endpoints for the CivicOS API."""

from fastapi import APIRouter, Query, status

from civicos.api.v1.dependencies import CurrentUserDep, SessionDep
from civicos.api.v1.errors import to_http_exception
from civicos.schemas.vote import VoteCastResponse, VoteCreate, VoteResponse, VoteTallyResponse
from civicos.services.exceptions import CivicServiceError
from civicos.services.tally import tally_item
from civicos.services.voting import cast_vote, user_votes

router = APIRouter(prefix="/voting", tags=["voting"])


@router.post("/vote", response_model=VoteCastResponse, status_code=status.HTTP_201_CREATED)
async def vote(payload: VoteCreate, db: SessionDep, current_user: CurrentUserDep) -> VoteCastResponse:
    """Cast a vote. Each user votes at most once per item; repeats are a 409."""
    try:
        stored = cast_vote(
            db,
            user_id=current_user.id,
            item_id=payload.item_id,
            item_type=payload.item_type,
            vote_value=payload.vote,
            verification_id=payload.verification_id,
            reasoning=payload.reasoning,
        )
    except CivicServiceError as err:
        raise to_http_exception(err) from err

    tally = tally_item(db, payload.item_id, payload.item_type)
    return VoteCastResponse(
        vote=VoteResponse.model_validate(stored),
        tally=VoteTallyResponse(**tally.as_dict()),
    )


@router.get("/user-votes", response_model=dict[str, str])
async def list_user_votes(
    db: SessionDep,
    current_user: CurrentUserDep,
    item_type: str = Query("bill", alias="itemType"),
) -> dict[str, str]:
    """Map each item id the caller voted on to "yes", "no" or "abstain"."""
    return {str(item_id): label for item_id, label in user_votes(db, current_user.id, item_type).items()}


@router.get("/results/{item_type}/{item_id}", response_model=VoteTallyResponse)
async def results(item_type: str, item_id: int, db: SessionDep) -> VoteTallyResponse:
    return VoteTallyResponse(**tally_item(db, item_id, item_type).as_dict())
