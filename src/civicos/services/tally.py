"""Vote tally assembly for bills and other votable items."""
from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import asdict, dataclass

from sqlalchemy.orm import Session

from civicos.models import Vote
from civicos.models.vote import VOTE_ABSTAIN, VOTE_NO, VOTE_YES
from civicos.services.counters import count_by_value, count_grouped_by_value


@dataclass(frozen=True)
class VoteTally:
    """Yes/no/abstain counts for one item. Fields are never negative or null."""

    total_votes: int = 0
    yes_votes: int = 0
    no_votes: int = 0
    abstentions: int = 0

    @classmethod
    def from_counts(cls, counts: Mapping[Hashable, int]) -> VoteTally:
        """Build a tally from a ``{vote_value: count}`` mapping."""
        yes = int(counts.get(VOTE_YES, 0))
        no = int(counts.get(VOTE_NO, 0))
        abstain = int(counts.get(VOTE_ABSTAIN, 0))
        return cls(
            total_votes=yes + no + abstain,
            yes_votes=yes,
            no_votes=no,
            abstentions=abstain,
        )

    def as_dict(self) -> dict[str, int]:
        return asdict(self)

    def support_percentages(self) -> dict[str, int]:
        """Return rounded yes/no/neutral shares of the total, 0 when nobody voted."""
        if self.total_votes == 0:
            return {"yes": 0, "no": 0, "neutral": 0}
        return {
            "yes": round(self.yes_votes / self.total_votes * 100),
            "no": round(self.no_votes / self.total_votes * 100),
            "neutral": round(self.abstentions / self.total_votes * 100),
        }


def tally_item(db: Session, item_id: int, item_type: str = "bill") -> VoteTally:
    """Tally the votes on one item with a single grouped query."""
    counts = count_by_value(db, Vote.item_id, Vote.vote_value, item_id, Vote.item_type == item_type)
    return VoteTally.from_counts(counts)


def tally_items(
    db: Session,
    item_ids: Iterable[int],
    item_type: str = "bill",
) -> dict[int, VoteTally]:
    """Tally many items at once; items without votes get an all-zero tally."""
    grouped = count_grouped_by_value(
        db,
        Vote.item_id,
        Vote.vote_value,
        item_ids,
        Vote.item_type == item_type,
    )
    return {item_id: VoteTally.from_counts(counts) for item_id, counts in grouped.items()}
