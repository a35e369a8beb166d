"""Insert a small demo dataset of bills, politicians, petitions and legal references."""
from __future__ import annotations

import argparse
import logging
from datetime import timedelta

from sqlalchemy.orm import Session

from civicos.core.settings import settings
from civicos.db.session import SessionLocal, create_tables
from civicos.db.time import utcnow
from civicos.models import (
    Bill,
    BillRollcall,
    CampaignFinance,
    LegalAct,
    LegalCase,
    Petition,
    Politician,
    PoliticianTruthTracking,
    RollcallRecord,
)

logger = logging.getLogger(__name__)

DEMO_BILLS = [
    ("C-21", "Firearms Amendment Act", "Justice", "Active"),
    ("C-18", "Online News Act", "Media", "Passed"),
    ("C-56", "Affordable Housing and Groceries Act", "Housing", "Active"),
]

DEMO_POLITICIANS = [
    ("Alex Tremblay", "Liberal", "Member of Parliament", "Ottawa Centre", "federal", "mp-1001"),
    ("Jordan Singh", "Conservative", "Member of Parliament", "Calgary North", "federal", "mp-1002"),
]

DEMO_ACTS = [
    ("Canadian Charter of Rights and Freedoms", "1982 c. 11", "Constitution", "Guarantees fundamental freedoms and democratic rights."),
    ("Criminal Code", "R.S.C. 1985, c. C-46", "Criminal", "Defines criminal offences and procedure."),
    ("Access to Information Act", "R.S.C. 1985, c. A-1", "Transparency", "Right of access to federal government records."),
]


def seed(db: Session) -> bool:
    """Populate demo rows unless bills already exist. Returns True if seeded."""
    if db.query(Bill.id).first() is not None:
        logger.info("Database already has bills; skipping seed")
        return False

    now = utcnow()
    bills = [
        Bill(
            bill_number=number,
            title=title,
            category=category,
            status=status,
            jurisdiction="federal",
            voting_deadline=now + timedelta(days=14),
        )
        for number, title, category, status in DEMO_BILLS
    ]
    db.add_all(bills)

    politicians = [
        Politician(
            name=name,
            party=party,
            position=position,
            riding=riding,
            level=level,
            jurisdiction="federal",
            parliament_member_id=member_id,
            is_incumbent=True,
        )
        for name, party, position, riding, level, member_id in DEMO_POLITICIANS
    ]
    db.add_all(politicians)
    db.flush()

    rollcall = BillRollcall(bill_number="C-21", parliament=44, session="1", vote_number=1, result="Agreed To", held_at=now)
    db.add(rollcall)
    db.flush()
    db.add_all(
        [
            RollcallRecord(rollcall_id=rollcall.id, member_id="mp-1001", decision="yes", party="Liberal"),
            RollcallRecord(rollcall_id=rollcall.id, member_id="mp-1002", decision="no", party="Conservative"),
            CampaignFinance(politician_id=politicians[0].id, amount=45_000.0, source="Elections Canada"),
            PoliticianTruthTracking(politician_id=politicians[1].id, truth_score=1.5),
        ]
    )

    db.add(
        Petition(
            title="Expand public transit funding",
            description="Call on Parliament to double the permanent transit fund.",
            category="Transportation",
            jurisdiction="federal",
            target_signatures=500,
            deadline=now + timedelta(days=settings.petition_default_duration_days),
        )
    )
    db.add_all(
        [
            LegalAct(title=title, act_number=number, category=category, summary=summary, jurisdiction="federal")
            for title, number, category, summary in DEMO_ACTS
        ]
    )
    db.add(
        LegalCase(
            case_number="2015 SCC 5",
            title="Carter v. Canada (Attorney General)",
            description="Prohibition on physician-assisted dying found unconstitutional.",
            jurisdiction="federal",
            status="Decided",
        )
    )
    db.commit()
    logger.info("Seeded %d bills and %d politicians", len(bills), len(politicians))
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Load CivicOS demo data")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding (for SQLite development databases).",
    )
    args = parser.parse_args()
    logging.basicConfig(level=settings.log_level.upper())

    if args.create_tables:
        create_tables()
    with SessionLocal() as db:
        seed(db)


if __name__ == "__main__":
    main()
