"""Exports: settlement plan and expense list as CSV, trip summary as xlsx."""
import logging
from typing import Callable

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from tripsplit.exceptions import UnknownMemberError
from tripsplit.schemas import Ledger
from tripsplit.services.reports import content_disposition, expenses_csv, settlements_csv, summary_workbook

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/exports", tags=["exports"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _attachment(ledger: Ledger, render: Callable, media_type: str, suffix: str) -> Response:
    try:
        content = render(ledger)
    except UnknownMemberError as exc:
        logger.warning("Rejected ledger %r: %s", ledger.name, exc)
        raise HTTPException(status_code=400, detail=str(exc))
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": content_disposition(ledger, suffix)},
    )


@router.post("/settlements.csv")
def export_settlements(ledger: Ledger):
    return _attachment(ledger, settlements_csv, "text/csv", "settlements.csv")


@router.post("/expenses.csv")
def export_expenses(ledger: Ledger):
    return _attachment(ledger, expenses_csv, "text/csv", "expenses.csv")


@router.post("/summary.xlsx")
def export_summary(ledger: Ledger):
    return _attachment(ledger, summary_workbook, XLSX_MEDIA_TYPE, "summary.xlsx")
