"""Tabular exports of a ledger: CSV files and an Excel summary workbook."""
import csv
import io
import re
from urllib.parse import quote

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from tripsplit.schemas import Ledger, SettlementItem
from tripsplit.services.settlement_calculator import settle_ledger
from tripsplit.services.tolerance import round_money

SETTLED_UP = "Everyone is settled up!"
SETTLEMENT_HEADERS = ["Who Owes", "Amount", "Who Gets Paid"]
EXPENSE_HEADERS = ["Date", "Title", "Paid By", "Amount", "Split Type", "Split Between", "Settled"]


def member_name(ledger: Ledger, member_id: str) -> str:
    return next((m.name for m in ledger.members if m.id == member_id), "Unknown Member")


def settlement_rows(ledger: Ledger, settlements: list[SettlementItem]) -> list[dict]:
    """One row per transfer, or a single placeholder row when nobody owes anything."""
    if not settlements:
        return [{"Who Owes": SETTLED_UP, "Amount": "", "Who Gets Paid": ""}]
    return [
        {
            "Who Owes": member_name(ledger, s.from_member_id),
            "Amount": round_money(s.amount),
            "Who Gets Paid": member_name(ledger, s.to_member_id),
        }
        for s in settlements
    ]


def export_filename(ledger: Ledger, suffix: str) -> str:
    """ASCII-only file name: anything but letters and digits in the trip name becomes _."""
    return f"{re.sub(r'[^a-zA-Z0-9]', '_', ledger.name)}_{suffix}"


def content_disposition(ledger: Ledger, suffix: str) -> str:
    """Attachment header with the ASCII name plus the UTF-8 trip name (RFC 5987)."""
    utf8_name = quote(f"{ledger.name.replace(' ', '_')}_{suffix}", safe="")
    return f"attachment; filename=\"{export_filename(ledger, suffix)}\"; filename*=UTF-8''{utf8_name}"


def settlements_csv(ledger: Ledger) -> str:
    _, settlements = settle_ledger(ledger)
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=SETTLEMENT_HEADERS)
    writer.writeheader()
    for row in settlement_rows(ledger, settlements):
        if row["Amount"] != "":
            row["Amount"] = f"{row['Amount']:.2f}"
        writer.writerow(row)
    return output.getvalue()


def expenses_csv(ledger: Ledger) -> str:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(EXPENSE_HEADERS)
    for e in ledger.expenses:
        writer.writerow([
            e.date.strftime("%Y-%m-%d"),
            e.title,
            member_name(ledger, e.paid_by),
            f"{e.amount:.2f}",
            e.split_type,
            ", ".join(member_name(ledger, s.member_id) for s in e.split_between),
            "yes" if e.settled else "no",
        ])
    return output.getvalue()


# ----- Workbook -----
def _style_header(ws, row=1):
    header_font = Font(bold=True, color="FFFFFF")
    fill = PatternFill("solid", fgColor="5B9BD5")
    align = Alignment(horizontal="center", vertical="center")
    thin = Side(style="thin", color="A0A0A0")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    for cell in ws[row]:
        cell.font = header_font
        cell.fill = fill
        cell.alignment = align
        cell.border = border


def _autosize_columns(ws, min_width=12, max_width=45):
    for col in range(1, ws.max_column + 1):
        letter = get_column_letter(col)
        max_len = max((len(str(c.value)) for c in ws[letter] if c.value is not None), default=0)
        ws.column_dimensions[letter].width = max(min_width, min(max_width, max_len + 2))


def _money_column(ws, col):
    for r in range(2, ws.max_row + 1):
        cell = ws.cell(r, col)
        if isinstance(cell.value, (int, float)):
            cell.number_format = "0.00"


def summary_workbook(ledger: Ledger) -> bytes:
    """
    Excel workbook with three sheets:
    - Payments Summary: total paid per member, settled expenses included
    - All Expenses
    - Settlement Plan: who pays whom to settle the unsettled expenses
    """
    balances, settlements = settle_ledger(ledger)

    wb = Workbook()
    wb.remove(wb.active)

    ws = wb.create_sheet("Payments Summary")
    ws.append(["Member", "Total Paid"])
    for m in ledger.members:
        ws.append([m.name, round_money(balances.total_contributed.get(m.id, 0.0))])
    _money_column(ws, 2)

    ws = wb.create_sheet("All Expenses")
    ws.append(["Date", "Title", "Paid By", "Amount", "Split Between"])
    for e in ledger.expenses:
        ws.append([
            e.date.strftime("%Y-%m-%d"),
            e.title,
            member_name(ledger, e.paid_by),
            e.amount,
            ", ".join(member_name(ledger, s.member_id) for s in e.split_between),
        ])
    _money_column(ws, 4)

    ws = wb.create_sheet("Settlement Plan")
    ws.append(SETTLEMENT_HEADERS)
    for row in settlement_rows(ledger, settlements):
        ws.append([row[h] for h in SETTLEMENT_HEADERS])
    _money_column(ws, 2)

    for ws in wb.worksheets:
        _style_header(ws, 1)
        ws.freeze_panes = "A2"
        _autosize_columns(ws)

    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()
