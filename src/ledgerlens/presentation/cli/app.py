"""LedgerLens CLI application using Typer.

Every command reads an all-entries JSON payload (expenses, income and
budgets) and prints the requested view of it with rich tables.
"""

import logging
import sys
from datetime import date, datetime
from functools import lru_cache
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.table import Table

from ledgerlens.application.cache import QueryCache
from ledgerlens.application.dtos import ViewingContext
from ledgerlens.application.queries import (
    ChartDataQuery,
    DashboardQuery,
    DateWindowQuery,
    EntryListQuery,
    SearchQuery,
)
from ledgerlens.domain.entries.entities import UnifiedEntry
from ledgerlens.domain.entries.value_objects import (
    ALL_CATEGORIES,
    AllEntriesResponse,
    AmountBand,
    BreakdownPeriod,
    BucketFill,
    DateFilter,
    FilterOptions,
    ListViewState,
    SearchCardFilters,
    ViewType,
)
from ledgerlens.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)
from ledgerlens_config.settings import get_settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="ledgerlens",
    help="LedgerLens - expense and income views from the command line",
    no_args_is_help=True,
)
console = Console()

AMOUNT_BANDS = {
    "all": AmountBand.ALL,
    "under-10": AmountBand.UNDER_10,
    "10-50": AmountBand.FROM_10_TO_50,
    "50-100": AmountBand.FROM_50_TO_100,
    "over-100": AmountBand.OVER_100,
}

DATE_FILTERS = {
    "all": DateFilter.ALL,
    "today": DateFilter.TODAY,
    "yesterday": DateFilter.YESTERDAY,
    "this-week": DateFilter.THIS_WEEK,
    "this-month": DateFilter.THIS_MONTH,
}

ENTRIES_FILE = typer.Argument(..., help="Path to an all-entries JSON file")
VIEW_OPTION = typer.Option(None, "--view", "-v", help="Week or Month")
OFFSET_OPTION = typer.Option(0, "--offset", "-o", help="Windows back, 0 or negative")
TODAY_OPTION = typer.Option(None, "--today", help="Reference day (YYYY-MM-DD)")
PERSONAL_OPTION = typer.Option(False, "--personal", help="Show only your shares")
USER_OPTION = typer.Option(None, "--user-id", help="Your user id")
GROUP_OPTION = typer.Option(False, "--group", help="Group chat view")


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure CLI logging.

    Log lines go to stderr so they never mix with the rendered tables.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger("ledgerlens").setLevel(log_level)


@app.callback()
def main() -> None:
    """LedgerLens - expense and income views from the command line."""
    _configure_logging()


def _fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(code=1)


def _load_response(path: Path) -> AllEntriesResponse:
    try:
        payload = path.read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Cannot read {path}: {e.strerror or e}"
        raise ValidationError(msg, ErrorCode.INVALID_FORMAT) from e
    return AllEntriesResponse.model_validate_json(payload)


def _parse_day(value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        msg = f"Invalid date {value!r}, expected YYYY-MM-DD"
        raise ValidationError(msg, ErrorCode.INVALID_DATE) from e


def _parse_choice(value: str, choices: dict, label: str):
    key = value.strip().lower()
    if key not in choices:
        msg = f"Unknown {label} {value!r}, expected one of: {', '.join(choices)}"
        raise ValidationError(msg, ErrorCode.INVALID_FILTER)
    return choices[key]


def _view_type(value: str | None) -> ViewType:
    return ViewType.parse(value or get_settings().default_view_type)


def _context(personal: bool, user_id: str | None, group: bool) -> ViewingContext:
    # Personal mode wins over the group view
    return ViewingContext(
        is_personal_view=personal,
        user_id=user_id,
        is_group_view=group and not personal,
    )


def _query_kwargs(context: ViewingContext) -> dict:
    settings = get_settings()
    return {
        "context": context,
        "cache": QueryCache(settings.query_cache_size),
        "income_fallback_emoji": settings.income_fallback_emoji,
    }


def _filter_options(category: str | None, entry_type: str | None) -> FilterOptions:
    options = FilterOptions(category_id=category)
    if entry_type:
        options = options.with_entry_type(entry_type.strip().lower())
    return options


def _run(action) -> None:
    """Run ``action`` and report domain and input errors as red messages."""
    try:
        action()
    except DomainException as e:
        logger.debug("Command failed: %r", e)
        _fail(e.message)
    except PydanticValidationError as e:
        _fail(f"Invalid entries file: {e.error_count()} validation error(s)")


def _entries_table(title: str, entries: list[UnifiedEntry]) -> Table:
    table = Table(title=title)
    table.add_column("Date")
    table.add_column("Description")
    table.add_column("Category")
    table.add_column("Amount", justify="right")
    for entry in entries:
        amount = f"{entry.amount:.2f}"
        if entry.is_income:
            amount = f"[green]+{amount}[/green]"
        elif entry.is_personal_share:
            amount = f"{amount} [dim](of {entry.original_amount:.2f})[/dim]"
        table.add_row(
            entry.day.isoformat(),
            entry.description,
            f"{entry.emoji or ''} {entry.category}".strip(),
            amount,
        )
    return table


@app.command("entries")
def list_entries(
    path: Path = ENTRIES_FILE,
    view: Optional[str] = VIEW_OPTION,
    offset: int = OFFSET_OPTION,
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Search text"),
    bucket: Optional[str] = typer.Option(None, "--bucket", help="Chart bucket label"),
    category: Optional[str] = typer.Option(None, "--category", help="Category id"),
    entry_type: Optional[str] = typer.Option(
        None,
        "--type",
        help="income or expense",
    ),
    page: int = typer.Option(1, "--page", min=1, help="Page number"),
    today: Optional[str] = TODAY_OPTION,
    personal: bool = PERSONAL_OPTION,
    user_id: Optional[str] = USER_OPTION,
    group: bool = GROUP_OPTION,
) -> None:
    """List entries of a week or month, or search all of them."""

    def action() -> None:
        state = ListViewState.default(_view_type(view)).with_time_offset(offset)
        if search is not None:
            state = state.toggle_search().with_search_query(search)
        if bucket:
            state = state.with_bucket(bucket)
        if category:
            state = state.with_category(category)
        if entry_type:
            state = state.with_entry_type(entry_type.strip().lower())

        query = EntryListQuery(
            _load_response(path),
            **_query_kwargs(_context(personal, user_id, group)),
        )
        result = query.execute(state, today=_parse_day(today))

        page_size = get_settings().list_page_size
        first = (page - 1) * page_size
        shown = result.entries[first : first + page_size]
        pages = max(1, -(-len(result.entries) // page_size))

        if state.is_search_active:
            title = f"Search: {search!r}"
        else:
            title = str(result.window.date_range)
        console.print(_entries_table(title, shown))
        console.print(
            f"[dim]Page {page} of {pages} | {result.stats.total} entries "
            f"({result.stats.expense_count} expenses, "
            f"{result.stats.income_count} income) | "
            f"total {result.stats.total_amount:.2f}[/dim]"
        )

    _run(action)


@app.command("chart")
def chart(
    path: Path = ENTRIES_FILE,
    view: Optional[str] = VIEW_OPTION,
    offset: int = OFFSET_OPTION,
    category: Optional[str] = typer.Option(None, "--category", help="Category id"),
    entry_type: Optional[str] = typer.Option(
        None,
        "--type",
        help="income or expense",
    ),
    today: Optional[str] = TODAY_OPTION,
    personal: bool = PERSONAL_OPTION,
    user_id: Optional[str] = USER_OPTION,
    group: bool = GROUP_OPTION,
) -> None:
    """Show per-day totals of a week or month."""

    def action() -> None:
        query = ChartDataQuery(
            _load_response(path),
            **_query_kwargs(_context(personal, user_id, group)),
        )
        result = query.execute(
            _view_type(view),
            offset,
            options=_filter_options(category, entry_type),
            today=_parse_day(today),
        )

        table = Table(title=str(result.window.date_range))
        table.add_column("Day")
        table.add_column("Amount", justify="right")
        for point in result.points:
            style = "bold yellow" if point.fill is BucketFill.HIGHLIGHT else None
            table.add_row(point.name, f"{point.amount:.2f}", style=style)
        console.print(table)
        console.print(f"Total {result.total:.2f} | average {result.line_value:.2f}")

    _run(action)


@app.command("window")
def window(
    path: Path = ENTRIES_FILE,
    view: Optional[str] = VIEW_OPTION,
    offset: int = OFFSET_OPTION,
    today: Optional[str] = TODAY_OPTION,
) -> None:
    """Show the date range of a week or month and whether it can go back."""

    def action() -> None:
        query = DateWindowQuery(_load_response(path), **_query_kwargs(ViewingContext()))
        result = query.execute(_view_type(view), offset, today=_parse_day(today))
        console.print(f"[bold]{result.date_range}[/bold]")
        console.print(
            f"{result.date_range.first_day.isoformat()} .. "
            f"{result.date_range.last_day.isoformat()}"
        )
        console.print(f"Can go back: {'yes' if result.can_go_back else 'no'}")

    _run(action)


@app.command("search")
def search(
    path: Path = ENTRIES_FILE,
    text: str = typer.Option("", "--query", "-q", help="Search text"),
    category: str = typer.Option(ALL_CATEGORIES, "--category", help="Category name"),
    amount: str = typer.Option("all", "--amount", help=", ".join(AMOUNT_BANDS)),
    when: str = typer.Option("all", "--date", help=", ".join(DATE_FILTERS)),
    now: Optional[str] = typer.Option(
        None,
        "--now",
        help="Reference moment (ISO 8601)",
    ),
    personal: bool = PERSONAL_OPTION,
    user_id: Optional[str] = USER_OPTION,
    group: bool = GROUP_OPTION,
) -> None:
    """Search all entries by text, category, amount and date."""

    def action() -> None:
        filters = SearchCardFilters(
            search_query=text,
            category=category,
            amount=_parse_choice(amount, AMOUNT_BANDS, "amount band"),
            date=_parse_choice(when, DATE_FILTERS, "date filter"),
        )
        moment = None
        if now is not None:
            try:
                moment = datetime.fromisoformat(now)
            except ValueError as e:
                msg = f"Invalid moment {now!r}, expected ISO 8601"
                raise ValidationError(msg, ErrorCode.INVALID_DATE) from e

        query = SearchQuery(
            _load_response(path),
            **_query_kwargs(_context(personal, user_id, group)),
        )
        entries = query.execute(filters, now=moment)
        console.print(_entries_table(f"{len(entries)} matching entries", entries))

    _run(action)


@app.command("dashboard")
def dashboard(
    path: Path = ENTRIES_FILE,
    period: str = typer.Option(
        BreakdownPeriod.MONTHLY.value,
        "--period",
        "-p",
        help="daily, weekly or monthly",
    ),
    today: Optional[str] = TODAY_OPTION,
    personal: bool = PERSONAL_OPTION,
    user_id: Optional[str] = USER_OPTION,
) -> None:
    """Show spending of today, this week or this month against budgets."""

    def action() -> None:
        selected = _parse_choice(
            period,
            {p.value: p for p in BreakdownPeriod},
            "period",
        )
        query = DashboardQuery(
            _load_response(path),
            **_query_kwargs(_context(personal, user_id, group=False)),
        )
        data = query.execute(selected, today=_parse_day(today))

        console.print(f"\n[bold green]{data.period_label}[/bold green]")
        console.print(f"Spent: [bold]{data.total_expenses:.2f}[/bold]")

        breakdown = Table(title="Breakdown")
        breakdown.add_column("Bucket")
        breakdown.add_column("Amount", justify="right")
        for bucket in data.breakdown:
            breakdown.add_row(bucket.label, f"{bucket.amount:.2f}")
        console.print(breakdown)

        categories = Table(title=f"Categories ({data.num_of_budgets} budgets)")
        categories.add_column("Category")
        categories.add_column("Spent", justify="right")
        categories.add_column("Budget", justify="right")
        categories.add_column("Remaining", justify="right")
        for item in data.categories:
            remaining = f"{item.remaining:.2f}"
            if item.remaining < 0:
                remaining = f"[red]{remaining}[/red]"
            categories.add_row(
                f"{item.emoji} {item.name}",
                f"{item.spent:.2f}",
                f"{item.budget:.2f}",
                remaining,
            )
        console.print(categories)

        summary = data.summary
        console.print(
            f"Income {summary.total_income:.2f} | "
            f"Expenses {summary.total_expenses:.2f} | "
            f"Budget {summary.total_budget:.2f}"
        )

    _run(action)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
