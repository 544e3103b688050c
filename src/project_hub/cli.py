"""Command-line interface for Project Hub."""

import logging
from pathlib import Path

import click
from rich.logging import RichHandler
from rich.table import Table

from .config import ConfigModel, get_config, load_config
from .errors import HubError
from .formatting import format_smart_date, format_smart_date_time
from .parser import parse_natural_date
from .query import SortKey, StatusFilter, filter_todos, fuzzy_search, sort_todos, todo_stats
from .quick_add import QuickAddForm
from .storage import Storage
from .theme import due_badge, get_console, priority_style
from .todo import TodoPriority
from .ui_state import PERSISTED_FIELDS, UIStateStore
from .urgency import classify_urgency

logger = logging.getLogger(__name__)

PRIORITY_CHOICES = [p.value for p in TodoPriority]


def setup_logging(level: str) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _config(ctx: click.Context) -> ConfigModel:
    return ctx.obj["config"]


def _storage(ctx: click.Context) -> Storage:
    return Storage(_config(ctx))


def _console(ctx: click.Context):
    return get_console(no_color=_config(ctx).no_color)


@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx, config_path, verbose):
    """Project Hub - todos with natural language due dates."""
    ctx.ensure_object(dict)

    if config_path:
        config = load_config(Path(config_path))
    else:
        config = get_config()

    setup_logging("DEBUG" if verbose else config.log_level)
    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("text")
@click.pass_context
def parse(ctx, text):
    """Show the date detected in TEXT without saving anything.

    Example: hub parse "finish report next tuesday"
    """
    console = _console(ctx)
    form = QuickAddForm()
    suggestion = form.set_text(text)

    if suggestion is None:
        console.print("[muted]No date detected.[/muted]")
        console.print(f"Title: {text.strip()}")
        return

    result = parse_natural_date(text)
    urgency = classify_urgency(suggestion.date)

    console.print(f"Title: {suggestion.text or '[error](empty)[/error]'}")
    console.print("Detected date: ", due_badge(format_smart_date_time(suggestion.date), urgency), sep="")
    console.print(f"[muted]Phrase: {result.text!r}  Confidence: {result.confidence:.1f}  "
                  f"Urgency: {urgency.value}[/muted]")


@cli.command()
@click.argument("text")
@click.option("--due", help="Due date phrase, e.g. 'friday 5pm'")
@click.option("--priority", "-p", type=click.Choice(PRIORITY_CHOICES), help="Todo priority")
@click.option("--project", "projects", multiple=True, help="Project id to link (repeatable)")
@click.option("--no-parse", is_flag=True, help="Keep the text as typed, without date detection")
@click.pass_context
def add(ctx, text, due, priority, projects, no_parse):
    """Add a todo, picking up a due date written in the title.

    Examples:
      hub add "finish report next tuesday"
      hub add "pay invoice in 2 weeks" -p high
    """
    console = _console(ctx)
    config = _config(ctx)

    form = QuickAddForm()
    form.set_priority(priority or config.default_priority)
    for project_id in projects:
        form.toggle_project(project_id)

    form.set_text(text)
    if no_parse or due:
        form.dismiss_suggestion()

    if due:
        resolved = parse_natural_date(due).date
        if resolved is None:
            raise click.BadParameter(f"Could not understand {due!r}", param_hint="--due")
        form.set_due_date(resolved)

    try:
        draft = form.submit()
        todo = _storage(ctx).add(draft)
    except HubError as e:
        raise click.ClickException(str(e))

    message = f"[success]Added[/success] #{todo.id}: {todo.title}"
    if todo.due_date:
        message += f" [muted](due {format_smart_date_time(todo.due_date)})[/muted]"
    console.print(message)


@cli.command(name="list")
@click.option("--filter", "status", type=click.Choice([s.value for s in StatusFilter]),
              default=StatusFilter.PENDING.value, show_default=True, help="Which todos to show")
@click.option("--priority", "-p", type=click.Choice(PRIORITY_CHOICES), help="Only this priority")
@click.option("--sort", "sort_key", type=click.Choice([k.value for k in SortKey]),
              default=SortKey.DUE_DATE.value, show_default=True, help="Sort order")
@click.pass_context
def list_todos(ctx, status, priority, sort_key):
    """List todos with urgency-coloured due dates."""
    console = _console(ctx)
    todos = _storage(ctx).load_todos()

    visible = filter_todos(
        todos,
        status=StatusFilter(status),
        priority=TodoPriority(priority) if priority else None,
    )
    visible = sort_todos(visible, SortKey(sort_key))

    if not visible:
        console.print("[muted]No todos found.[/muted]")
        return

    table = Table(show_header=True, header_style="header")
    table.add_column("ID", justify="right", style="muted")
    table.add_column("", width=1)
    table.add_column("Title")
    table.add_column("Due")
    table.add_column("Priority")

    for todo in visible:
        urgency = todo.urgency()
        table.add_row(
            str(todo.id),
            "✓" if todo.is_completed else "",
            todo.title,
            due_badge(format_smart_date(todo.due_date), urgency),
            f"[{priority_style(todo.priority)}]{todo.priority.value}[/{priority_style(todo.priority)}]",
        )

    console.print(table)


def _set_completed(ctx, todo_id: int, is_completed: bool):
    storage = _storage(ctx)
    try:
        todo = storage.get(todo_id)
        todo.toggle(is_completed)
        storage.update(todo)
    except HubError as e:
        raise click.ClickException(str(e))
    return todo


@cli.command()
@click.argument("todo_id", type=int)
@click.pass_context
def done(ctx, todo_id):
    """Mark a todo as completed."""
    todo = _set_completed(ctx, todo_id, True)
    _console(ctx).print(f"[success]Completed[/success] #{todo.id}: {todo.title}")


@cli.command()
@click.argument("todo_id", type=int)
@click.pass_context
def reopen(ctx, todo_id):
    """Reopen a completed todo."""
    todo = _set_completed(ctx, todo_id, False)
    _console(ctx).print(f"Reopened #{todo.id}: {todo.title}")


@cli.command()
@click.argument("todo_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete(ctx, todo_id, yes):
    """Delete a todo."""
    if not yes:
        click.confirm(f"Delete todo #{todo_id}?", abort=True)

    try:
        _storage(ctx).delete(todo_id)
    except HubError as e:
        raise click.ClickException(str(e))

    _console(ctx).print(f"Deleted #{todo_id}")


@cli.command()
@click.pass_context
def stats(ctx):
    """Show pending, overdue and completed-today counts."""
    console = _console(ctx)
    summary = todo_stats(_storage(ctx).load_todos())

    console.print(f"Pending: {summary.pending}")
    overdue_style = "error" if summary.overdue else "muted"
    console.print(f"Overdue: [{overdue_style}]{summary.overdue}[/{overdue_style}]")
    console.print(f"Completed today: [success]{summary.completed_today}[/success]")


@cli.command()
@click.argument("query")
@click.pass_context
def search(ctx, query):
    """Fuzzy-search todo titles."""
    console = _console(ctx)
    config = _config(ctx)

    results = fuzzy_search(_storage(ctx).load_todos(), query,
                           limit=config.search_limit, score_cutoff=config.search_cutoff)
    if not results:
        console.print("[muted]No results found.[/muted]")
        return

    for todo, score in results:
        console.print(f"[muted]{todo.id:>3}[/muted] {todo.title} [muted]({score})[/muted]")


@cli.group()
def ui():
    """Inspect or change saved view preferences."""


def _ui_store(ctx) -> UIStateStore:
    return UIStateStore(_config(ctx).get_ui_state_path())


@ui.command(name="show")
@click.pass_context
def ui_show(ctx):
    """Print saved preferences."""
    state = _ui_store(ctx).load()
    for key, value in state.persisted().items():
        click.echo(f"{key}: {value}")


@ui.command(name="set")
@click.argument("key", type=click.Choice(PERSISTED_FIELDS))
@click.argument("value")
@click.pass_context
def ui_set(ctx, key, value):
    """Change one saved preference."""
    store = _ui_store(ctx)
    state = store.load()

    try:
        if key == "theme":
            state.set_theme(value)
        elif key == "project_view":
            state.set_project_view(value)
        else:
            state.set_sidebar_collapsed(click.BOOL.convert(value, None, ctx))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="VALUE")

    store.save(state)
    click.echo(f"{key}: {getattr(state, key)}")


def main():
    """Entry point for the ``hub`` command."""
    cli(obj={})


if __name__ == "__main__":
    main()
