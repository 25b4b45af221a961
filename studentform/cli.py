"""CLI for the studentform student information form."""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from studentform import __version__
from studentform.catalog import SUBJECT_CATALOG
from studentform.config import (
    ConfigError,
    StudentFormConfig,
    load_config,
    write_default_config,
)
from studentform.controller import FormController, submit
from studentform.io import DraftSchemaError, load_draft_schema, read_drafts, write_results
from studentform.log import setup_logging
from studentform.models import FieldKey, FormState
from studentform.view import FormView, build_view

app = typer.Typer(
    name="studentform",
    help="Student information form: fill, validate and review submissions.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"studentform version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Override the configured log level"),
    ] = None,
) -> None:
    """studentform: Student information form."""
    try:
        config = load_config()
        if log_level is not None:
            config = StudentFormConfig(log_level=log_level)
    except (ConfigError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    setup_logging(config.log_level)


def render_form(view: FormView) -> None:
    """Print banners, inline errors and the submitted summary."""
    if view.banner:
        style = "red" if view.banner_is_error else "green"
        console.print(f"[{style}]{escape(view.banner)}[/{style}]")

    for field in view.fields:
        if field.invalid:
            console.print(f"  [red]{field.label}:[/red] {escape(field.error)}")
    if view.subjects_error:
        console.print(f"  [red]Subjects:[/red] {escape(view.subjects_error)}")

    if view.summary:
        table = Table(title="Submitted Data", show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        for label, text in view.summary:
            table.add_row(label, escape(text))
        console.print(table)


def parse_subject_choices(text: str) -> tuple[list[str], list[str]]:
    """Split a comma-separated answer into catalog subjects and unknown entries.

    Entries match catalog labels case-insensitively or by 1-based number.
    """
    by_name = {label.lower(): label for label in SUBJECT_CATALOG}
    chosen: list[str] = []
    unknown: list[str] = []

    for entry in text.split(","):
        entry = entry.strip()
        if not entry:
            continue
        if entry.isascii() and entry.isdigit() and 1 <= int(entry) <= len(SUBJECT_CATALOG):
            chosen.append(SUBJECT_CATALOG[int(entry) - 1])
        elif entry.lower() in by_name:
            chosen.append(by_name[entry.lower()])
        else:
            unknown.append(entry)

    return chosen, unknown


def _prompt_text(controller: FormController, key: FieldKey) -> None:
    field = build_view(controller.state).field(key)
    current = field.value
    value = typer.prompt(
        f"{field.label} ({field.placeholder})",
        default=current,
        show_default=bool(current),
    )
    controller.update_field(key, value)


def _prompt_subjects(controller: FormController) -> None:
    options = ", ".join(f"{i}. {label}" for i, label in enumerate(SUBJECT_CATALOG, 1))
    console.print(f"Subjects offered: {options}")
    current = ", ".join(controller.draft.subjects)
    answer = typer.prompt(
        "Subjects (comma-separated names or numbers)",
        default=current,
        show_default=bool(current),
    )
    chosen, unknown = parse_subject_choices(answer)
    for entry in unknown:
        console.print(f"[yellow]Warning:[/yellow] Not an offered subject: {escape(entry)}")
    for label in SUBJECT_CATALOG:
        controller.toggle_subject(label, label in chosen)


@app.command()
def fill() -> None:
    """Fill in the form interactively.

    Invalid fields are asked for again until the form submits.
    """
    controller = FormController()
    console.print(f"[bold]{build_view(controller.state).title}[/bold]")

    text_fields = (FieldKey.NAME, FieldKey.CLASS_NAME, FieldKey.PERCENTAGE)
    pending: set[str] = {key.value for key in FieldKey}

    while True:
        for key in text_fields:
            if key.value in pending:
                _prompt_text(controller, key)
        if FieldKey.SUBJECTS.value in pending:
            _prompt_subjects(controller)

        result = controller.submit()
        render_form(build_view(controller.state))

        if result.ok:
            if not typer.confirm("Fill another form?", default=False):
                break
            pending = {key.value for key in FieldKey}
        else:
            pending = set(result.errors)


@app.command(name="submit")
def submit_command(
    name: Annotated[str, typer.Option("--name", "-n", help="Student name")] = "",
    class_name: Annotated[str, typer.Option("--class", "-c", help="Class")] = "",
    percentage: Annotated[
        str,
        typer.Option("--percentage", "-p", help="Percentage (0-100)"),
    ] = "",
    subjects: Annotated[
        list[str] | None,
        typer.Option("--subject", "-s", help="Subject offered (repeatable)"),
    ] = None,
) -> None:
    """Submit one form from command-line values."""
    controller = FormController()
    controller.update_field(FieldKey.NAME, name)
    controller.update_field(FieldKey.CLASS_NAME, class_name)
    controller.update_field(FieldKey.PERCENTAGE, percentage)

    chosen, unknown = parse_subject_choices(",".join(subjects or []))
    for entry in unknown:
        console.print(f"[yellow]Warning:[/yellow] Not an offered subject: {escape(entry)}")
    for label in chosen:
        controller.toggle_subject(label, True)

    result = controller.submit()
    render_form(build_view(controller.state))
    if not result.ok:
        raise typer.Exit(1)


@app.command()
def check(
    input_path: Annotated[
        Path,
        typer.Option("--in", "-i", help="Input JSONL file of drafts"),
    ],
    output_path: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Output JSONL file of submit outcomes"),
    ] = None,
) -> None:
    """Validate a JSONL file of drafts and report each outcome."""
    if not input_path.exists():
        console.print(f"[red]Error:[/red] Input file not found: {input_path}")
        raise typer.Exit(1)

    results = []
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Checking drafts...", total=None)
        try:
            for count, draft in enumerate(read_drafts(input_path), 1):
                _, result = submit(FormState(draft=draft))
                results.append(result)
                progress.update(task, description=f"Checked {count} drafts...")
        except (DraftSchemaError, ValueError) as e:
            console.print(f"\n[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)

    valid_count = sum(1 for r in results if r.ok)
    invalid_count = len(results) - valid_count

    if output_path is not None:
        written = write_results(output_path, results)
        console.print(f"  Outcomes written: {written} -> {output_path}")

    console.print("\n[bold]Summary:[/bold]")
    console.print(f"  Drafts checked: {len(results)}")
    console.print(f"  [green]Valid:[/green] {valid_count}")
    if invalid_count:
        console.print(f"  [red]Invalid:[/red] {invalid_count}")


@app.command()
def subjects() -> None:
    """List the subjects offered on the form."""
    for i, label in enumerate(SUBJECT_CATALOG, 1):
        console.print(f"{i}. {label}")


@app.command()
def schema() -> None:
    """Print the JSON schema for draft records."""
    console.print_json(json.dumps(load_draft_schema()))


@app.command()
def init(
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite an existing config file",
    ),
) -> None:
    """Write a default config file to the studentform home."""
    try:
        path = write_default_config(force=force)
    except ConfigError as e:
        console.print(f"[yellow]Warning:[/yellow] {escape(str(e))}")
        console.print("Use --force to overwrite")
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] Created config at {path}")


if __name__ == "__main__":
    app()
