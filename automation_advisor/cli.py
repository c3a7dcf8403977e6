# automation_advisor/cli.py
"""
CLI interface for automation-advisor.

Thin presentation layer over the tools/ service layer.
All commands delegate to the same functions that MCP wraps.
"""

import asyncio
from datetime import datetime
from pathlib import Path

import click
import typer
from fastmcp.exceptions import ToolError

app = typer.Typer(
    name="automation-advisor",
    help="AI business automation plans: describe your business, get a five-part plan.",
    no_args_is_help=True,
)

_EXIT_WORDS = {"exit", "quit", "salir", ":q"}


def _run(coro):
    """Run async function from sync CLI context."""
    return asyncio.run(coro)


def _get_runtime():
    """Load config, set up CLI logging and open the plan library."""
    from automation_advisor.config.loader import load_config
    from automation_advisor.logging_config import configure_cli_logging
    from automation_advisor.runtime import AdvisorRuntime

    config = load_config()
    configure_cli_logging(config.output.verbosity)
    return AdvisorRuntime(config)


def _fail(message: str, code: int = 1) -> None:
    typer.echo(typer.style(f"Error: {message}", fg=typer.colors.RED), err=True)
    raise typer.Exit(code)


def _fmt_date(created_at_ms: int) -> str:
    return datetime.fromtimestamp(created_at_ms / 1000).strftime("%Y-%m-%d %H:%M")


@app.command()
def generate(
    description: str = typer.Argument(..., help="Describe your business: what you do, who for, how"),
):
    """Generate and save an automation plan, then print it."""
    from rich.console import Console
    from rich.status import Status

    from automation_advisor.planning.export import PlanRenderer
    from automation_advisor.tools.generate_plan import generate_plan

    runtime = _get_runtime()
    console = Console(stderr=True)

    async def _generate():
        with Status("[dim]Generando plan de automatización...[/dim]", console=console, spinner="dots"):
            return await generate_plan(description, workflow=runtime.workflow)

    try:
        result = _run(_generate())
    except ToolError as e:
        _fail(str(e))
    except (ImportError, ValueError) as e:
        # Provider not installed or not configured
        _fail(str(e))

    plan = runtime.store.get(result["plan_id"])
    console.print(f"[green]✓ Plan saved[/green]  id: {result['plan_id']}  sources: {len(result['sources'])}")
    if not result["structured"]:
        console.print("[yellow]The response did not follow the five-section format; kept as one section.[/yellow]")
    console.print()
    typer.echo(PlanRenderer().render(plan))


@app.command("list")
def list_cmd():
    """List saved plans, newest first."""
    from automation_advisor.tools.list_plans import list_plans

    runtime = _get_runtime()
    result = _run(list_plans(store=runtime.store))
    plans = result["plans"]

    if not plans:
        typer.echo("No hay planes guardados. Genera uno nuevo para empezar.")
        return

    typer.echo(f"{'ID':<10} {'CREATED':<17} {'SOURCES':<8} DESCRIPTION")
    typer.echo("-" * 80)

    for p in plans:
        plan = runtime.store.get(p["plan_id"])
        typer.echo(
            typer.style(f"{p['plan_id'][:8]:<10} ", fg=typer.colors.CYAN)
            + f"{_fmt_date(plan.created_at):<17} {p['source_count']:<8} {p['description']}"
        )


@app.command()
def show(
    plan_id: str = typer.Argument(..., help="Plan ID or unique prefix"),
    section: str = typer.Option(None, "--section", "-s", help="Only print this section (analysis/flows/stack/implementation/roi)"),
):
    """Print a saved plan."""
    from automation_advisor.planning.export import PlanRenderer
    from automation_advisor.tools.get_plan import get_plan

    runtime = _get_runtime()
    try:
        result = _run(get_plan(plan_id, store=runtime.store, workspace=runtime.workspace))
    except ToolError as e:
        _fail(str(e))

    if section:
        matches = [s for s in result["sections"] if s["key"] == section]
        if not matches:
            _fail(f"Unknown section '{section}'")
        typer.echo(f"## {matches[0]['title']}\n\n{matches[0]['content']}")
        return

    typer.echo(PlanRenderer().render(runtime.workspace.draft))


@app.command()
def edit(
    plan_id: str = typer.Argument(..., help="Plan ID or unique prefix"),
    section: str = typer.Argument(..., help="Section to edit (analysis/flows/stack/implementation/roi)"),
    content: str = typer.Option(None, "--content", "-c", help="New section content"),
    file: Path = typer.Option(None, "--file", "-f", help="Read new section content from a file"),
):
    """Edit one section of a saved plan (opens $EDITOR without --content/--file)."""
    from automation_advisor.tools.edit_plan import edit_plan_section
    from automation_advisor.tools.get_plan import resolve_plan

    runtime = _get_runtime()

    if content is None and file is not None:
        try:
            content = file.read_text(encoding="utf-8")
        except OSError as e:
            _fail(f"Could not read {file}: {e}")

    if content is None:
        try:
            plan = resolve_plan(plan_id, runtime.store)
            current = plan.section(section).content
        except ToolError as e:
            _fail(str(e))
        except KeyError as e:
            _fail(str(e.args[0]))
        content = click.edit(current, extension=".md")
        if content is None or content == current:
            typer.echo("No changes.")
            return

    try:
        result = _run(
            edit_plan_section(
                plan_id, section, content, store=runtime.store, workspace=runtime.workspace
            )
        )
    except ToolError as e:
        _fail(str(e))

    typer.echo(f"Saved section '{section}' of plan {result['plan_id'][:8]}.")


@app.command()
def delete(
    plan_id: str = typer.Argument(..., help="Plan ID or unique prefix"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
):
    """Delete a saved plan."""
    from automation_advisor.tools.delete_plan import delete_plan

    runtime = _get_runtime()
    if not yes:
        typer.confirm(f"Eliminar plan {plan_id}?", abort=True)

    try:
        result = _run(delete_plan(plan_id, store=runtime.store, workspace=runtime.workspace))
    except ToolError as e:
        _fail(str(e))

    typer.echo(result["message"])


@app.command()
def export(
    plan_id: str = typer.Argument(..., help="Plan ID or unique prefix"),
    output_dir: str = typer.Option(None, "--output-dir", "-o", help="Directory to write into (default: output.export_dir)"),
    stdout: bool = typer.Option(False, "--stdout", help="Print the export instead of writing a file"),
):
    """Export a plan as a plain-text file."""
    from automation_advisor.tools.export_plan import export_plan

    runtime = _get_runtime()
    target_dir = None if stdout else (output_dir or runtime.config.output.export_dir)

    try:
        result = _run(
            export_plan(plan_id, store=runtime.store, workspace=runtime.workspace, output_dir=target_dir)
        )
    except ToolError as e:
        _fail(str(e))

    if stdout:
        typer.echo(result["content"], nl=False)
    else:
        typer.echo(f"Saved: {result['file_path']}")


@app.command()
def chat():
    """Chat with the automation assistant. Type 'salir' to leave."""
    from rich.console import Console
    from rich.status import Status

    runtime = _get_runtime()
    console = Console(stderr=True)
    try:
        session = runtime.chat
    except (ImportError, ValueError) as e:
        _fail(str(e))

    typer.echo(typer.style(session.transcript[0].content, fg=typer.colors.CYAN))

    async def _chat_loop():
        # Single event loop: the provider HTTP client is bound to it
        while True:
            try:
                text = typer.prompt("Tú", prompt_suffix="> ")
            except typer.Abort:
                break
            if text.strip().lower() in _EXIT_WORDS:
                break
            with Status("[dim]...[/dim]", console=console, spinner="dots"):
                reply = await session.send(text)
            if reply is None:
                continue
            color = typer.colors.RED if session.last_failed else typer.colors.CYAN
            typer.echo(typer.style(reply, fg=color))

    try:
        _run(_chat_loop())
    finally:
        runtime.shutdown()


@app.command()
def serve():
    """Start the MCP server (stdio transport)."""
    from automation_advisor.__main__ import main

    asyncio.run(main())


if __name__ == "__main__":
    app()
