from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional

import click
from rich.console import Console
from rich.table import Table

from models.preset import Domain
from services.layout_planner import ALLOWED_BODY_COUNTS
from services.preset_catalog import PresetCatalog
from services.preset_selector import AUTO, PresetPlan, PresetSelector, build_selector
from utils.config import AppConfig, load_config
from utils.logger import configure_logging


LOGGER = logging.getLogger(__name__)
DOMAIN_CHOICE = click.Choice([domain.value for domain in Domain])
BODY_COUNT_CHOICE = click.Choice([AUTO] + [str(count) for count in ALLOWED_BODY_COUNTS])


@dataclass(slots=True)
class AppContext:
    config: AppConfig
    console: Console
    selectors: Dict[Domain, PresetSelector] = field(default_factory=dict)

    def domain(self, value: Optional[str]) -> Domain:
        return Domain(value) if value else self.config.default_domain

    def selector(self, domain: Domain) -> PresetSelector:
        if domain not in self.selectors:
            self.selectors[domain] = build_selector(domain, self.config.presets_dir, self.config.rules_dir)
        return self.selectors[domain]


def build_context(env_file: str) -> AppContext:
    config = load_config(env_file)
    configure_logging(config.log_dir, config.log_level)
    return AppContext(config=config, console=Console())


@click.group()
@click.option("--env-file", default=".env", show_default=True, help="Path to the .env file")
@click.pass_context
def cli(ctx: click.Context, env_file: str) -> None:
    """Pick illustration, infographic and social-card presets for a text."""

    try:
        ctx.obj = build_context(env_file)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command("classify")
@click.argument("text")
@click.option("--domain", type=DOMAIN_CHOICE, default=None, help="Preset family to choose from")
@click.pass_obj
def classify(app: AppContext, text: str, domain: Optional[str]) -> None:
    """Print the style that best fits TEXT."""

    selector = _selector_or_fail(app, app.domain(domain))
    style_id = selector.auto_style_id(text)
    preset = selector.styles.find(style_id)
    if preset is None:
        app.console.print(f"[yellow]{style_id}[/yellow] (not in the {selector.domain.value} catalog)")
        return
    app.console.print(f"[bold]{preset.id}[/bold] {preset.name}")


@cli.command("presets")
@click.option("--domain", type=DOMAIN_CHOICE, default=None, help="Preset family to list")
@click.option("--layouts", is_flag=True, help="List layouts instead of styles")
@click.pass_obj
def list_presets(app: AppContext, domain: Optional[str], layouts: bool) -> None:
    """List the presets of a domain."""

    selector = _selector_or_fail(app, app.domain(domain))
    catalog = selector.layouts if layouts else selector.styles
    if catalog is None:
        app.console.print(f"[yellow]The {selector.domain.value} domain has no layouts.[/yellow]")
        return
    default_id = selector.default_layout_id if layouts else selector.fallback_style_id
    app.console.print(_build_catalog_table(catalog, default_id))


@cli.command("show")
@click.argument("preset_id")
@click.option("--domain", type=DOMAIN_CHOICE, default=None, help="Preset family to look in")
@click.option("--layout", "is_layout", is_flag=True, help="Look up a layout instead of a style")
@click.pass_obj
def show_preset(app: AppContext, preset_id: str, domain: Optional[str], is_layout: bool) -> None:
    """Show the details of one preset."""

    selector = _selector_or_fail(app, app.domain(domain))
    catalog = selector.layouts if is_layout else selector.styles
    if catalog is None:
        raise click.BadParameter(f"The {selector.domain.value} domain has no layouts", param_hint="--layout")
    try:
        preset = catalog.get(preset_id)
    except KeyError as exc:
        raise click.BadParameter(exc.args[0], param_hint="PRESET_ID") from exc

    table = _build_detail_table(f"{preset.name} ({preset.id})", preset.summary())
    reference = getattr(preset, "reference", None)
    if reference is not None:
        table.add_row("Colors", ", ".join(reference.colors))
        table.add_row("Background", ", ".join(reference.background))
        table.add_row("Accents", ", ".join(reference.accents))
        table.add_row("Elements", ", ".join(reference.elements))
        table.add_row("Palette", f"{preset.palette.primary} / {preset.palette.background} / {preset.palette.accent}")
    app.console.print(table)


@cli.command("plan")
@click.argument("article", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--domain", type=DOMAIN_CHOICE, default=None, help="Preset family to plan for")
@click.option("--style", "style_choice", default=AUTO, show_default=True, help="Style id or 'auto'")
@click.option("--layout", "layout_choice", default=AUTO, show_default=True, help="Layout id or 'auto'")
@click.option("--body-count", type=BODY_COUNT_CHOICE, default=AUTO, show_default=True, help="Body images")
@click.pass_obj
def plan_article(
    app: AppContext,
    article: Path,
    domain: Optional[str],
    style_choice: str,
    layout_choice: str,
    body_count: str,
) -> None:
    """Resolve style, layout and image count for an ARTICLE text file."""

    text = article.read_text(encoding="utf-8")
    selector = _selector_or_fail(app, app.domain(domain))
    try:
        plan = selector.plan(text, style_choice, layout_choice, body_count)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--body-count") from exc
    app.console.print(_build_plan_table(article, plan))


@cli.command("check")
@click.pass_obj
def check_catalogs(app: AppContext) -> None:
    """Check every rule table against its preset catalogs."""

    failures = 0
    for domain in Domain:
        problems = _selector_or_fail(app, domain).validate()
        if problems:
            failures += len(problems)
            for problem in problems:
                app.console.print(f"[red]{domain.value}[/red]: {problem}")
        else:
            app.console.print(f"[green]{domain.value}[/green]: ok")
    if failures:
        raise click.ClickException(f"{failures} catalog problem(s) found")


def _selector_or_fail(app: AppContext, domain: Domain) -> PresetSelector:
    try:
        return app.selector(domain)
    except (FileNotFoundError, ValueError) as exc:
        LOGGER.error("Unable to load %s presets: %s", domain.value, exc)
        raise click.ClickException(str(exc)) from exc


def _build_catalog_table(catalog: PresetCatalog, default_id: Optional[str]) -> Table:
    table = Table(title=catalog.name.capitalize())
    table.add_column("ID", overflow="fold")
    table.add_column("Name")
    table.add_column("Description")
    for preset in catalog:
        marker = " *" if preset.id == default_id else ""
        table.add_row(f"{preset.id}{marker}", preset.name, preset.description)
    return table


def _build_detail_table(title: str, rows: Mapping[str, str]) -> Table:
    table = Table(title=title, show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    for name, value in rows.items():
        table.add_row(name, value or "-")
    return table


def _build_plan_table(article: Path, plan: PresetPlan) -> Table:
    table = Table(title=f"{plan.domain.value.capitalize()} plan for {article.name}")
    table.add_column("Item")
    table.add_column("Choice")
    table.add_row("Style", _format_choice(plan.style.id, plan.style.name, plan.style_auto))
    if plan.layout is not None:
        table.add_row("Layout", _format_choice(plan.layout.id, plan.layout.name, plan.layout_auto))
    table.add_row("Body images", str(plan.body_count))
    return table


def _format_choice(preset_id: str, name: str, auto: bool) -> str:
    source = "auto" if auto else "manual"
    return f"{preset_id} {name} [dim]({source})[/dim]"


def main() -> None:
    cli(standalone_mode=True)


if __name__ == "__main__":
    main()
