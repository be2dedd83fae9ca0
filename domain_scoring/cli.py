"""CLI interface for the domain scoring engine."""

import logging
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from domain_scoring.config import Settings, load_settings
from domain_scoring.report import DomainReport, analyze_domain
from domain_scoring.scoring import split_into_words
from domain_scoring.scoring.segmentation import meaningful_words
from domain_scoring.similarity import get_categories, semantic_similarity
from domain_scoring.trademark import create_checker_from_settings
from domain_scoring.trends import TrendCache, TrendEnrichment, create_source_from_settings, fetch_trend_enrichment
from domain_scoring.valuation import anchor_with_comps, load_comparable_sales, quick_valuation

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

console = Console()

RISK_COLORS = {"none": "green", "low": "yellow", "medium": "dark_orange", "high": "red"}


def _score_color(score: int, settings: Settings) -> str:
    if score >= settings.scoring.excellent_score:
        return "green"
    if score >= settings.scoring.good_score:
        return "yellow"
    return "red"


def _load_enrichment(ctx: click.Context) -> TrendEnrichment | None:
    """Trend snapshot from the configured source, if any."""
    settings: Settings = ctx.obj["settings"]
    source = create_source_from_settings(settings.trends)
    if source is None:
        return None
    return fetch_trend_enrichment(source, ctx.obj["trend_cache"])


def _print_report(report: DomainReport, settings: Settings) -> None:
    brand = report.brandability
    color = _score_color(brand.overall, settings)

    table = Table(title=f"{report.domain}  [{color}]{brand.overall}/100 ({brand.grade})[/{color}]")
    table.add_column("Dimension", style="bold cyan")
    table.add_column("Score", justify="right")
    table.add_column("Weight", justify="right")
    table.add_column("Detail")
    for dim in brand.dimensions:
        table.add_row(dim.name, str(dim.score), f"{dim.weight:.0%}", dim.detail)
    console.print(table)

    demand = report.demand
    demand_table = Table(title=f"Keyword demand: {demand.score}/100 {demand.label} ({demand.grade})")
    demand_table.add_column("Factor", style="bold cyan")
    demand_table.add_column("Points", justify="right")
    demand_table.add_column("Detail")
    for factor in demand.factors:
        points_color = "green" if factor.points > 0 else ("red" if factor.points < 0 else "dim")
        demand_table.add_row(factor.label, f"[{points_color}]{factor.points:+d}[/{points_color}]", factor.detail)
    console.print(demand_table)

    risk_color = RISK_COLORS[report.trademark.risk_level]
    lines = [
        f"Pronounceability: {report.pronounceability.score}/100 ({report.pronounceability.grade}), "
        f"{report.pronounceability.word_count} word(s)",
        f"Niche: {demand.niche.label} ({demand.niche.confidence} confidence)",
        f"Trend: {report.trend.label} ({report.trend.score}/100)",
        f"Trademark: [{risk_color}]{report.trademark.risk_level}[/{risk_color}], {report.trademark.summary}",
        f"Estimated value: [bold]{report.valuation.band}[/bold] (score {report.valuation.score})",
        f"[dim]{brand.summary}[/dim]",
    ]
    if demand.enriched:
        lines.insert(2, "[magenta]Demand adjusted with AI trend data[/magenta]")
    console.print(Panel("\n".join(lines), title="Summary"))


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help="Path to configuration file (default: config.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """Score and value domain names.

    Rates brandability, pronounceability, keyword demand and trademark
    risk, and estimates a dollar value band for each domain.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    settings = load_settings(config)
    ctx.obj["settings"] = settings
    ctx.obj["trend_cache"] = TrendCache(ttl_seconds=settings.trends.ttl_seconds)


@cli.command("score")
@click.argument("domains", nargs=-1, required=True)
@click.pass_context
def score(ctx: click.Context, domains: tuple[str, ...]) -> None:
    """Show the full analysis for one or more domains."""
    settings: Settings = ctx.obj["settings"]
    enrichment = _load_enrichment(ctx)
    checker = create_checker_from_settings(settings.trademark.extra_brands)

    for domain in domains:
        _print_report(analyze_domain(domain, enrichment, checker), settings)


@cli.command("bulk")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--limit", "-l", type=int, default=None, help="Maximum number of domains to analyze")
@click.option("--output", "-o", type=click.Path(), default=None, help="File for tab-separated export")
@click.pass_context
def bulk(ctx: click.Context, input_file: str, limit: int | None, output: str | None) -> None:
    """Analyze a list of domains, one per line, ranked by brandability."""
    settings: Settings = ctx.obj["settings"]
    limit = limit or settings.scoring.bulk_limit

    with open(input_file, encoding="utf-8") as f:
        domains = [line.strip() for line in f if line.strip() and not line.startswith("#")]

    if not domains:
        console.print("[yellow]No domains found in input file.[/yellow]")
        return

    if len(domains) > limit:
        console.print(f"[dim]Analyzing the first {limit} of {len(domains)} domains[/dim]")
        domains = domains[:limit]

    enrichment = _load_enrichment(ctx)
    checker = create_checker_from_settings(settings.trademark.extra_brands)
    reports = [analyze_domain(d, enrichment, checker) for d in domains]
    reports.sort(key=lambda r: r.brandability.overall, reverse=True)

    table = Table(title=f"{len(reports)} domains")
    table.add_column("Domain", style="bold cyan")
    table.add_column("Brand", justify="right")
    table.add_column("Pron.", justify="right")
    table.add_column("Demand", justify="right")
    table.add_column("TM Risk")
    table.add_column("Value", justify="right")

    for r in reports:
        color = _score_color(r.brandability.overall, settings)
        risk_color = RISK_COLORS[r.trademark.risk_level]
        table.add_row(
            r.domain,
            f"[{color}]{r.brandability.overall}[/{color}]",
            str(r.pronounceability.score),
            str(r.demand.score),
            f"[{risk_color}]{r.trademark.risk_level}[/{risk_color}]",
            r.valuation.band,
        )

    console.print(table)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write("domain\tbrandability\tpronounceability\tdemand\ttrademark_risk\tvalue_min\tvalue_max\n")
            for r in reports:
                f.write(
                    f"{r.domain}\t{r.brandability.overall}\t{r.pronounceability.score}\t{r.demand.score}\t"
                    f"{r.trademark.risk_level}\t{r.valuation.value_min}\t{r.valuation.value_max}\n"
                )
        console.print(f"[green]Export saved to: {output}[/green]")


@cli.command("value")
@click.argument("domain")
@click.option(
    "--comps",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML/JSON file of comparable sales (overrides config)",
)
@click.pass_context
def value(ctx: click.Context, domain: str, comps: str | None) -> None:
    """Estimate a value band, optionally anchored to comparable sales."""
    settings: Settings = ctx.obj["settings"]
    checker = create_checker_from_settings(settings.trademark.extra_brands)
    base = quick_valuation(domain, checker=checker)

    console.print(f"[bold]{domain}[/bold]: {base.band} [dim](score {base.score})[/dim]")

    comps_path = comps or settings.valuation.comps_path
    if not comps_path:
        return

    try:
        sales = load_comparable_sales(comps_path)
    except (OSError, ValueError, KeyError) as e:
        console.print(f"[red]Could not load comparable sales: {e}[/red]")
        return

    anchored = anchor_with_comps(domain, base, sales)
    if not anchored.comp_anchored:
        console.print("[yellow]Not enough relevant comparable sales to anchor the estimate.[/yellow]")
        return

    console.print(
        f"Comp-anchored: [bold]{anchored.band}[/bold] "
        f"[dim]({anchored.comp_count} comps, median ${anchored.comp_median:,}, "
        f"adjustment {anchored.anchor_adjustment}x)[/dim]"
    )


@cli.command("compare")
@click.argument("domain_a")
@click.argument("domain_b")
def compare(domain_a: str, domain_b: str) -> None:
    """Show how semantically close two domains are."""
    words_a = meaningful_words(split_into_words(domain_a.split(".")[0]))
    words_b = meaningful_words(split_into_words(domain_b.split(".")[0]))

    table = Table()
    table.add_column("Domain", style="cyan")
    table.add_column("Keywords")
    table.add_column("Categories")
    for domain, words in ((domain_a, words_a), (domain_b, words_b)):
        categories = sorted(set().union(*(get_categories(w) for w in words))) if words else []
        table.add_row(domain, ", ".join(words) or "-", ", ".join(categories) or "-")
    console.print(table)

    similarity = semantic_similarity(words_a, words_b)
    console.print(f"\nSemantic similarity: [bold]{similarity:.2f}[/bold]")


@cli.command("trends")
@click.pass_context
def trends(ctx: click.Context) -> None:
    """Show the current trend snapshot."""
    settings: Settings = ctx.obj["settings"]
    if create_source_from_settings(settings.trends) is None:
        console.print("[yellow]No trend source configured.[/yellow]")
        console.print("[dim]Tip: set trends.source in config.yaml to 'supabase' or 'file'.[/dim]")
        return

    enrichment = _load_enrichment(ctx)
    if enrichment is None:
        console.print("[red]Trend data unavailable.[/red]")
        return

    status = "[red]stale[/red]" if enrichment.stale else "[green]fresh[/green]"
    console.print(f"[bold]Trend snapshot[/bold] generated {enrichment.generated_at} ({status})\n")

    keyword_table = Table(title="Trending keywords")
    keyword_table.add_column("Keyword", style="cyan")
    keyword_table.add_column("Heat", justify="right")
    for word, heat in sorted(enrichment.keywords.items(), key=lambda kv: kv[1], reverse=True)[:25]:
        keyword_table.add_row(word, f"{heat:.1f}x")
    console.print(keyword_table)

    if enrichment.hot_niches:
        niche_table = Table(title="Hot niches")
        niche_table.add_column("Niche", style="cyan")
        niche_table.add_column("Heat", justify="right")
        niche_table.add_column("Emerging keywords")
        for niche in enrichment.hot_niches:
            niche_table.add_row(niche.label, f"{niche.heat:g}", ", ".join(niche.emerging_keywords) or "-")
        console.print(niche_table)

    for signal in enrichment.market_signals:
        console.print(f"[dim]- {signal}[/dim]")


def main() -> None:
    """Entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
