from __future__ import annotations

import asyncio
import logging
from datetime import timedelta
from typing import List, Optional

import typer
import uvicorn
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from portfolio_pulse.api.deps import build_http_client, build_news_service, build_portfolio_news_service
from portfolio_pulse.config import AppConfig
from portfolio_pulse.core.errors import ValidationError
from portfolio_pulse.modules.news.cache import NewsCache
from portfolio_pulse.modules.portfolio.schemas import Portfolio
from portfolio_pulse.modules.portfolio.service import (
    PortfolioService,
    sector_allocation,
    top_performers,
)
from portfolio_pulse.modules.portfolio_news.schemas import PortfolioNewsView
from portfolio_pulse.reporting.formatters import (
    article_description,
    category_badge,
    format_article_date,
    format_article_datetime,
    format_change,
    format_inr,
    format_percent,
)
from portfolio_pulse.services.config_store import ConfigStore
from portfolio_pulse.settings import AppSettings

app = typer.Typer(help="Portfolio Pulse CLI")
console = Console()

SENTIMENT_STYLES = {"Positive": "green", "Negative": "red", "Neutral": "blue"}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = AppSettings()
    level = "DEBUG" if verbose else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _store() -> ConfigStore:
    settings = AppSettings()
    return ConfigStore(config_path=settings.config_file)


def _load_config() -> AppConfig:
    return _store().load()


def _news_cache(config: AppConfig) -> NewsCache:
    return NewsCache(ttl=timedelta(minutes=config.news.cache_ttl_minutes))


@app.command("init-config")
def init_config() -> None:
    store = _store()
    config = store.load()
    store.save(config)
    console.print(f"[green]Config initialized:[/green] {store.config_path.resolve()}")


@app.command("news")
def news(page: Optional[str] = typer.Option(None, help="Pagination cursor from a previous page.")) -> None:
    config = _load_config()
    settings = AppSettings()

    async def _run():
        async with build_http_client(config) as client:
            service = build_news_service(config, settings, client, _news_cache(config))
            return await service.fetch_news_envelope(page=page)

    response = asyncio.run(_run())
    if not response.ok:
        console.print("[red]Failed to load news. Please try again later.[/red]")
        raise typer.Exit(code=1)

    table = Table(title="Business News")
    table.add_column("Category")
    table.add_column("Source")
    table.add_column("Published")
    table.add_column("Title")
    for article in response.results:
        table.add_row(
            category_badge(article.category),
            article.source_name or "-",
            format_article_datetime(article.pub_date),
            f"[link={article.link}]{escape(article.title)}[/link]" if article.link else escape(article.title),
        )
    console.print(table)
    if response.next_page:
        console.print(f"Next page: [cyan]portfolio-pulse news --page {response.next_page}[/cyan]")


def _render_summary(portfolio: Portfolio) -> None:
    style = "green" if portfolio.total_gain >= 0 else "red"
    console.print(
        Panel(
            f"Total value: [bold]{format_inr(portfolio.total_value)}[/bold]\n"
            f"Total gain: [{style}]{format_inr(portfolio.total_gain)} "
            f"({format_change(portfolio.total_gain_percent)})[/{style}]",
            title="Portfolio Summary",
        )
    )


def _render_holdings(portfolio: Portfolio) -> None:
    table = Table(title="My Holdings")
    table.add_column("Stock")
    table.add_column("Quantity", justify="right")
    table.add_column("Avg. Cost", justify="right")
    table.add_column("Current Price", justify="right")
    table.add_column("Market Value", justify="right")
    table.add_column("Gain/Loss", justify="right")
    for stock in portfolio.stocks:
        style = "green" if stock.change >= 0 else "red"
        table.add_row(
            f"{stock.symbol}\n[dim]{stock.name}[/dim]",
            str(stock.quantity),
            format_inr(stock.avg_price),
            format_inr(stock.current_price),
            format_inr(stock.quantity * stock.current_price),
            f"[{style}]{format_inr(stock.gain)}\n{format_change(stock.change_percent)}[/{style}]",
        )
    console.print(table)


def _render_overview(portfolio: Portfolio) -> None:
    table = Table(title="Overview by Sector")
    table.add_column("Sector")
    table.add_column("Holdings")
    table.add_column("Value", justify="right")
    table.add_column("Weight", justify="right")
    for allocation in sector_allocation(portfolio):
        table.add_row(
            allocation.sector,
            ", ".join(allocation.symbols),
            format_inr(allocation.value),
            format_percent(allocation.weight_percent),
        )
    console.print(table)

    leaders = Table(title="Top Performers")
    leaders.add_column("Stock")
    leaders.add_column("Return", justify="right")
    leaders.add_column("Gain / Share", justify="right")
    for stock in top_performers(portfolio):
        style = "green" if stock.gain_percent >= 0 else "red"
        sign = "+" if stock.gain_percent >= 0 else ""
        leaders.add_row(
            f"{stock.symbol}\n[dim]{stock.name}[/dim]",
            f"[{style}]{sign}{stock.gain_percent:.2f}%[/{style}]",
            f"[{style}]{format_inr(stock.current_price - stock.avg_price)}[/{style}]",
        )
    console.print(leaders)


@app.command("portfolio")
def portfolio(
    holdings: bool = typer.Option(False, "--holdings", help="Show the holdings table instead of the overview."),
) -> None:
    config = _load_config()
    service = PortfolioService(config=config)
    data = asyncio.run(service.fetch_portfolio())
    _render_summary(data)
    if holdings:
        _render_holdings(data)
    else:
        _render_overview(data)


@app.command("search")
def search(query: str = typer.Argument(..., help="Symbol, company name or sector fragment.")) -> None:
    config = _load_config()
    service = PortfolioService(config=config)
    results = asyncio.run(service.search_stocks(query))
    if not results:
        console.print("[yellow]No matching stocks.[/yellow]")
        return
    table = Table(title=f"Search: {escape(query)}")
    table.add_column("Symbol")
    table.add_column("Name")
    table.add_column("Sector")
    for item in results:
        table.add_row(item.symbol, item.name, item.sector or "")
    console.print(table)


@app.command("add")
def add(
    symbol: str = typer.Argument(...),
    quantity: int = typer.Argument(...),
) -> None:
    config = _load_config()
    service = PortfolioService(config=config)
    try:
        result = asyncio.run(service.add_stock(symbol=symbol, quantity=quantity))
    except ValidationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)
    if not result.success:
        console.print(f"[red]{result.message}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]{result.message}[/green]")


@app.command("remove")
def remove(symbol: str = typer.Argument(...)) -> None:
    config = _load_config()
    service = PortfolioService(config=config)
    result = asyncio.run(service.remove_stock(symbol=symbol))
    if not result.success:
        console.print(f"[red]{result.message}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]{result.message}[/green]")


def _render_portfolio_news(view: PortfolioNewsView) -> None:
    if view.error:
        console.print(f"[red]{view.error}[/red]")
        return
    if not view.tabs:
        console.print("[yellow]No news found for your portfolio stocks.[/yellow]")
        return

    for tab in view.tabs:
        sentiment = tab.sentiment
        marker = " (active)" if tab.symbol == view.active_tab else ""
        if sentiment is None:
            title = f"{tab.symbol}{marker} [{tab.article_count}]"
            body = ""
        else:
            style = "yellow" if sentiment.error else SENTIMENT_STYLES[sentiment.sentiment]
            title = (
                f"{tab.symbol}{marker} [{tab.article_count}] "
                f"[{style}]{sentiment.sentiment} ({sentiment.confidence * 100:.0f}%)[/{style}]"
            )
            label = "Analysis Note" if sentiment.error else "AI Analysis"
            body = f"[bold]{label}:[/bold] {escape(sentiment.error or sentiment.summary or '')}\n"

        lines: List[str] = [body] if body else []
        for article in tab.articles:
            published = format_article_date(article.pub_date)
            lines.append(f"• [bold]{escape(article.title)}[/bold] [dim]{published}[/dim]")
            lines.append(f"  {escape(article_description(article))}")
        console.print(Panel("\n".join(lines), title=title))


@app.command("portfolio-news")
def portfolio_news(
    symbol: Optional[List[str]] = typer.Option(
        None, "--symbol", "-s", help="Symbols to load; defaults to a freshly generated portfolio."
    ),
) -> None:
    config = _load_config()
    settings = AppSettings()

    async def _run() -> PortfolioNewsView:
        if symbol:
            symbols = [item.strip().upper() for item in symbol if item.strip()]
        else:
            generated = await PortfolioService(config=config).fetch_portfolio()
            symbols = generated.symbols
        async with build_http_client(config) as client:
            service = build_portfolio_news_service(config, settings, client, _news_cache(config))
            return await service.load(symbols)

    view = asyncio.run(_run())
    _render_portfolio_news(view)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind host, default from settings."),
    port: Optional[int] = typer.Option(None, help="Bind port, default from settings."),
    reload: bool = typer.Option(False, help="Enable autoreload mode."),
) -> None:
    settings = AppSettings()
    uvicorn.run(
        "portfolio_pulse.api:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
