from __future__ import annotations

from typing import Iterable, List, Optional

from rich.console import Console, RenderableType
from rich.markdown import Markdown
from rich.rule import Rule
from rich.text import Text
from rich.theme import Theme

from quick_news.newsapi.models import Article

TITLE = "QuickNews"
QUOTE_MARK = "▐"

NEWS_THEME = Theme(
    {
        "markdown.strong": "bold yellow",
        "markdown.em": "italic rgb(0,100,255) on rgb(28,28,28)",
        "markdown.code": "rgb(255,255,0)",
        "markdown.hr": "yellow",
        "news.quote_mark": "yellow",
    }
)


def make_console(**kwargs) -> Console:
    return Console(theme=NEWS_THEME, **kwargs)


def quote_line(url: str) -> Text:
    # only the mark is yellow; the url keeps the italic style
    return Text.assemble((f"{QUOTE_MARK} ", "news.quote_mark"), (url, "markdown.em"))


def article_renderables(article: Article) -> List[RenderableType]:
    """Heading line, quoted url, separator."""
    return [
        Markdown(f"`# {article.title}`"),
        quote_line(article.url),
        Rule(style="markdown.hr"),
    ]


def render_articles(articles: Iterable[Article], console: Optional[Console] = None) -> None:
    console = console or make_console()
    console.print(Markdown(f"# {TITLE}"))
    for a in articles:
        for part in article_renderables(a):
            console.print(part)
