from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

# ========== UI Theme ==========
custom_theme = Theme({
    "warn": "bold yellow",
    "err":  "bold red",
})
err_console = Console(theme=custom_theme, stderr=True)


def warn(msg: str):
    err_console.print(f"[warn]Warning:[/warn] {escape(msg)}")


def error_panel(title: str, msg: str):
    err_console.print(Panel.fit(Text(msg, no_wrap=False), title=f"[err]{escape(title)}[/err]", border_style="red"))
