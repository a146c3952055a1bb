"""CLI entry point for TextScan."""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from textscan.analyzer import (
    AnalysisConfig,
    SortMode,
    TextAnalyzer,
    TextStats,
    WordCount,
    create_analyzer,
)
from textscan.config import settings
from textscan.exceptions import TextScanError
from textscan.logging import get_logger, setup_logging
from textscan.output import (
    ReportFormat,
    ReportKind,
    build_report,
    default_report_path,
    render_report,
    write_report,
)
from textscan.reader import read_file_to_text

app = typer.Typer(
    name="textscan",
    help="Text statistics and word frequency analyzer.",
    add_completion=False,
)

console = Console()
error_console = Console(stderr=True)

logger = get_logger("cli")

PathArgument = Annotated[
    Path,
    typer.Argument(..., help="Text file to analyze"),
]
SortOption = Annotated[
    SortMode | None,
    typer.Option("--sort", "-s", help="Sort mode", case_sensitive=False),
]
MinLengthOption = Annotated[
    int | None,
    typer.Option("--min-length", "-m", help="Minimum word length to include"),
]
NoStopWordsOption = Annotated[
    bool,
    typer.Option("--no-stop-words", help="Disable stop word filtering"),
]
ExcludeOption = Annotated[
    list[str] | None,
    typer.Option(
        "--exclude",
        "-e",
        help="Additional words to exclude (can be used multiple times)",
    ),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose debug output to stderr"),
    ] = False,
) -> None:
    """Text statistics and word frequency analyzer."""
    setup_logging(verbose=verbose)


def get_analyzer() -> TextAnalyzer:
    """Create an analyzer reading files with the configured encoding."""
    return create_analyzer(reader=partial(read_file_to_text, encoding=settings.encoding))


def build_config(
    sort_mode: SortMode | None = None,
    min_length: int | None = None,
    no_stop_words: bool = False,
    exclude: list[str] | None = None,
    top_n: int | None = None,
) -> AnalysisConfig:
    """Build session configuration from command options and settings."""
    if min_length is None:
        min_length = settings.default_min_word_length
    if top_n is None:
        top_n = settings.default_top_words
    config = AnalysisConfig(
        sort_mode=sort_mode or settings.default_sort_mode,
        min_word_length=max(1, min_length),
        top_n=max(1, top_n),
    )
    if no_stop_words:
        config.stop_words.clear()
    if exclude:
        config.stop_words.update(word.strip().lower() for word in exclude if word.strip())
    return config


def parse_positive_int(value: str, fallback: int) -> int:
    """Parse a positive integer, returning fallback for anything else."""
    try:
        parsed = int(value.strip())
    except ValueError:
        return fallback
    return parsed if parsed > 0 else fallback


def display_stats(stats: TextStats, source: Path | None = None) -> None:
    """Display basic statistics as a Rich table."""
    title = f"Statistics: {escape(str(source))}" if source else "Statistics"
    table = Table(title=title)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")

    table.add_row("Words", f"{stats.words:,}")
    table.add_row("Characters (with spaces)", f"{stats.chars_with_spaces:,}")
    table.add_row("Characters (without spaces)", f"{stats.chars_without_spaces:,}")
    table.add_row("Sentences", f"{stats.sentences:,}")

    console.print(table)


def display_word_counts(title: str, word_counts: tuple[WordCount, ...]) -> None:
    """Display word counts as a Rich table."""
    table = Table(title=title)
    table.add_column("Rank", justify="right", style="dim")
    table.add_column("Word", style="cyan")
    table.add_column("Count", justify="right", style="green")

    for i, item in enumerate(word_counts, 1):
        table.add_row(str(i), item.word, str(item.count))

    console.print(table)


def display_frequency_fragment(word_counts: tuple[WordCount, ...], limit: int) -> None:
    """Display the first entries of a full frequency listing."""
    shown = word_counts[:limit]
    console.print(f"[bold]Word frequency (first {len(shown)} entries)[/bold]")
    display_word_counts("", shown)
    if len(word_counts) > limit:
        console.print(f"[dim]... (total entries: {len(word_counts)})[/dim]")


@app.command()
def stats(path: PathArgument) -> None:
    """Show character, word and sentence counts of a text file."""
    try:
        result = get_analyzer().analyze_file(path)
    except TextScanError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    display_stats(result, path)


@app.command()
def top(
    path: PathArgument,
    top_words: Annotated[
        int | None,
        typer.Option("--top", "-t", help="Number of top words to show"),
    ] = None,
    sort_mode: SortOption = None,
    min_length: MinLengthOption = None,
    no_stop_words: NoStopWordsOption = False,
    exclude: ExcludeOption = None,
) -> None:
    """Show the most frequent words of a text file."""
    config = build_config(sort_mode, min_length, no_stop_words, exclude, top_words)
    try:
        result = get_analyzer().top_words_from_file(
            path,
            config.top_n,
            config.active_stop_words(),
            config.min_word_length,
            config.sort_mode,
        )
    except TextScanError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    display_word_counts(f"Top {config.top_n} words", result)


@app.command()
def frequency(
    path: PathArgument,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", help="Number of entries to display"),
    ] = None,
    sort_mode: SortOption = None,
    min_length: MinLengthOption = None,
    no_stop_words: NoStopWordsOption = False,
    exclude: ExcludeOption = None,
) -> None:
    """Show the word frequency listing of a text file."""
    config = build_config(sort_mode, min_length, no_stop_words, exclude)
    try:
        result = get_analyzer().all_words_sorted_from_file(
            path,
            config.active_stop_words(),
            config.min_word_length,
            config.sort_mode,
        )
    except TextScanError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    display_frequency_fragment(result, max(1, limit or settings.frequency_preview_limit))


def create_report(
    analyzer: TextAnalyzer,
    path: Path,
    config: AnalysisConfig,
    kind: ReportKind,
    output_format: ReportFormat,
    output_file: Path | None = None,
) -> Path:
    """Analyze a file, render a report of the given kind and write it.

    Returns:
        Path of the written report.

    Raises:
        FileReadError: If the input file cannot be read.
        ReportWriteError: If the report cannot be written.
    """
    text = analyzer.reader(path)
    text_stats = analyzer.analyze(text) if kind != ReportKind.WORD_FREQUENCY else None
    word_counts = None
    if kind != ReportKind.BASIC_STATS:
        word_counts = analyzer.all_words_sorted(
            text,
            config.active_stop_words(),
            config.min_word_length,
            config.sort_mode,
        )

    report = build_report(stats=text_stats, frequency=word_counts, source=path.name)
    content = render_report(report, output_format)
    destination = output_file or default_report_path(
        path, kind, output_format, settings.output_dir
    )
    return write_report(content, destination)


@app.command()
def report(
    path: PathArgument,
    output_format: Annotated[
        ReportFormat,
        typer.Option("--format", "-f", help="Output format", case_sensitive=False),
    ] = ReportFormat.TXT,
    kind: Annotated[
        ReportKind,
        typer.Option("--kind", "-k", help="Report contents", case_sensitive=False),
    ] = ReportKind.FULL_STATS,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: under output dir)"),
    ] = None,
    sort_mode: SortOption = None,
    min_length: MinLengthOption = None,
    no_stop_words: NoStopWordsOption = False,
    exclude: ExcludeOption = None,
) -> None:
    """Write a statistics report of a text file."""
    config = build_config(sort_mode, min_length, no_stop_words, exclude)
    try:
        written = create_report(get_analyzer(), path, config, kind, output_format, output_file)
    except TextScanError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    console.print(f"Report written to [bold]{escape(str(written))}[/bold]")


class InteractiveSession:
    """Menu-driven session over a single text file.

    Holds the mutable AnalysisConfig and passes it into every analyzer call.
    Errors are reported and the loop continues.
    """

    MENU = (
        ("1", "Basic statistics (words, characters, sentences)"),
        ("2", "Top N words"),
        ("3", "Word frequency listing (fragment)"),
        ("4", "Change minimum word length"),
        ("5", "Toggle stop words"),
        ("6", "Change sort mode"),
        ("7", "Save report"),
        ("0", "Exit"),
    )

    def __init__(self, analyzer: TextAnalyzer, path: Path, config: AnalysisConfig) -> None:
        self.analyzer = analyzer
        self.path = path
        self.config = config

    def run(self) -> None:
        """Run the menu loop until the user exits or input ends."""
        actions = {
            "1": self.show_basic_stats,
            "2": self.show_top_words,
            "3": self.show_frequency_fragment,
            "4": self.change_min_word_length,
            "5": self.toggle_stop_words,
            "6": self.change_sort_mode,
            "7": self.save_report,
        }
        while True:
            self.print_menu()
            try:
                choice = console.input("Choice: ").strip()
            except EOFError:
                break
            if choice == "0":
                break
            action = actions.get(choice)
            if action is None:
                console.print("[yellow]Unknown option, try again.[/yellow]")
                continue
            try:
                action()
            except EOFError:
                break
            except TextScanError as e:
                error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        console.print("Goodbye!")

    def print_menu(self) -> None:
        console.print()
        console.print(
            f"[bold]=== MENU ===[/bold] [dim]{escape(str(self.path))} | min length "
            f"{self.config.min_word_length} | stop words "
            f"{'on' if self.config.stop_words_enabled else 'off'} | sort "
            f"{self.config.sort_mode}[/dim]"
        )
        for key, label in self.MENU:
            console.print(f"{key}) {label}")

    def show_basic_stats(self) -> None:
        display_stats(self.analyzer.analyze_file(self.path), self.path)

    def show_top_words(self) -> None:
        self.config.top_n = parse_positive_int(
            console.input(f"How many top words (current {self.config.top_n}): "),
            self.config.top_n,
        )
        result = self.analyzer.top_words_from_file(
            self.path,
            self.config.top_n,
            self.config.active_stop_words(),
            self.config.min_word_length,
            self.config.sort_mode,
        )
        display_word_counts(f"Top {self.config.top_n} words", result)

    def show_frequency_fragment(self) -> None:
        result = self.analyzer.all_words_sorted_from_file(
            self.path,
            self.config.active_stop_words(),
            self.config.min_word_length,
            self.config.sort_mode,
        )
        display_frequency_fragment(result, settings.frequency_preview_limit)

    def change_min_word_length(self) -> None:
        self.config.min_word_length = parse_positive_int(
            console.input(f"New minimum word length (current {self.config.min_word_length}): "),
            self.config.min_word_length,
        )
        console.print(f"Minimum word length set to {self.config.min_word_length}")

    def toggle_stop_words(self) -> None:
        enabled = self.config.toggle_stop_words()
        console.print(f"Stop words: {'ON' if enabled else 'OFF'}")

    def change_sort_mode(self) -> None:
        modes = list(SortMode)
        for i, mode in enumerate(modes, 1):
            console.print(f"{i}) {mode}")
        current = modes.index(self.config.sort_mode) + 1
        choice = parse_positive_int(console.input(f"Sort mode (current {current}): "), current)
        if choice <= len(modes):
            self.config.sort_mode = modes[choice - 1]
        console.print(f"Sort mode set to {self.config.sort_mode}")

    def save_report(self) -> None:
        kinds = list(ReportKind)
        formats = list(ReportFormat)
        for i, kind in enumerate(kinds, 1):
            console.print(f"{i}) {kind}")
        kind_choice = parse_positive_int(console.input("Report kind (default 2): "), 2)
        for i, fmt in enumerate(formats, 1):
            console.print(f"{i}) {fmt}")
        format_choice = parse_positive_int(console.input("Format (default 2): "), 2)

        kind = kinds[kind_choice - 1] if kind_choice <= len(kinds) else ReportKind.FULL_STATS
        fmt = formats[format_choice - 1] if format_choice <= len(formats) else ReportFormat.TXT
        written = create_report(self.analyzer, self.path, self.config, kind, fmt)
        console.print(f"Report written to [bold]{escape(str(written))}[/bold]")


@app.command()
def interactive(
    base_name: Annotated[
        str | None,
        typer.Argument(help="File base name (the default extension is appended if missing)"),
    ] = None,
) -> None:
    """Start the interactive menu for a text file."""
    if base_name is None:
        try:
            base_name = console.input("File base name (without extension): ")
        except EOFError:
            raise typer.Exit(1) from None
    if not base_name.strip():
        error_console.print("[red]Error:[/red] File name cannot be empty")
        raise typer.Exit(1)

    path = settings.resolve_input_path(base_name)
    logger.debug("Starting interactive session for %s", path)
    InteractiveSession(get_analyzer(), path, build_config()).run()


@app.command()
def config() -> None:
    """Show current configuration."""
    table = Table(title="TextScan Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("TEXTSCAN_ENCODING", settings.encoding)
    table.add_row("TEXTSCAN_OUTPUT_DIR", str(settings.output_dir))
    table.add_row("TEXTSCAN_DEFAULT_EXTENSION", settings.default_extension)
    table.add_row("TEXTSCAN_DEFAULT_TOP_WORDS", str(settings.default_top_words))
    table.add_row("TEXTSCAN_DEFAULT_MIN_WORD_LENGTH", str(settings.default_min_word_length))
    table.add_row("TEXTSCAN_DEFAULT_SORT_MODE", str(settings.default_sort_mode))
    table.add_row("TEXTSCAN_FREQUENCY_PREVIEW_LIMIT", str(settings.frequency_preview_limit))

    console.print(table)


if __name__ == "__main__":
    app()
