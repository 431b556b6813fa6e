"""
Logging utilities for the generator.
Rich console output for builds, with a debug log file on request.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table


class DirectoryLogger:
    """
    Logger for the generator with rich console output and optional debug mode.
    """

    def __init__(self, debug_mode: bool = False, debug_log_file: Optional[str] = None):
        self.debug_mode = debug_mode
        self.debug_log_file = debug_log_file

        # Diagnostics go to stderr so stdout stays clean
        self.console = Console(stderr=True)

        self._setup_logging()

    def _setup_logging(self):
        """Send build messages to the console, and to a log file in debug mode."""
        self.logger = logging.getLogger('webdir')
        self.logger.setLevel(logging.DEBUG if self.debug_mode else logging.INFO)
        self.logger.handlers = []

        # Debug mode also shows loader and renderer details on the console
        console_handler = RichHandler(console=self.console, show_path=self.debug_mode)
        console_handler.setLevel(self.logger.level)
        self.logger.addHandler(console_handler)

        if self.debug_mode and self.debug_log_file:
            log_path = Path(self.debug_log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s %(module)s: %(message)s'
            ))
            self.logger.addHandler(file_handler)

    def print_header(self, title: str):
        """Print a header/banner."""
        self.console.print(Panel(title, style="bold blue"))

    def print_section(self, title: str):
        """Print a section header."""
        self.console.print(f"\n[bold cyan]{title}[/bold cyan]")

    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)

    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)

    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        """Log error message."""
        self.logger.error(message, exc_info=exc_info)

    def success(self, message: str):
        """Log success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def print_summary(self, entries: int, outlines: int, written: list):
        """Print build summary."""
        self.print_section("Build Complete")

        table = Table(show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="bold")
        table.add_row("Entries", str(entries))
        table.add_row("OPML outlines", str(outlines))
        for path in written:
            table.add_row("Written", str(path))
        self.console.print(table)


# Global logger instance
_logger_instance: Optional[DirectoryLogger] = None


def get_logger() -> DirectoryLogger:
    """Get the global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = DirectoryLogger()
    return _logger_instance


def init_logger(debug_mode: bool = False, debug_log_file: Optional[str] = None) -> DirectoryLogger:
    """Initialize the global logger."""
    global _logger_instance
    _logger_instance = DirectoryLogger(debug_mode=debug_mode, debug_log_file=debug_log_file)
    return _logger_instance
