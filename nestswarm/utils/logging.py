# nestswarm/utils/logging.py
import logging
from typing import Any, Dict, List, Optional

from colorama import Back, Fore, Style, init
from tabulate import tabulate

# Initialize colorama
init(autoreset=True)

LOG_FORMAT = "[%(asctime)s] %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


class ColorFormatter(logging.Formatter):
    COLORS = {
        "INFO": Fore.CYAN,
        "DEBUG": Fore.BLUE,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Back.RED + Fore.WHITE,
    }

    def format(self, record):
        # work on a copy so the file handler still sees plain names
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, Fore.WHITE)
        record.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"
        record.name = f"{Fore.MAGENTA}{record.name}{Style.RESET_ALL}"
        return super().format(record)


def get_logger(name: str = "nestswarm", level: int = logging.INFO, logfile: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(level)

    # Console handler with color
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(ColorFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    # File handler (no color)
    if logfile:
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def _colorize(key: str, value: Any) -> str:
    if key == "status":
        if value == "ok":
            return f"{Fore.GREEN}{value}{Style.RESET_ALL}"
        return f"{Fore.RED}{value}{Style.RESET_ALL}"
    if key in ("fitness", "best_fitness") and isinstance(value, (int, float)):
        return f"{Fore.BLUE}{value:.6f}{Style.RESET_ALL}"
    if key in ("time", "time_sec") and isinstance(value, (int, float)):
        return f"{Fore.MAGENTA}{value:.2f}s{Style.RESET_ALL}"
    if key == "method":
        return f"{Fore.CYAN}{value}{Style.RESET_ALL}"
    return str(value)


def format_results_table(results: List[Dict[str, Any]], color: bool = True) -> str:
    """Render a list of result rows as a box table."""
    if not results:
        return ""
    headers = list(results[0].keys())
    rows = [
        [_colorize(k, row.get(k)) if color else row.get(k) for k in headers]
        for row in results
    ]
    return tabulate(rows, headers=headers, tablefmt="simple_grid", floatfmt=".6f")


def print_results_table(results, title="RESULTS"):
    """Print a table of benchmark results"""
    print(f"\n{Fore.CYAN}{'═' * 60}{Style.RESET_ALL}")
    print(f"{Fore.CYAN}{title:^60}{Style.RESET_ALL}")
    print(f"{Fore.CYAN}{'═' * 60}{Style.RESET_ALL}")

    if not results:
        print(f"{Fore.YELLOW}No results to display{Style.RESET_ALL}")
        return

    print(format_results_table(results))


def print_experiment_header(problem_name, run_num, total_runs):
    """Print experiment header"""
    print(f"\n{Fore.GREEN}{'─' * 60}{Style.RESET_ALL}")
    print(f"{Fore.GREEN}Experiment {run_num}/{total_runs}: {problem_name}{Style.RESET_ALL}")
    print(f"{Fore.GREEN}{'─' * 60}{Style.RESET_ALL}")
