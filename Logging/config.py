"""
Configuration for logging outputs and post-simulation reporting.
"""

from dataclasses import dataclass


@dataclass
class LoggingConfig:
    log_filename: str = "ascent_log.txt"
    save_log: bool = True
    print_summary: bool = True
