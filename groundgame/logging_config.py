"""Logging configuration for the campaign opportunity service."""
import logging
import sys
from logging.handlers import RotatingFileHandler

from groundgame.config import get_settings

# Log file names (created under settings.log_dir)
API_LOG_FILE = "api.log"
SIMULATION_LOG_FILE = "simulation.log"

# Logger that receives every parameter change and recomputation
SIMULATION_LOGGER = "groundgame.engine"


def setup_logging():
    """Configure logging for the application."""
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logs_dir = settings.log_dir
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Root logger configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(console_formatter)

    # API log file handler (rotating, 10MB max, keep 5 backups)
    api_file_handler = RotatingFileHandler(
        logs_dir / API_LOG_FILE,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    api_file_handler.setLevel(level)
    api_file_handler.setFormatter(console_formatter)

    # Simulation log file handler (rotating, 10MB max, keep 5 backups)
    simulation_file_handler = RotatingFileHandler(
        logs_dir / SIMULATION_LOG_FILE,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    simulation_file_handler.setLevel(logging.DEBUG)
    simulation_formatter = logging.Formatter(
        '%(asctime)s - [SIMULATION] - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    simulation_file_handler.setFormatter(simulation_formatter)

    # Add handlers to root logger
    root_logger.addHandler(console_handler)
    root_logger.addHandler(api_file_handler)

    # Engine modules log under groundgame.engine.*
    simulation_logger = logging.getLogger(SIMULATION_LOGGER)
    simulation_logger.addHandler(simulation_file_handler)
    simulation_logger.setLevel(logging.DEBUG if settings.debug else level)

    # Reduce noise from libraries
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)

    return root_logger


# Convenience function to get logger
def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
