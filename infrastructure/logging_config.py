"""
Logging configuration for the court status service.

Importing this module configures the root logger once; the bot entrypoint
imports it before anything else starts.
"""

import logging
import logging.handlers
import os
import shutil
from datetime import datetime

from tracking import t

PRODUCTION_MODE = os.getenv('PRODUCTION_MODE', 'false').lower() == 'true'

LOG_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'logs', 'latest_log'
)

# Component loggers and their level in (production, development)
COMPONENT_LOGGERS = {
    'CourtStatusBot': (logging.INFO, logging.DEBUG),
    'CourtStatusPoller': (logging.INFO, logging.DEBUG),
    'ReservationApiClient': (logging.WARNING, logging.DEBUG),
    'ResponseNormalizer': (logging.WARNING, logging.DEBUG),
    'CourtStatusHandler': (logging.INFO, logging.DEBUG),
    'StatusChangeNotifier': (logging.INFO, logging.DEBUG),
    'SubscriberStore': (logging.WARNING, logging.DEBUG),
    'LifecycleManager': (logging.INFO, logging.DEBUG),
}


def _clear_previous_logs() -> None:
    t('infrastructure.logging_config._clear_previous_logs')
    if not os.path.exists(LOG_DIR):
        return
    for filename in os.listdir(LOG_DIR):
        file_path = os.path.join(LOG_DIR, filename)
        try:
            if os.path.isfile(file_path) or os.path.islink(file_path):
                os.unlink(file_path)
            elif os.path.isdir(file_path):
                shutil.rmtree(file_path)
        except OSError as exc:
            print(f'Failed to delete {file_path}. Reason: {exc}')


def setup_logging(production_mode: bool = PRODUCTION_MODE) -> None:
    """
    Configure console and rotating file handlers.

    Previous logs in ``logs/latest_log`` are cleared so each session starts
    with fresh files.
    """
    t('infrastructure.logging_config.setup_logging')
    _clear_previous_logs()
    os.makedirs(LOG_DIR, exist_ok=True)

    main_log_file = os.path.join(LOG_DIR, 'court_status.log')
    debug_log_file = os.path.join(LOG_DIR, 'court_status_debug.log')
    error_log_file = os.path.join(LOG_DIR, 'court_status_errors.log')

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING if production_mode else logging.DEBUG)
    root_logger.handlers = []

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d in %(funcName)s()] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING if production_mode else logging.INFO)
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    main_file_handler = logging.handlers.RotatingFileHandler(
        main_log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    main_file_handler.setLevel(logging.WARNING if production_mode else logging.INFO)
    main_file_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(main_file_handler)

    if not production_mode:
        debug_file_handler = logging.handlers.RotatingFileHandler(
            debug_log_file,
            maxBytes=50 * 1024 * 1024,
            backupCount=3,
            encoding='utf-8'
        )
        debug_file_handler.setLevel(logging.DEBUG)
        debug_file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(debug_file_handler)

    error_file_handler = logging.handlers.RotatingFileHandler(
        error_log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(error_file_handler)

    for name, (production_level, development_level) in COMPONENT_LOGGERS.items():
        logging.getLogger(name).setLevel(production_level if production_mode else development_level)

    # Reduce noise from external libraries
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('telegram').setLevel(logging.INFO)

    root_logger.info("=" * 80)
    root_logger.info("Court Status Logging Initialized - %s", datetime.now())
    root_logger.info("Production Mode: %s", 'ON' if production_mode else 'OFF')
    root_logger.info("Main log: %s", main_log_file)
    if not production_mode:
        root_logger.info("Debug log: %s", debug_log_file)
    root_logger.info("Error log: %s", error_log_file)
    root_logger.info("=" * 80)


# Initialize logging when module is imported
setup_logging()
