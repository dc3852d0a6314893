# logger_setup.py

import logging
import os
import json

def setup_logging(config_path='config.json', runs_dir='runs'):
    """
    Sets up logging for the application.

    Reads logging configuration, creates a run-specific log directory, and
    configures a dedicated application logger (not the root logger) to output
    to both the console and a log file. pygame and Numba keep their own
    loggers untouched.

    Data Contract:
    - Inputs:
        - config_path (str): Path to the configuration file.
        - runs_dir (str): Root directory for per-run log folders.
    - Outputs: The configured "pendulum_sim" logger.
    - Side Effects:
        - Configures the "pendulum_sim" logger.
        - Creates directories for log files.
        - Closes any handlers left over from a previous call.
    - Invariants: Assumes the config file contains 'run_id' and a 'logging' dictionary
      with 'level' and 'format'.
    """
    with open(config_path, 'r') as f:
        config = json.load(f)

    run_id = config['run_id']
    log_config = config['logging']

    # --- Get a dedicated logger for the pendulum ensemble ---
    logger = logging.getLogger("pendulum_sim")
    logger.setLevel(log_config['level'])

    # --- Keep pendulum logs out of the root logger ---
    logger.propagate = False

    # --- Create the per-run log directory ---
    log_dir = os.path.join(runs_dir, run_id)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'simulation.log')

    # --- Create formatter and handlers ---
    formatter = logging.Formatter(log_config['format'])

    # File handler
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)

    # Console handler
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)

    # --- Replace any handlers from an earlier call ---
    # Closing them releases the previous run's log file.
    for old_handler in list(logger.handlers):
        old_handler.close()
    logger.handlers.clear()
    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)

    logger.info(f"Logging initialized. Run ID: {run_id}. Log file: {log_file}")
    return logger
