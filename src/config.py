"""
Configuration Module for the Lesson Slicer

Loads configuration from environment variables (.env file) and validates
the values that control logging, export locations and export pacing.
Also holds the fixed page-layout constants used to locate lesson content.
"""

import os
import sys
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Note: Logger will be configured by setup_logger() in logging_config
# Import is deferred to avoid circular dependency during config loading


# Load environment variables from .env file
# Look for .env in the project root (parent of src/)
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    # Try loading from current directory as fallback
    load_dotenv()


class ConfigurationError(Exception):
    """Raised when a configuration value is invalid."""
    pass


def get_env_variable(var_name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get an optional environment variable.

    Blank values count as unset.

    Args:
        var_name: Name of environment variable
        default: Value returned when the variable is unset

    Returns:
        Stripped value of the environment variable, or the default
    """
    value = os.getenv(var_name)

    if value is None or value.strip() == "":
        return default

    return value.strip()


def get_float_variable(var_name: str, default: float) -> float:
    """
    Get a numeric environment variable.

    Raises:
        ConfigurationError: If the value is set but not a number
    """
    raw = get_env_variable(var_name)
    if raw is None:
        return default

    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"Environment variable '{var_name}' must be a number, got '{raw}'"
        ) from e


# ==================================
# File Paths
# ==================================

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Exported lesson CSV files
EXPORTS_DIR = Path(
    get_env_variable("SLICER_EXPORTS_DIR", default=str(PROJECT_ROOT / "data" / "exports"))
)

# Logging directory
LOGS_DIR = Path(
    get_env_variable("SLICER_LOGS_DIR", default=str(PROJECT_ROOT / "logs"))
)


# ==================================
# Export Settings
# ==================================

# Pause after each file write (seconds)
try:
    EXPORT_WRITE_DELAY = get_float_variable("SLICER_WRITE_DELAY", default=0.1)
except ConfigurationError as e:
    # Note: Using print() here because this runs during module import,
    # before logging is configured.
    print(f"\n❌ Configuration Error: {e}", file=sys.stderr)
    sys.exit(1)

# Export file naming: lesson-<id>.csv
EXPORT_FILENAME_TEMPLATE = "lesson-{lesson_number}.csv"
EXPORT_ENCODING = "utf-8"


# ==================================
# Lesson Page Layout
# ==================================

# Element whose nested first children lead to the content container
MAIN_CONTAINER_ID = "main"

# Number of first-element-child hops from #main to the content container
CONTENT_DEPTH = 3

# Element holding the lesson title ("Lesson 12: ...")
TITLEBAR_ID = "page-titlebar"

# Elements stripped from the page before tagging
NOISE_TAGS = ("script", "ins")
NOISE_CLASSES = ("play-button",)

# HTML parser backend for BeautifulSoup
HTML_PARSER = "html.parser"


# ==================================
# Logging Configuration
# ==================================

# Log level (used by logging_config.py)
LOG_LEVEL = get_env_variable("LOG_LEVEL", default="INFO").upper()


# ==================================
# Validation on Import
# ==================================

def validate_configuration():
    """
    Validate configuration on module import.

    Checks:
    - Export write delay is not negative
    - Content depth is positive
    - Required directories exist or can be created

    Raises:
        ConfigurationError: If configuration is invalid
    """
    errors = []

    if EXPORT_WRITE_DELAY < 0:
        errors.append(f"SLICER_WRITE_DELAY must not be negative, got {EXPORT_WRITE_DELAY}")

    if CONTENT_DEPTH <= 0:
        errors.append(f"CONTENT_DEPTH must be positive, got {CONTENT_DEPTH}")

    # Create required directories if they don't exist
    for directory in [EXPORTS_DIR, LOGS_DIR]:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            errors.append(f"Cannot create directory {directory}: {e}")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
        raise ConfigurationError(error_msg)


# Run validation on import
try:
    validate_configuration()
except ConfigurationError as e:
    print(f"\n❌ {e}", file=sys.stderr)
    sys.exit(1)


def print_configuration():
    """Print current configuration (for debugging)."""
    print("\n" + "=" * 80)
    print("Lesson Slicer Configuration")
    print("=" * 80)
    print(f"\nPage Layout:")
    print(f"  Main container: #{MAIN_CONTAINER_ID} (depth {CONTENT_DEPTH})")
    print(f"  Titlebar: #{TITLEBAR_ID}")
    print(f"  Noise tags: {', '.join(NOISE_TAGS)}")
    print(f"\nExport:")
    print(f"  Directory: {EXPORTS_DIR}")
    print(f"  Write delay: {EXPORT_WRITE_DELAY}s")
    print(f"\nLogging:")
    print(f"  Level: {LOG_LEVEL}")
    print(f"  Directory: {LOGS_DIR}")
    print("=" * 80 + "\n")


# Export all configuration variables
__all__ = [
    "ConfigurationError",
    "get_env_variable",
    "get_float_variable",
    # File paths
    "PROJECT_ROOT",
    "EXPORTS_DIR",
    "LOGS_DIR",
    # Export settings
    "EXPORT_WRITE_DELAY",
    "EXPORT_FILENAME_TEMPLATE",
    "EXPORT_ENCODING",
    # Page layout
    "MAIN_CONTAINER_ID",
    "CONTENT_DEPTH",
    "TITLEBAR_ID",
    "NOISE_TAGS",
    "NOISE_CLASSES",
    "HTML_PARSER",
    # Logging
    "LOG_LEVEL",
    "validate_configuration",
    "print_configuration",
]
