"""Domain initialization and configuration."""

from protean.domain import Domain

from flowershop.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_dir="logs", log_file_prefix="flowershop")

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
flowershop = Domain(name="flowershop")
