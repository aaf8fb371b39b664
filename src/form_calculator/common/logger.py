"""Package-wide logger."""
import logging


logger: logging.Logger = logging.getLogger("form_calculator")

# Attach a single handler, even if the module is imported several times
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
