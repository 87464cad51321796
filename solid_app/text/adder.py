"""Fixed orchestrator for text addition."""

from ..logging.config import get_principle_logger
from .strategies import TextAddType

logger = get_principle_logger(__name__, "open_closed")


class TextAdder:
    """Adds text using whichever strategy the caller injects."""

    def add_to_text(self, original: str, new_string: str, adder: TextAddType) -> str:
        result = adder.add(original, new_string)
        logger.debug("Text added", strategy=repr(adder), result_length=len(result))
        return result
