"""Rendering of a cart total and item count into a display string."""
from typing import Optional

from shopcart import config
from shopcart.errors import ERROR_TEMPLATE_PLACEHOLDER, InvalidTemplateError
from shopcart.logging import get_logger
from shopcart.money import Amount, format_amount

logger = get_logger(__name__)

REQUIRED_PLACEHOLDERS = ("{total}", "{count}")


class SummaryFormatter:
    """
    Stateless formatter for cart summaries.

    The template is checked once at construction; ``format()`` never raises.
    """

    def __init__(self, template: Optional[str] = None):
        template = config.SUMMARY_TEMPLATE if template is None else template
        if not all(placeholder in template for placeholder in REQUIRED_PLACEHOLDERS):
            logger.warning(f"Invalid summary template: {template!r}")
            raise InvalidTemplateError(ERROR_TEMPLATE_PLACEHOLDER)
        self.template = template

    def format(self, total: Amount, item_count: int) -> str:
        """
        Render ``total`` to two decimal places and ``item_count`` as an integer.

        Example:
            >>> SummaryFormatter("Total: {total}, Items: {count}").format(15.5, 2)
            'Total: 15.50, Items: 2'
        """
        # str.replace keeps literal braces elsewhere in the template intact
        return (
            self.template
            .replace("{total}", format_amount(total))
            .replace("{count}", str(int(item_count)))
        )

    def __repr__(self) -> str:
        return f"SummaryFormatter(template={self.template!r})"
