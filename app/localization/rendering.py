"""Positional (printf-style) template rendering."""

from typing import Any, Sequence

from core.logging import get_module_logger
from localization.errors import RenderError

logger = get_module_logger()


def render_template(template: str, params: Sequence[Any] = ()) -> str:
    """Substitute ordered parameters into a printf-style template.

    Placeholders (%s, %d, %.2f, ...) are consumed in order; %% is a literal
    percent sign. With no params the template is returned untouched, so a
    bare % in an unparameterized message is kept as-is.

    Args:
        template: Message template.
        params: Ordered values for the placeholders. A single string is
            treated as one value, not as a sequence of characters.

    Returns:
        Rendered message.

    Raises:
        RenderError: If the number of params differs from the number of
            placeholders, or a value does not fit its placeholder.
    """
    if isinstance(params, str):
        params = (params,)

    if not params:
        return template

    try:
        return template % tuple(params)
    except (TypeError, ValueError, KeyError) as e:
        logger.error(
            "render_failed",
            template=template,
            param_count=len(params),
            error=str(e),
        )
        raise RenderError(template, params, e) from e
