"""Acceptance check for parse results before a consumer relies on them."""

from typing import Any, Mapping, Union

from ..models import ParseEnvelope, PlotDetails, record_tag


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def _has_plot_content(plot: Any) -> bool:
    if isinstance(plot, PlotDetails):
        return not plot.is_empty
    if isinstance(plot, Mapping):
        return len(plot) > 0
    return False


def validate_response(envelope: Union[ParseEnvelope, Mapping[str, Any]]) -> bool:
    """
    Decide whether a parse result is usable.

    Accepts a ParseEnvelope or an envelope-shaped mapping (``success``/``data``).
    Chapter and character records need at least one entry, plot records need
    at least one populated field; text records and untagged JSON always pass.

    Returns:
        True if the result can be used as-is
    """
    if not _get(envelope, 'success'):
        return False

    data = _get(envelope, 'data')
    if data is None:
        return False

    tag = record_tag(data)

    if tag == 'chapters':
        chapters = _get(data, 'chapters')
        return isinstance(chapters, list) and len(chapters) > 0

    if tag == 'characters':
        characters = _get(data, 'characters')
        return isinstance(characters, list) and len(characters) > 0

    if tag == 'plot':
        return _has_plot_content(_get(data, 'plot'))

    return True
