"""Plot summary extraction: each line is matched independently, last label wins."""

from typing import Dict, Iterable

from ..models import ParseEnvelope, PlotDetails, PlotRecord
from ..utils.logging import get_logger
from .patterns import PLOT_LABEL_GROUPS, match_label


def collect_plot_fields(lines: Iterable[str]) -> Dict[str, str]:
    fields: Dict[str, str] = {}
    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            continue
        labelled = match_label(line, PLOT_LABEL_GROUPS)
        if labelled:
            field, value = labelled
            fields[field] = value
    return fields


def extract_plot(content: str) -> ParseEnvelope:
    fields = collect_plot_fields(content.split('\n'))
    get_logger("parsing.plot").debug(f"Extracted plot fields: {sorted(fields)}")

    return ParseEnvelope.ok(PlotRecord(plot=PlotDetails(**fields)), raw_content=content)
