# automation_advisor/planning/parser.py
"""
Split a generated plan text into the five named sections.

The generator is asked for five numbered markdown headings
(``### 1. ...`` through ``### 5. ...``). When it complies, each heading's body
becomes one section; when it does not, the whole text is kept as a single
analysis section so the plan is still usable.
"""

import logging
import re

from automation_advisor.models.plan import SECTION_KEYS, Plan, PlanSection

logger = logging.getLogger(__name__)

# Level 2 or 3 heading whose text starts with "N." ; group 1 is the title text.
HEADING_PATTERN = re.compile(r"^[ \t]*#{2,3}[ \t]*\d+\.[ \t]*(.*?)[ \t]*$", re.MULTILINE)

DEFAULT_TITLES: dict[str, str] = {
    "analysis": "Análisis de Procesos Manuales",
    "flows": "Diseño de Flujos de Agentes",
    "stack": "Stack Tecnológico Recomendado",
    "implementation": "Implementación Paso a Paso",
    "roi": "ROI Estimado",
}

FALLBACK_TITLE = "Plan de Automatización"


def split_sections(raw_text: str) -> list[tuple[str, str]]:
    """
    Split text on numbered headings.

    Text before the first heading is discarded.

    Args:
        raw_text: Generated plan text

    Returns:
        (heading title, body) pairs in document order, both stripped
    """
    parts = HEADING_PATTERN.split(raw_text)
    # re.split with one group: [preamble, title1, body1, title2, body2, ...]
    titles = parts[1::2]
    bodies = parts[2::2]
    return [(title.strip(), body.strip()) for title, body in zip(titles, bodies)]


def parse_plan(raw_text: str) -> Plan:
    """
    Map generated text to a Plan.

    Deterministic and side-effect free apart from a warning log on fallback.

    Args:
        raw_text: Generated plan text

    Returns:
        Plan with sections assigned in order analysis, flows, stack,
        implementation, roi. With fewer than five headings, ``analysis``
        holds the entire text under FALLBACK_TITLE and the rest are empty.
    """
    segments = split_sections(raw_text)

    if len(segments) < len(SECTION_KEYS):
        logger.warning(
            f"Plan text has {len(segments)} numbered heading(s), expected {len(SECTION_KEYS)}; "
            f"keeping it as a single section"
        )
        return Plan(analysis=PlanSection(title=FALLBACK_TITLE, content=raw_text))

    if len(segments) > len(SECTION_KEYS):
        logger.info(f"Ignoring {len(segments) - len(SECTION_KEYS)} extra heading(s) in plan text")

    sections = {
        key: PlanSection(title=title or DEFAULT_TITLES[key], content=body)
        for key, (title, body) in zip(SECTION_KEYS, segments)
    }
    return Plan(**sections)


def is_fallback(plan: Plan) -> bool:
    """True when the plan came from the single-section fallback path."""
    return all(not section.title and not section.content for _, section in plan.sections()[1:])
