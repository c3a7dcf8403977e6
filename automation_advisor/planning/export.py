# automation_advisor/planning/export.py
"""
Plan renderer for converting a SavedPlan to a downloadable plain-text file.

Format:
    # Plan de Automatización: {business_description}

    Fecha: YYYY-MM-DD

    ## {section title}

    {section content}

    ... (five sections, fixed order)

    ## Fuentes
    - {title}: {uri}
"""

from datetime import datetime

from automation_advisor.models.plan import SavedPlan


def format_created_at(created_at_ms: int) -> str:
    """Creation time (epoch ms) as a local calendar date."""
    return datetime.fromtimestamp(created_at_ms / 1000).strftime("%Y-%m-%d")


def export_filename(plan: SavedPlan) -> str:
    """Suggested file name: Plan_Automatizacion_<first 8 chars of id>.txt"""
    return f"Plan_Automatizacion_{plan.id[:8]}.txt"


class PlanRenderer:
    """Renders a saved plan as human-readable text."""

    def render(self, plan: SavedPlan) -> str:
        """
        Render a plan to a text string.

        Sections with neither title nor content (fallback plans) are skipped.

        Args:
            plan: Plan to render

        Returns:
            Text ending with a single newline
        """
        lines = [
            f"# Plan de Automatización: {plan.business_description}",
            "",
            f"Fecha: {format_created_at(plan.created_at)}",
            "",
        ]

        for _, section in plan.sections():
            if not section.title and not section.content:
                continue
            lines.append(f"## {section.title}")
            lines.append("")
            lines.append(section.content)
            lines.append("")

        if plan.sources:
            lines.append("## Fuentes")
            for source in plan.sources:
                lines.append(f"- {source.title}: {source.uri}")
            lines.append("")

        return "\n".join(lines).rstrip("\n") + "\n"
