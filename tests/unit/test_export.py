# tests/unit/test_export.py
"""Tests for the plain-text plan export."""

from datetime import datetime

from automation_advisor.models.plan import GroundingSource, PlanSection, SavedPlan
from automation_advisor.planning.export import PlanRenderer, export_filename, format_created_at

CREATED_AT = int(datetime(2024, 3, 15, 12, 0).timestamp() * 1000)


def _make_plan(**overrides):
    fields = dict(
        id="0123abcd-ffff-4000-8000-000000000000",
        created_at=CREATED_AT,
        business_description="Agencia de viajes",
        analysis=PlanSection(title="Análisis", content="Texto A"),
        flows=PlanSection(title="Flujos", content="Texto B"),
        stack=PlanSection(title="Stack", content="Texto C"),
        implementation=PlanSection(title="Implementación", content="Texto D"),
        roi=PlanSection(title="ROI", content="Texto E"),
    )
    fields.update(overrides)
    return SavedPlan(**fields)


def test_filename_uses_id_prefix():
    assert export_filename(_make_plan()) == "Plan_Automatizacion_0123abcd.txt"


def test_date_is_calendar_day():
    assert format_created_at(CREATED_AT) == "2024-03-15"


def test_render_full_plan():
    text = PlanRenderer().render(_make_plan())

    assert text.startswith("# Plan de Automatización: Agencia de viajes\n\nFecha: 2024-03-15\n\n")
    assert "## Análisis\n\nTexto A\n\n## Flujos\n\nTexto B\n" in text
    assert text.index("## Stack") < text.index("## Implementación") < text.index("## ROI")
    assert text.endswith("Texto E\n")
    assert "## Fuentes" not in text


def test_render_with_sources():
    plan = _make_plan(
        sources=[
            GroundingSource(uri="https://a.example", title="A"),
            GroundingSource(uri="https://b.example", title="B"),
        ]
    )
    text = PlanRenderer().render(plan)

    assert text.endswith("## Fuentes\n- A: https://a.example\n- B: https://b.example\n")


def test_render_fallback_plan_skips_empty_sections():
    empty = PlanSection()
    plan = _make_plan(
        analysis=PlanSection(title="Plan de Automatización", content="Texto libre"),
        flows=empty,
        stack=empty,
        implementation=empty,
        roi=empty,
    )
    text = PlanRenderer().render(plan)

    assert text.count("## ") == 1
    assert text.endswith("## Plan de Automatización\n\nTexto libre\n")


def test_render_uses_edited_content():
    plan = _make_plan(roi=PlanSection(title="ROI", content="Ahorro de 10 horas/semana"))
    assert "Ahorro de 10 horas/semana" in PlanRenderer().render(plan)
