# tests/unit/test_cli.py
"""
CLI unit tests.

Tests each command via typer's CliRunner, using an in-memory plan library
and a mocked LLM client to avoid filesystem and network side effects.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from automation_advisor.cli import app
from automation_advisor.config.schema import AdvisorConfig
from automation_advisor.errors import CollaboratorError
from automation_advisor.llm.types import GenerationResult
from automation_advisor.models.plan import PlanSection, SavedPlan
from automation_advisor.planning.store import PlanStore
from automation_advisor.runtime import AdvisorRuntime
from automation_advisor.storage.base import InMemoryStorage

runner = CliRunner()

PLAN_ID_1 = "abc123de-0000-4000-8000-000000000001"
PLAN_ID_2 = "789012ab-0000-4000-8000-000000000002"

PLAN_TEXT = (
    "### 1. Análisis de Procesos Manuales\nA\n"
    "### 2. Diseño de Flujos de Agentes\nB\n"
    "### 3. Stack Tecnológico Recomendado\nC\n"
    "### 4. Implementación Paso a Paso\nD\n"
    "### 5. ROI Estimado\nE\n"
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

def _make_plan(plan_id=PLAN_ID_1, description="Clínica dental"):
    return SavedPlan(
        id=plan_id,
        created_at=1_700_000_000_000,
        business_description=description,
        analysis=PlanSection(title="Análisis", content="Citas por teléfono"),
        flows=PlanSection(title="Flujos", content="Agente de citas"),
        stack=PlanSection(title="Stack", content="Cal.com"),
        implementation=PlanSection(title="Implementación", content="Fase 1"),
        roi=PlanSection(title="ROI", content="5 horas/semana"),
    )


def _make_client():
    client = MagicMock()
    client.model = "test-model"
    client.generate_plan = AsyncMock(return_value=GenerationResult(text=PLAN_TEXT))
    return client


@pytest.fixture
def runtime():
    return AdvisorRuntime(AdvisorConfig(), store=PlanStore(InMemoryStorage()), client=_make_client())


@pytest.fixture(autouse=True)
def patched_runtime(runtime):
    with patch("automation_advisor.cli._get_runtime", return_value=runtime):
        yield runtime


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestHelp:
    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "AI business automation plans" in result.output

    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("generate", "list", "show", "edit", "delete", "export", "chat", "serve"):
            assert command in result.output


class TestGenerate:
    def test_generate_prints_plan(self, runtime):
        result = runner.invoke(app, ["generate", "Clínica dental"])

        assert result.exit_code == 0
        assert "# Plan de Automatización: Clínica dental" in result.output
        assert "## ROI Estimado" in result.output
        assert len(runtime.store) == 1

    def test_generate_blank_description(self, runtime):
        result = runner.invoke(app, ["generate", "  "])
        assert result.exit_code == 1
        assert "Por favor, describe tu negocio." in result.output
        runtime.client.generate_plan.assert_not_called()

    def test_generate_failure(self, runtime):
        runtime.client.generate_plan.side_effect = CollaboratorError("down")
        result = runner.invoke(app, ["generate", "Clínica dental"])
        assert result.exit_code == 1
        assert "Hubo un error al generar el plan" in result.output
        assert len(runtime.store) == 0


class TestList:
    def test_list_empty(self):
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "No hay planes guardados" in result.output

    def test_list_with_plans(self, runtime):
        runtime.store.create(_make_plan(PLAN_ID_1, "Clínica dental"))
        runtime.store.create(_make_plan(PLAN_ID_2, "Gestoría"))

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert result.output.index(PLAN_ID_2[:8]) < result.output.index(PLAN_ID_1[:8])
        assert "Gestoría" in result.output


class TestShow:
    def test_show_plan(self, runtime):
        runtime.store.create(_make_plan())
        result = runner.invoke(app, ["show", PLAN_ID_1[:8]])
        assert result.exit_code == 0
        assert "## Flujos" in result.output
        assert "Agente de citas" in result.output

    def test_show_section(self, runtime):
        runtime.store.create(_make_plan())
        result = runner.invoke(app, ["show", PLAN_ID_1, "--section", "roi"])
        assert result.exit_code == 0
        assert "5 horas/semana" in result.output
        assert "Agente de citas" not in result.output

    def test_show_unknown(self):
        result = runner.invoke(app, ["show", "deadbeef"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestEdit:
    def test_edit_with_content(self, runtime):
        runtime.store.create(_make_plan())
        result = runner.invoke(app, ["edit", PLAN_ID_1, "stack", "--content", "Calendly"])

        assert result.exit_code == 0
        assert "Saved section 'stack'" in result.output
        assert runtime.store.get(PLAN_ID_1).stack.content == "Calendly"

    def test_edit_from_file(self, runtime, tmp_path):
        runtime.store.create(_make_plan())
        source = tmp_path / "roi.md"
        source.write_text("20 horas/semana", encoding="utf-8")

        result = runner.invoke(app, ["edit", PLAN_ID_1, "roi", "--file", str(source)])

        assert result.exit_code == 0
        assert runtime.store.get(PLAN_ID_1).roi.content == "20 horas/semana"

    def test_edit_in_editor_without_changes(self, runtime):
        runtime.store.create(_make_plan())
        with patch("automation_advisor.cli.click.edit", return_value=None):
            result = runner.invoke(app, ["edit", PLAN_ID_1, "roi"])
        assert result.exit_code == 0
        assert "No changes." in result.output

    def test_edit_in_editor_saves_changes(self, runtime):
        runtime.store.create(_make_plan())
        with patch("automation_advisor.cli.click.edit", return_value="8 horas/semana") as mock_edit:
            result = runner.invoke(app, ["edit", PLAN_ID_1, "roi"])

        assert result.exit_code == 0
        mock_edit.assert_called_once_with("5 horas/semana", extension=".md")
        assert runtime.store.get(PLAN_ID_1).roi.content == "8 horas/semana"

    def test_edit_unknown_section(self, runtime):
        runtime.store.create(_make_plan())
        result = runner.invoke(app, ["edit", PLAN_ID_1, "summary", "--content", "x"])
        assert result.exit_code == 1
        assert "Unknown section" in result.output


class TestDelete:
    def test_delete_confirmed(self, runtime):
        runtime.store.create(_make_plan())
        result = runner.invoke(app, ["delete", PLAN_ID_1, "--yes"])
        assert result.exit_code == 0
        assert "deleted" in result.output
        assert len(runtime.store) == 0

    def test_delete_aborted(self, runtime):
        runtime.store.create(_make_plan())
        result = runner.invoke(app, ["delete", PLAN_ID_1], input="n\n")
        assert result.exit_code == 1
        assert len(runtime.store) == 1


class TestExport:
    def test_export_to_directory(self, runtime, tmp_path):
        runtime.store.create(_make_plan())
        result = runner.invoke(app, ["export", PLAN_ID_1, "--output-dir", str(tmp_path)])

        assert result.exit_code == 0
        target = tmp_path / "Plan_Automatizacion_abc123de.txt"
        assert target.exists()
        assert "Saved:" in result.output

    def test_export_stdout(self, runtime):
        runtime.store.create(_make_plan())
        result = runner.invoke(app, ["export", PLAN_ID_1, "--stdout"])
        assert result.exit_code == 0
        assert result.output.startswith("# Plan de Automatización: Clínica dental")


class TestChat:
    def test_chat_round_trip(self, runtime):
        conversation = MagicMock()
        conversation.send_message = AsyncMock(return_value="Te recomiendo n8n")
        runtime.client.start_chat = MagicMock(return_value=conversation)

        result = runner.invoke(app, ["chat"], input="¿Qué herramienta uso?\nsalir\n")

        assert result.exit_code == 0
        assert "¡Hola! Soy tu asistente de IA" in result.output
        assert "Te recomiendo n8n" in result.output
        conversation.send_message.assert_awaited_once_with("¿Qué herramienta uso?")

    def test_chat_failure_shows_apology(self, runtime):
        conversation = MagicMock()
        conversation.send_message = AsyncMock(side_effect=CollaboratorError("down"))
        runtime.client.start_chat = MagicMock(return_value=conversation)

        result = runner.invoke(app, ["chat"], input="hola\nexit\n")

        assert result.exit_code == 0
        assert "Lo siento, ocurrió un error" in result.output
