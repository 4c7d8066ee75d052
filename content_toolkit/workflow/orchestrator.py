"""Run the content workflows, track the named stage, keep partial results and classify failures."""
import asyncio
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional

from content_toolkit.config import settings
from content_toolkit.models.schemas import ArticleComponents, RecipeSections
from content_toolkit.services.errors import BillingRequiredError, ContentToolkitError
from content_toolkit.services.gemini_service import GeminiService
from content_toolkit.utils.logging import get_logger
from content_toolkit.workflow.graph import (
    ANALYSIS_WORKFLOW,
    ARTICLE_WORKFLOW,
    COMPONENTS_WORKFLOW,
    REGENERATION_WORKFLOW,
    REVISION_WORKFLOW,
    WorkflowSpec,
    create_workflow_graph,
)
from content_toolkit.workflow.state import WorkflowStage, WorkflowState

logger = get_logger(__name__)

ProgressCallback = Callable[[WorkflowStage, str], Optional[Awaitable[None]]]

_graphs: dict[str, Any] = {}


def get_graph(spec: WorkflowSpec):
    if spec.name not in _graphs:
        _graphs[spec.name] = create_workflow_graph(spec)
    return _graphs[spec.name]


@dataclass
class WorkflowResult:
    """Outcome of one workflow run. ``values`` holds every output produced before any failure."""

    workflow: str
    stage: WorkflowStage
    values: dict[str, Any] = field(default_factory=dict)
    error: str | None = None
    is_billing_error: bool = False

    @property
    def ok(self) -> bool:
        return self.stage is not WorkflowStage.ERROR

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)


class PipelineOrchestrator:
    """
    Sequences stage functions for one user action. Build one per invocation; it owns
    the GeminiService so every stage of the run shares one client and credential.
    """

    def __init__(
        self,
        gemini: GeminiService | None = None,
        progress: ProgressCallback | None = None,
        pause_ms: int | None = None,
    ):
        self.gemini = gemini or GeminiService()
        self.progress = progress
        self.pause_ms = settings.stage_pause_ms if pause_ms is None else pause_ms
        self.stage = WorkflowStage.INITIAL

    async def _enter(self, stage: WorkflowStage, message: str) -> None:
        self.stage = stage
        if self.progress is not None:
            maybe = self.progress(stage, message)
            if asyncio.iscoroutine(maybe):
                await maybe

    async def run(self, spec: WorkflowSpec, inputs: WorkflowState) -> WorkflowResult:
        """Stream ``spec`` node by node. Any failure ends the run in ERROR; nothing resumes."""
        graph = get_graph(spec)
        result = WorkflowResult(workflow=spec.name, stage=self.stage)
        steps = {step.node: i for i, step in enumerate(spec.steps)}
        first = spec.steps[0]
        await self._enter(first.stage, first.message)
        try:
            async for update in graph.astream({**inputs, "gemini": self.gemini}, stream_mode="updates"):
                for node, output in update.items():
                    if output:
                        result.values.update(output)
                    index = steps.get(node)
                    if index is None or index + 1 >= len(spec.steps):
                        continue
                    if spec.pause_between_steps and self.pause_ms > 0:
                        await asyncio.sleep(self.pause_ms / 1000)
                    following = spec.steps[index + 1]
                    await self._enter(following.stage, following.message)
        except ContentToolkitError as e:
            self.stage = WorkflowStage.ERROR
            result.stage = self.stage
            result.error = str(e)
            result.is_billing_error = isinstance(e, BillingRequiredError)
            logger.error(
                "workflow_failed",
                workflow=spec.name,
                error=str(e),
                is_billing_error=result.is_billing_error,
                completed=sorted(result.values),
            )
            await self._enter(WorkflowStage.ERROR, result.error)
            return result
        await self._enter(spec.final_stage, "")
        result.stage = self.stage
        logger.info("workflow_completed", workflow=spec.name, stage=self.stage.value)
        return result

    async def run_analysis(
        self,
        keyword: str,
        competitor_content: str,
        region: str = "United States",
        language: str = "English",
    ) -> WorkflowResult:
        """Initial -> Analyzing -> Strategizing -> ExtractingSections -> Results | Error."""
        return await self.run(
            ANALYSIS_WORKFLOW,
            {
                "keyword": keyword,
                "competitor_content": competitor_content,
                "region": region,
                "language": language,
            },
        )

    async def build_components(
        self,
        keyword: str,
        analysis: str,
        region: str = "United States",
        language: str = "English",
        recipe_sections: RecipeSections | None = None,
        category: str = "",
    ) -> WorkflowResult:
        inputs: WorkflowState = {
            "keyword": keyword,
            "analysis": analysis,
            "region": region,
            "language": language,
            "category": category,
        }
        if recipe_sections is not None:
            inputs["recipe_sections"] = recipe_sections
        return await self.run(COMPONENTS_WORKFLOW, inputs)

    async def generate_article(self, components: ArticleComponents) -> WorkflowResult:
        """ComponentsReady -> GeneratingArticle -> Parsed."""
        self.stage = WorkflowStage.COMPONENTS_READY
        return await self.run(ARTICLE_WORKFLOW, {"components": components})

    async def revise_article(self, components: ArticleComponents, original_article: str) -> WorkflowResult:
        """Parsed -> Comparing -> Regenerating -> Parsed, using the comparison as feedback."""
        self.stage = WorkflowStage.PARSED
        return await self.run(
            REVISION_WORKFLOW,
            {"components": components, "original_article": original_article},
        )

    async def regenerate_article(
        self,
        components: ArticleComponents,
        original_article: str,
        feedback: str,
    ) -> WorkflowResult:
        self.stage = WorkflowStage.PARSED
        return await self.run(
            REGENERATION_WORKFLOW,
            {"components": components, "original_article": original_article, "feedback": feedback},
        )
