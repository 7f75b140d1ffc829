"""LangGraph workflow definition for artifact generation."""

import logging
from typing import Any, Literal

from langgraph.graph import END, StateGraph

from study_companion.agents.manager import AgentManager
from study_companion.fallback import (
    create_minimal_exam,
    create_minimal_flashcards,
    create_minimal_quiz,
)
from study_companion.graph.state import (
    ENHANCING_PROGRESS,
    MILESTONES,
    STAGE_ENHANCING,
    WorkflowState,
    failure,
)
from study_companion.models import ArtifactType
from study_companion.validation import validate_content

logger = logging.getLogger(__name__)

MATERIAL_NOT_FOUND = "Material not found"

FALLBACK_BUILDERS = {
    ArtifactType.QUIZ: create_minimal_quiz,
    ArtifactType.FLASHCARDS: create_minimal_flashcards,
    ArtifactType.EXAM: create_minimal_exam,
}


def should_continue(state: WorkflowState) -> Literal["continue", "failed"]:
    """Stop the workflow as soon as a stage reports an error."""
    if state.get("error"):
        return "failed"
    return "continue"


def should_enhance(state: WorkflowState) -> Literal["enhance", "done", "failed"]:
    """Decide whether a generated quiz gets vocabulary hints."""
    if state.get("error"):
        return "failed"
    if state["artifact_type"] is ArtifactType.QUIZ and state.get("enhance_vocab_hints"):
        return "enhance"
    return "done"


def _generator_for(manager: AgentManager, artifact_type: ArtifactType):
    return {
        ArtifactType.QUIZ: manager.generate_quiz,
        ArtifactType.FLASHCARDS: manager.generate_flashcards,
        ArtifactType.EXAM: manager.generate_exam,
    }[artifact_type]


def create_generation_workflow(manager: AgentManager, artifact_type: ArtifactType) -> StateGraph:
    """
    Create the LangGraph workflow for one artifact type.

    The workflow follows this structure:
    1. locate - Source text is present
    2. validate - Length checks, no network
    3. plan - Exam only: extract topics to cover
    4. invoke - Report that the provider is being called
    5. generate - Agent call (minimal fallback artifact if the mock path fails)
    6. enhance - Quiz only, optional: vocabulary pronunciation hints

    Every node returns a partial state update with progress and stage, so a
    streaming caller can report determinate progress.
    """
    milestones = MILESTONES[artifact_type]
    generate_artifact = _generator_for(manager, artifact_type)

    async def locate(state: WorkflowState) -> dict[str, Any]:
        if state.get("source_text") is None:
            return failure(MATERIAL_NOT_FOUND)
        return {"progress": milestones.located, "stage": milestones.located_stage}

    async def validate(state: WorkflowState) -> dict[str, Any]:
        validation = validate_content(state["source_text"])
        if not validation.valid:
            return failure(validation.reason or f"Invalid content for {artifact_type.value} generation")
        return {"progress": milestones.validated, "stage": milestones.validated_stage}

    async def plan(state: WorkflowState) -> dict[str, Any]:
        options = state["options"]
        topics = list(options.focus_topics)
        if not topics:
            topics = await manager.exam_proctor.extract_topics(state["source_text"])
            options = options.model_copy(update={"focus_topics": tuple(topics)})
        return {
            "options": options,
            "topics": topics,
            "progress": milestones.planned,
            "stage": milestones.planned_stage,
        }

    async def invoke(state: WorkflowState) -> dict[str, Any]:
        return {"progress": milestones.invoked, "stage": milestones.invoked_stage}

    async def generate(state: WorkflowState) -> dict[str, Any]:
        source_text = state["source_text"]
        options = state["options"]
        try:
            result = await generate_artifact(source_text, options)
        except Exception as e:
            if not manager.uses_mock_provider:
                return failure(str(e) or f"Failed to generate {artifact_type.value}")
            logger.warning(
                "Mock-backed %s generation failed (%s) - using minimal fallback content",
                artifact_type.value,
                e,
            )
            result = FALLBACK_BUILDERS[artifact_type](source_text, options)

        if artifact_type is ArtifactType.QUIZ and state.get("enhance_vocab_hints"):
            return {"result": result, "progress": ENHANCING_PROGRESS, "stage": STAGE_ENHANCING}
        return {
            "result": result,
            "progress": 100,
            "stage": milestones.done_stage,
            "is_loading": False,
        }

    async def enhance(state: WorkflowState) -> dict[str, Any]:
        quiz = await manager.enhance_quiz_with_vocab_hints(state["result"])
        return {
            "result": quiz,
            "progress": 100,
            "stage": milestones.done_stage,
            "is_loading": False,
        }

    workflow = StateGraph(WorkflowState)

    workflow.add_node("locate", locate)
    workflow.add_node("validate", validate)
    workflow.add_node("invoke", invoke)
    workflow.add_node("generate", generate)

    workflow.set_entry_point("locate")

    workflow.add_conditional_edges(
        "locate",
        should_continue,
        {"continue": "validate", "failed": END},
    )

    if milestones.planned is not None:
        workflow.add_node("plan", plan)
        workflow.add_conditional_edges(
            "validate",
            should_continue,
            {"continue": "plan", "failed": END},
        )
        workflow.add_edge("plan", "invoke")
    else:
        workflow.add_conditional_edges(
            "validate",
            should_continue,
            {"continue": "invoke", "failed": END},
        )

    workflow.add_edge("invoke", "generate")

    if artifact_type is ArtifactType.QUIZ:
        workflow.add_node("enhance", enhance)
        workflow.add_conditional_edges(
            "generate",
            should_enhance,
            {"enhance": "enhance", "done": END, "failed": END},
        )
        workflow.add_edge("enhance", END)
    else:
        workflow.add_edge("generate", END)

    return workflow


def compile_workflow(manager: AgentManager, artifact_type: ArtifactType):
    """
    Compile the workflow and return it ready for execution.

    Returns:
        Compiled workflow
    """
    workflow = create_generation_workflow(manager, artifact_type)
    return workflow.compile()
