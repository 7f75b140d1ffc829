"""Typer CLI application for generating study artifacts."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TextColumn
from rich.table import Table

from study_companion.agents import AgentManager
from study_companion.config import get_settings, setup_logging
from study_companion.graph import GenerationSession, GenerationState
from study_companion.models import (
    ArtifactType,
    ExamOptions,
    ExamType,
    FlashcardOptions,
    FocusLevel,
    GeneratedExam,
    GeneratedFlashcards,
    GeneratedQuiz,
    Language,
    QuizDifficulty,
    QuizOptions,
)

app = typer.Typer(
    name="study-companion",
    help="Generate quizzes, flashcards and mock exams from course material",
    add_completion=False,
)

console = Console()


def build_manager() -> AgentManager:
    """Create the agent manager for this process from environment settings."""
    settings = get_settings()
    setup_logging(settings.log_level)
    return AgentManager.from_settings(settings)


def read_source(path: Path) -> str:
    """Read material text from a file, exiting with an error if it is missing."""
    if not path.is_file():
        console.print(f"[red]Error:[/red] File not found: {path}", style="bold")
        raise typer.Exit(code=1)
    return path.read_text(encoding="utf-8")


def run_with_progress(manager: AgentManager, artifact_type: ArtifactType, runner):
    """
    Run a generation coroutine while rendering the session state as a progress bar.

    Args:
        manager: Agent manager to generate with
        artifact_type: Which state to render
        runner: Callable taking the session and returning the coroutine to run

    Returns:
        Tuple of (artifact or None, final GenerationState)
    """
    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.percentage:>3.0f}%"),
        console=console,
    ) as progress:
        task = progress.add_task("[cyan]Starting...", total=100)

        def on_update(updated_type: ArtifactType, state: GenerationState) -> None:
            if updated_type is artifact_type:
                progress.update(task, completed=state.progress, description=f"[cyan]{state.stage}")

        session = GenerationSession(manager, on_update=on_update)
        result = asyncio.run(runner(session))

    return result, session.state_for(artifact_type)


def finish(result: Optional[BaseModel], state: GenerationState, output: Optional[Path]) -> None:
    """Report failure or write the artifact as camelCase JSON."""
    if result is None:
        console.print(f"\n[red]Error:[/red] {state.error}", style="bold")
        raise typer.Exit(code=1)

    if output is not None:
        output.write_text(result.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        console.print(f"\n[green]✓[/green] Saved to: {output}")


@app.command()
def quiz(
    source: Path = typer.Argument(..., help="Text file with the course material"),
    questions: int = typer.Option(5, "--questions", "-q", min=1, help="Number of questions"),
    difficulty: QuizDifficulty = typer.Option(
        QuizDifficulty.MIXED, "--difficulty", "-d", case_sensitive=False
    ),
    language: Language = typer.Option(Language.EN, "--language", "-l", case_sensitive=False),
    vocab_hints: bool = typer.Option(
        False, "--vocab-hints/--no-vocab-hints", help="Add pronunciation hints to technical terms"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the quiz as JSON"),
) -> None:
    """Generate a multiple choice quiz."""
    manager = build_manager()
    text = read_source(source)
    options = QuizOptions(question_count=questions, difficulty=difficulty, language=language)

    result, state = run_with_progress(
        manager,
        ArtifactType.QUIZ,
        lambda session: session.generate_quiz(text, options, enhance_vocab_hints=vocab_hints),
    )
    if result is not None:
        display_quiz(result)
    finish(result, state, output)


@app.command()
def flashcards(
    source: Path = typer.Argument(..., help="Text file with the course material"),
    cards: int = typer.Option(10, "--cards", "-c", min=1, help="Number of cards"),
    language: Language = typer.Option(Language.DE, "--language", "-l", case_sensitive=False),
    formulas: bool = typer.Option(True, "--formulas/--no-formulas", help="Include formula cards"),
    focus: FocusLevel = typer.Option(FocusLevel.MIXED, "--focus", case_sensitive=False),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the deck as JSON"),
) -> None:
    """Generate a flashcard deck."""
    manager = build_manager()
    text = read_source(source)
    options = FlashcardOptions(
        card_count=cards, language=language, include_formulas=formulas, focus_level=focus
    )

    result, state = run_with_progress(
        manager,
        ArtifactType.FLASHCARDS,
        lambda session: session.generate_flashcards(text, options),
    )
    if result is not None:
        display_flashcards(result)
    finish(result, state, output)


@app.command()
def exam(
    source: Path = typer.Argument(..., help="Text file with the course material"),
    questions: int = typer.Option(8, "--questions", "-q", min=1, help="Number of questions"),
    duration: int = typer.Option(90, "--duration", min=1, help="Duration in minutes"),
    exam_type: ExamType = typer.Option(ExamType.PRACTICE, "--type", case_sensitive=False),
    essay: bool = typer.Option(True, "--essay/--no-essay", help="Include essay questions"),
    calculations: bool = typer.Option(
        True, "--calculations/--no-calculations", help="Include calculation problems"
    ),
    language: Language = typer.Option(Language.EN, "--language", "-l", case_sensitive=False),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the exam as JSON"),
) -> None:
    """Generate a mock exam."""
    manager = build_manager()
    text = read_source(source)
    options = ExamOptions(
        question_count=questions,
        duration_minutes=duration,
        exam_type=exam_type,
        include_essay=essay,
        include_calculations=calculations,
        language=language,
    )

    result, state = run_with_progress(
        manager,
        ArtifactType.EXAM,
        lambda session: session.generate_exam(text, options),
    )
    if result is not None:
        display_exam(result, manager)
    finish(result, state, output)


@app.command()
def agents() -> None:
    """Show the available agents."""
    manager = build_manager()

    table = Table(title="Agents", border_style="cyan")
    table.add_column("Agent", style="cyan", no_wrap=True)
    table.add_column("Description", style="white")
    table.add_column("Status", style="green")

    for info in manager.get_agent_info().values():
        table.add_row(info.name, info.description, info.status)

    console.print(table)
    console.print(f"Provider: [bold]{manager.provider.kind.value}[/bold] ({manager.provider.model_name})")


@app.command()
def health() -> None:
    """Check whether the agents have a live provider configured."""
    manager = build_manager()

    table = Table(title="Agent Health", border_style="cyan")
    table.add_column("Agent", style="cyan", no_wrap=True)
    table.add_column("Ready", style="white")

    for name, healthy in manager.health_check().items():
        table.add_row(name, "[green]online[/green]" if healthy else "[red]offline[/red]")

    console.print(table)


def display_quiz(result: GeneratedQuiz) -> None:
    """Display the generated quiz questions."""
    table = Table(title="Quiz", border_style="green", show_lines=True)
    table.add_column("#", style="cyan")
    table.add_column("Question", style="white")
    table.add_column("Answer", style="green")
    table.add_column("Difficulty", style="white")

    for i, question in enumerate(result.questions, start=1):
        table.add_row(
            str(i),
            question.question,
            question.options[question.correct_answer],
            question.difficulty.value,
        )

    console.print()
    console.print(table)


def display_flashcards(result: GeneratedFlashcards) -> None:
    """Display the generated flashcards."""
    table = Table(title="Flashcards", border_style="green", show_lines=True)
    table.add_column("Front", style="cyan")
    table.add_column("Back", style="white")
    table.add_column("Category", style="white")

    for card in result.cards:
        table.add_row(card.front, card.back, card.category)

    console.print()
    console.print(table)


def display_exam(result: GeneratedExam, manager: AgentManager) -> None:
    """Display the generated exam and its difficulty analysis."""
    table = Table(title="Mock Exam", border_style="green", show_lines=True)
    table.add_column("#", style="cyan")
    table.add_column("Question", style="white")
    table.add_column("Type", style="white")
    table.add_column("Points", style="green")

    for i, question in enumerate(result.questions, start=1):
        table.add_row(str(i), question.question, question.type.value, str(question.points))

    console.print()
    console.print(table)

    analysis = manager.analyze_exam(result)
    summary = (
        f"Total points: {result.metadata.total_points}\n"
        f"Duration: {result.metadata.estimated_duration} min\n\n"
        + "\n".join(f"• {rec}" for rec in analysis.recommendations)
    )
    style = "green" if analysis.is_balanced else "yellow"
    console.print(Panel(summary, title="Exam Analysis", border_style=style))


@app.callback()
def callback() -> None:
    """
    Study Companion - quizzes, flashcards and mock exams from course material.
    """


if __name__ == "__main__":
    app()
