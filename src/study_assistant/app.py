"""Interactive CLI application."""
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from study_assistant.db import init_db, DEFAULT_DB_PATH
from study_assistant.logging_config import setup_logging
from study_assistant.session import QuizController, SessionState
from study_assistant.settings import get_course_code, get_user_id, select_course

console = Console()

OPTION_LETTERS = ["a", "b", "c", "d"]
EXIT_WORDS = ("q", "menu")


class SessionExitRequested(Exception):
    """User typed q/menu inside a quiz; answers so far are kept."""


def session_prompt(prompt: str, **kwargs) -> str:
    answer = Prompt.ask(prompt, **kwargs)
    if answer.strip().lower() in EXIT_WORDS:
        raise SessionExitRequested()
    return answer


def notify(message: str) -> None:
    console.print(f"[red]{message}[/red]")


def show_welcome(controller: QuizController):
    console.print(Panel(
        f"[bold]Study Assistant[/bold]\n[dim]{controller.user_id} · {controller.course_code}[/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu():
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        ("upload", "Load lecture notes (.txt)"),
        ("generate", "Generate 10 MCQs and start the quiz"),
        ("quiz", "Resume the current quiz"),
        ("progress", "Study progress for this course"),
        ("course", "Switch user or course"),
        ("reset", "Start over"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<14}[/cyan] {desc}")


def run_quiz(controller: QuizController) -> None:
    questions = controller.questions
    if controller.state != SessionState.ACTIVE or not questions:
        console.print("[yellow]No active quiz. Upload notes and generate one first.[/yellow]")
        return
    console.print(f"\n[bold]Quiz[/bold] — {len(questions)} questions [dim](q to pause)[/dim]\n")
    for i, q in enumerate(questions, 1):
        if q.id in controller.answers:
            continue
        console.print(f"[bold]Q{i}.[/bold] {q.question}\n")
        for letter, option in zip(OPTION_LETTERS, q.options):
            console.print(f"  [cyan]{letter})[/cyan] {option}")
        answer = session_prompt("\nYour answer", choices=OPTION_LETTERS + list(EXIT_WORDS))
        controller.select_answer(q.id, OPTION_LETTERS.index(answer))
        console.print()
    console.print(f"[dim]{controller.answered_count}/{len(questions)} answered[/dim]")
    if controller.can_submit:
        show_results(controller.submit())


def show_results(result) -> None:
    console.print(Panel(
        f"[bold]{result.accuracy}%[/bold]\nYou got {result.correct_count} out of {result.total} questions correct!",
        title="Quiz Results", border_style="green" if result.accuracy >= 70 else "yellow",
    ))
    for i, review in enumerate(result.reviews, 1):
        mark = "[green]✓[/green]" if review.is_correct else "[red]✗[/red]"
        console.print(f"[bold]Q{i}.[/bold] {review.question.question}")
        console.print(f"  Your answer: {review.selected_option} {mark}")
        if not review.is_correct:
            console.print(f"  [green]Correct: {review.question.correct_option}[/green]")


def cmd_upload(controller: QuizController):
    file_path = Prompt.ask("File path")
    if not Path(file_path).exists():
        console.print(f"[red]File not found: {file_path}[/red]")
        return
    if controller.handle_file_upload(file_path):
        doc = controller.document
        console.print(f"[green]Loaded {doc.name} ({doc.byte_length} bytes). Ready to generate.[/green]")


def cmd_generate(controller: QuizController):
    if controller.generate():
        run_quiz(controller)


def cmd_progress(controller: QuizController):
    progress = controller.progress
    table = Table(title=f"Study Progress — {progress.course_code}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("MCQs completed", str(progress.mcqs_completed))
    table.add_row("Accuracy", f"{progress.accuracy_rate}%")
    table.add_row("Lectures studied", str(progress.lectures_studied))
    table.add_row("Study sessions", str(progress.study_sessions))
    table.add_row("Study time", f"{progress.total_study_time} min")
    table.add_row("Last session", progress.last_study_session or "never")
    console.print(table)


def cmd_course(db_path: str, controller: QuizController) -> QuizController:
    user_id = Prompt.ask("User id", default=controller.user_id)
    course_code = Prompt.ask("Course code", default=controller.course_code)
    user_id, course_code = select_course(db_path, user_id, course_code)
    return QuizController(db_path, user_id, course_code, notify=notify)


def main():
    setup_logging(console=console)
    db_path = DEFAULT_DB_PATH
    init_db(db_path)
    controller = QuizController(db_path, get_user_id(db_path), get_course_code(db_path), notify=notify)

    show_welcome(controller)

    while True:
        show_menu()
        choice = Prompt.ask("\n[bold]>[/bold]", default="upload").strip().lower()
        try:
            if choice == "upload":
                cmd_upload(controller)
            elif choice == "generate":
                cmd_generate(controller)
            elif choice == "quiz":
                run_quiz(controller)
            elif choice == "progress":
                cmd_progress(controller)
            elif choice == "course":
                controller = cmd_course(db_path, controller)
            elif choice == "reset":
                controller.reset()
                console.print("[dim]Session cleared.[/dim]")
            elif choice in ("quit", "exit", "q"):
                console.print("[dim]Happy studying![/dim]")
                break
            else:
                console.print("[red]Unknown command. Try again.[/red]")
        except SessionExitRequested:
            console.print("[dim]Quiz paused. Use 'quiz' to resume.[/dim]")
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except Exception as e:
            console.print(f"[red]Error: {e}[/red]")


if __name__ == "__main__":
    main()
