"""End-to-end walk through a quiz without a display."""

from canvas_quiz.core.input_router import InputRouter
from canvas_quiz.core.layout import compute_layout
from canvas_quiz.core.models import QuizPhase
from canvas_quiz.core.question_loader import load_questions_from_csv
from canvas_quiz.core.quiz_session import QuizSession
from canvas_quiz.rendering.frame_renderer import FrameRenderer
from canvas_quiz.rendering.draw_commands import DrawText


def _click(router, rect, layout):
    return router.handle_click(rect.center_x, rect.center_y, layout)


def test_single_question_round_trip(write_csv):
    bank = load_questions_from_csv(write_csv("Q,A1,A2,A3,C\n"))
    session = QuizSession(bank)
    layout = compute_layout(1024, 768)
    router = InputRouter(session)

    _click(router, layout.option_boxes[2], layout)
    _click(router, layout.submit_button, layout)

    assert session.score == 1


def test_full_session_reaches_result(write_csv):
    rows = "".join(f"Question {n},a,b,c,{'ABC'[n % 3]}\n" for n in range(6))
    session = QuizSession(load_questions_from_csv(write_csv(rows)))
    layout = compute_layout(1024, 768)
    router = InputRouter(session)
    renderer = FrameRenderer()

    for n in range(6):
        session.advance_frame()
        header = [c.text for c in renderer.render(session.snapshot(), layout, None) if isinstance(c, DrawText)][0]
        assert header == f"Question {n + 1} of 6"
        # Always answer "A": right for n = 0 and n = 3
        _click(router, layout.option_boxes[0], layout)
        result = _click(router, layout.submit_button, layout)
        assert result.submitted

    session.advance_frame()

    assert session.phase is QuizPhase.RESULT
    assert session.current_index == 6
    assert session.score == 2
    rendered = [c.text for c in renderer.render(session.snapshot(), layout, None) if isinstance(c, DrawText)]
    assert "2 / 6" in rendered
