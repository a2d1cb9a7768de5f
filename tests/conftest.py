"""Shared fixtures for the quiz trainer tests."""
import io

import pytest

from quiz_trainer.db.models import AdminConfig, Question, QuizData, User
from quiz_trainer.db.storage import JsonStore
from quiz_trainer.states.session_states import Session, SessionState
from quiz_trainer.ui.console import Console


class ScriptedInput:
    """Feeds prepared lines to Console; EOFError once exhausted, like a closed stdin."""

    def __init__(self, lines):
        self.lines = list(lines)

    def __call__(self) -> str:
        if not self.lines:
            raise EOFError("script exhausted")
        return self.lines.pop(0)


def make_console(lines) -> Console:
    return Console(
        input_func=ScriptedInput(lines),
        output=io.StringIO(),
        delay=0,
        clear_screen=False,
    )


@pytest.fixture
def store(tmp_path):
    """JsonStore over an empty temporary directory."""
    return JsonStore(tmp_path)


@pytest.fixture
def sample_questions():
    """Two modules in two categories, plus a second Cisco module."""
    return [
        Question(
            id="n1",
            question="Which protocol is used by ping?",
            options=["TCP", "UDP", "ICMP", "ARP"],
            answer=2,
            category="Cisco",
            module="CCNA",
        ),
        Question(
            id="p1",
            question="What does OSINT stand for?",
            options=["Operating System Intelligence", "Open Source Intelligence", "Online Security", "Other"],
            answer=1,
            category="CompTIA",
            module="PenTest+",
        ),
        Question(
            id="n2",
            question="What does STP stand for?",
            options=["Simple Transfer", "Spanning Tree Protocol", "Secure Transmission", "Switch Transport"],
            answer=1,
            category="Cisco",
            module="CCNA",
        ),
        Question(
            id="c1",
            question="Which port does HTTPS use by default?",
            options=["80", "443", "22", "25"],
            answer=1,
            category="Cisco",
            module="CyberOps",
        ),
    ]


@pytest.fixture
def quiz_data(store, sample_questions):
    """Persisted QuizData built from sample_questions."""
    data = QuizData(questions=sample_questions)
    store.save_questions(data)
    return data


@pytest.fixture
def alice():
    return User(id="alice1", name="Alice")


@pytest.fixture
def make_session(store, quiz_data):
    """Build a Session over the temp store, driven by the given input lines."""
    def _make(lines, user=None, password="admin123"):
        admin_config = AdminConfig(password=password)
        store.save_admin_config(admin_config)
        session = Session(
            store=store,
            console=make_console(lines),
            quiz_data=quiz_data,
            admin_config=admin_config,
            user=user,
        )
        if user is not None:
            session.state = SessionState.MAIN_MENU
        return session
    return _make


def output_of(session: Session) -> str:
    return session.console.output.getvalue()
