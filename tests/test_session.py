"""Tests for the session state machine driven through scripted input."""
from unittest.mock import patch

import pytest

from quiz_trainer.db.models import User
from quiz_trainer.handlers.menu import run_session
from quiz_trainer.handlers.quiz import run_quiz
from quiz_trainer.run import main
from quiz_trainer.states.session_states import SessionState

from conftest import make_console, output_of


# ============================================================================
# LOGIN
# ============================================================================


class TestLogin:

    def test_new_user_then_exit(self, make_session, store):
        session = make_session(["1", "Alice", "", "5"])

        assert run_session(session) == 0

        assert [u.id for u in store.load_users()] == ["alice1"]
        assert "Your User ID is: alice1" in output_of(session)
        assert "Your progress has been saved." in output_of(session)
        assert session.state is SessionState.TERMINATED

    def test_invalid_login_choice_registers(self, make_session, store):
        session = make_session(["x", "Bob", "", "5"])

        run_session(session)

        assert "Invalid choice. Creating new user..." in output_of(session)
        assert [u.id for u in store.load_users()] == ["bob1"]

    def test_returning_user(self, make_session, store):
        store.save_users([User(id="alice1", name="Alice"), User(id="bob1", name="Bob")])
        session = make_session(["2", "2", "", "5"])

        run_session(session)

        assert "Welcome back, Bob!" in output_of(session)
        assert len(store.load_users()) == 2

    @pytest.mark.parametrize("selection", ["9", "0", "abc"])
    def test_returning_bad_selection_registers(self, make_session, store, selection):
        store.save_users([User(id="alice1", name="Alice")])
        session = make_session(["2", selection, "Carol", "", "5"])

        run_session(session)

        assert "Invalid selection. Creating new user..." in output_of(session)
        assert [u.id for u in store.load_users()] == ["alice1", "carol1"]

    def test_returning_with_no_users_registers(self, make_session, store):
        session = make_session(["2", "Dan", "", "5"])

        run_session(session)

        assert "No existing users found" in output_of(session)
        assert [u.id for u in store.load_users()] == ["dan1"]

    def test_switch_user(self, make_session, store, alice):
        session = make_session(["3", "1", "Bob", "", "5"], user=alice)

        run_session(session)

        assert "User: Bob (bob1)" in output_of(session)


# ============================================================================
# MAIN MENU
# ============================================================================


class TestMainMenu:

    def test_invalid_choice_reprompts(self, make_session, alice):
        session = make_session(["7", "", "hello", "", "5"], user=alice)

        assert run_session(session) == 0

        assert output_of(session).count("Invalid choice.") == 2
        assert output_of(session).count("MAIN MENU") == 3

    def test_view_scores_empty(self, make_session, alice):
        session = make_session(["2", "", "5"], user=alice)

        run_session(session)

        assert "No scores recorded yet" in output_of(session)

    def test_input_stream_closed(self, make_session, alice):
        session = make_session([], user=alice)

        with pytest.raises(EOFError):
            run_session(session)

    def test_main_exits_zero(self, tmp_path):
        console = make_console(["1", "Alice", "", "5"])

        with patch("quiz_trainer.run.resolve_data_dir", return_value=tmp_path), \
                patch("quiz_trainer.run.setup_logging"), \
                patch("quiz_trainer.run.Console", return_value=console):
            with pytest.raises(SystemExit) as exc:
                main()

        assert exc.value.code == 0
        assert (tmp_path / "questions.json").exists()
        assert (tmp_path / "admin.json").exists()
        assert (tmp_path / "users.json").exists()


# ============================================================================
# QUIZ
# ============================================================================


class TestQuiz:

    def test_correct_answer(self, make_session, store, alice):
        session = make_session(["2", "", ""], user=alice)

        assert run_quiz(session, "CompTIA", "PenTest+") == (1, 1)

        score = store.load_users()[0].scores["CompTIA"]["PenTest+"]
        assert (score.correct, score.total) == (1, 1)

    def test_out_of_range_answer_is_wrong(self, make_session, store, alice):
        session = make_session(["9", "", ""], user=alice)

        assert run_quiz(session, "CompTIA", "PenTest+") == (0, 1)

        assert "The correct answer was: Open Source Intelligence" in output_of(session)
        assert store.load_users()[0].scores["CompTIA"]["PenTest+"].correct == 0

    def test_questions_in_order(self, make_session, alice):
        session = make_session(["3", "", "1", "", ""], user=alice)

        assert run_quiz(session, "Cisco", "CCNA") == (1, 2)

        out = output_of(session)
        assert out.index("Which protocol is used by ping?") < out.index("What does STP stand for?")
        assert "Score: 1/2 (50.0%) 📚" in out

    def test_empty_module_records_nothing(self, make_session, store, alice):
        session = make_session([""], user=alice)

        assert run_quiz(session, "Cisco", "Missing") == (0, 0)

        assert store.load_users() == []

    def test_menu_flow_records_score(self, make_session, store, alice):
        session = make_session(["1", "3", "2", "", "", "5"], user=alice)

        run_session(session)

        assert store.load_users()[0].scores["CompTIA"]["PenTest+"].correct == 1

    def test_back_from_module_list(self, make_session, store, alice):
        session = make_session(["1", "4", "5"], user=alice)

        run_session(session)

        assert store.load_users() == []

    def test_no_modules(self, make_session, alice):
        session = make_session(["1", "", "5"], user=alice)
        session.quiz_data.questions.clear()

        run_session(session)

        assert "No quiz modules available." in output_of(session)


# ============================================================================
# ADMIN
# ============================================================================


def admin_script(*steps):
    """Main menu -> admin login -> steps -> back -> exit."""
    return ["4", "admin123", *steps, "8", "5"]


class TestAdmin:

    def test_wrong_password_denied(self, make_session, alice):
        session = make_session(["4", "Admin123", "", "5"], user=alice)

        run_session(session)

        assert "Access Denied" in output_of(session)
        assert "Administrator Mode Active" not in output_of(session)

    def test_invalid_admin_choice(self, make_session, alice):
        session = make_session(admin_script("x", ""), user=alice)

        run_session(session)

        assert output_of(session).count("Administrator Mode Active") == 2

    def test_add_question(self, make_session, store, alice):
        session = make_session(
            admin_script("1", "Net", "Basics", "What is DNS?", "a", "b", "c", "d", "2", ""),
            user=alice,
        )

        run_session(session)

        last = store.load_questions().questions[-1]
        assert (last.category, last.module, last.answer) == ("Net", "Basics", 1)

    def test_add_question_bad_answer(self, make_session, store, alice):
        session = make_session(
            admin_script("1", "Net", "Basics", "What is DNS?", "a", "b", "c", "d", "7", ""),
            user=alice,
        )

        run_session(session)

        assert "Invalid answer number." in output_of(session)
        assert len(store.load_questions().questions) == 4

    def test_remove_question(self, make_session, store, alice):
        session = make_session(admin_script("2", "1", ""), user=alice)

        run_session(session)

        assert [q.id for q in store.load_questions().questions] == ["p1", "n2", "c1"]

    def test_remove_question_cancel(self, make_session, store, alice):
        session = make_session(admin_script("2", "0"), user=alice)

        run_session(session)

        assert len(store.load_questions().questions) == 4

    def test_add_module_redirects_to_add_question(self, make_session, store, alice):
        session = make_session(
            admin_script("3", "Cloud", "AWS", "y", "What is S3?", "a", "b", "c", "d", "1", ""),
            user=alice,
        )

        run_session(session)

        last = store.load_questions().questions[-1]
        assert (last.category, last.module) == ("Cloud", "AWS")

    def test_add_module_declined_changes_nothing(self, make_session, store, alice):
        before = store.questions_path.read_bytes()
        session = make_session(admin_script("3", "Cloud", "AWS", "n", ""), user=alice)

        run_session(session)

        assert store.questions_path.read_bytes() == before

    def test_remove_module_confirmed(self, make_session, store, alice):
        session = make_session(admin_script("4", "1", "yes", ""), user=alice)

        run_session(session)

        assert [q.id for q in store.load_questions().questions] == ["p1", "c1"]

    @pytest.mark.parametrize("confirmation", ["no", "y", ""])
    def test_remove_module_cancelled(self, make_session, store, alice, confirmation):
        session = make_session(admin_script("4", "1", confirmation, ""), user=alice)

        run_session(session)

        assert "Cancelled." in output_of(session)
        assert len(store.load_questions().questions) == 4

    def test_delete_user(self, make_session, store, alice):
        store.save_users([alice, User(id="bob1", name="Bob")])
        session = make_session(admin_script("5", "1", "2", "DELETE", ""), user=alice)

        run_session(session)

        assert [u.id for u in store.load_users()] == ["alice1"]

    def test_delete_user_wrong_token(self, make_session, store, alice):
        store.save_users([alice, User(id="bob1", name="Bob")])
        session = make_session(admin_script("5", "1", "2", "delete", ""), user=alice)

        run_session(session)

        assert [u.id for u in store.load_users()] == ["alice1", "bob1"]

    def test_list_all_questions(self, make_session, alice):
        session = make_session(admin_script("6", ""), user=alice)

        run_session(session)

        assert "CyberOps (1 questions):" in output_of(session)

    def test_change_password(self, make_session, store, alice):
        session = make_session(admin_script("7", "admin123", "n3w", "n3w", ""), user=alice)

        run_session(session)

        assert store.load_admin_config().password == "n3w"
        assert session.admin_config.password == "n3w"

    def test_change_password_mismatch(self, make_session, store, alice):
        session = make_session(admin_script("7", "admin123", "n3w", "n3x", ""), user=alice)

        run_session(session)

        assert "Passwords don't match" in output_of(session)
        assert store.load_admin_config().password == "admin123"
