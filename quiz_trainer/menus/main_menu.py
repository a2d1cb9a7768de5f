from quiz_trainer.states.session_states import SessionState

MAIN_MENU_TEXT = (
    "           MAIN MENU\n\n"
    "1. 📝 Take Quiz\n"
    "2. 📊 View Scores\n"
    "3. 👤 Switch User\n"
    "4. 🔧 Admin Panel\n"
    "5. ❌ Exit"
)

MAIN_MENU_CHOICES = {
    "1": SessionState.QUIZ,
    "2": SessionState.SCORES,
    "3": SessionState.LOGGED_OUT,
    "4": SessionState.ADMIN,
    "5": SessionState.TERMINATED,
}

LOGIN_MENU_TEXT = (
    "Are you a:\n"
    "1. New User\n"
    "2. Returning User"
)
