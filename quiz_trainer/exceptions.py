"""Custom exceptions for quiz trainer operations."""


class QuizTrainerError(Exception):
    """Base exception for quiz trainer errors."""
    pass


class InvalidAnswerError(QuizTrainerError):
    """Correct-answer number or option list rejected while adding a question."""
    pass


class QuestionNotFoundError(QuizTrainerError):
    """Question index outside the current question list."""
    pass


class UserNotFoundError(QuizTrainerError):
    """User index outside the stored user list."""
    pass


class AuthenticationError(QuizTrainerError):
    """Admin password did not match."""
    pass


class PasswordMismatchError(QuizTrainerError):
    """New admin password and its confirmation differ."""
    pass
