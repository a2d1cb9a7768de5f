from quiz_trainer.db.models import AdminConfig


def check_admin_password(config: AdminConfig, candidate: str) -> bool:
    """Exact, case- and whitespace-sensitive comparison against the stored plaintext password."""
    # TODO: store a salted hash in admin.json instead of the plaintext password.
    return candidate == config.password
