import os


class Settings:
    def __init__(self):
        self.app_name = "Tutor Desk"
        self.api_version = "1.0.0"
        self.environment = os.getenv("TUTOR_DESK_ENVIRONMENT", "development")
        self.database_url = os.getenv("TUTOR_DESK_DATABASE_URL", "sqlite:///./tutor_desk.db")
        self.default_tutor_id = os.getenv("TUTOR_DESK_DEFAULT_TUTOR_ID", "d114c0de-0000-4000-a000-000000000000")
        self.log_level = os.getenv("TUTOR_DESK_LOG_LEVEL", "INFO")
        self.page_size = 5
        self.risk_threshold = 50
        self.recent_payments_limit = 10
        self.monthly_earnings_limit = 12


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
