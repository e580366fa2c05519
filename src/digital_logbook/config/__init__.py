import os


def get_settings_module() -> str:
    # Environment from APP_ENV, defaults to 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "digital_logbook.config.production"

    if env in {"test", "testing"}:
        return "digital_logbook.config.testing"

    return "digital_logbook.config.development"


def env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}
