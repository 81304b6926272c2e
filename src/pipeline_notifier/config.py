# src/pipeline_notifier/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", frozen=True)

    # GitLab
    gitlab_api_hostname: str
    gitlab_api_token: str
    gitlab_jobs_limit: int = 300

    # Slack
    slack_api_token: str
    slack_channel: str

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    request_timeout: float = 30.0
    log_level: str = "INFO"

    @property
    def gitlab_url(self) -> str:
        """Base URL for the GitLab instance, https unless a scheme is given."""
        if "://" in self.gitlab_api_hostname:
            return self.gitlab_api_hostname.rstrip("/")
        return f"https://{self.gitlab_api_hostname.strip('/')}"
