"""Runtime configuration for lambda-pong."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="LAMBDA_PONG_", env_file=".env", extra="ignore")

    app_name: str = "lambda-pong"
    log_level: str = "WARNING"
    interpreter_bin: str = Field(
        default="lambda_calc",
        description="Lambda calculus interpreter executable, resolved through PATH.",
    )
    interpreter_args: list[str] = Field(default_factory=lambda: ["-n"])
    poll_interval_seconds: float = Field(
        default=0.001,
        gt=0,
        description="Sleep between read attempts while the interpreter has not answered yet.",
    )
    max_frames: int | None = Field(default=None, ge=0)


settings = Settings()
