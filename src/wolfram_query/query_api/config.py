"""Configuration management for the Wolfram|Alpha query client."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from wolfram_query import PROJECT_DIR
from wolfram_query.query_api import defs

ENVIRONMENTS = ("prd", "acc", "dev", "local")
DEFAULT_CONFIG_PATH = PROJECT_DIR / "project_config_wolfram.yml"


class ClientConfig(BaseModel):
    """Per-client settings. Each WolframClient owns one; nothing is global."""

    # Application id from https://developer.wolframalpha.com/
    app_id: str = Field(description="Wolfram|Alpha AppID sent as the appid parameter")

    # Endpoints
    query_url: str = Field(default=defs.QUERY_URL, description="Full results API endpoint")
    simple_url: str = Field(default=defs.SIMPLE_URL, description="Simple (image) API endpoint")
    short_answer_url: str = Field(default=defs.SHORT_ANSWER_URL, description="Short answers API endpoint")
    spoken_answer_url: str = Field(default=defs.SPOKEN_ANSWER_URL, description="Spoken results API endpoint")
    fast_query_url: str = Field(default=defs.FAST_QUERY_URL, description="Fast query recognizer endpoint")

    # Socket timeout for the HTTP client, not the API's own timeout parameter
    http_timeout: Optional[float] = Field(default=120, description="Seconds to wait on the connection, None to wait forever")

    model_config = {"frozen": True}

    @field_validator("app_id")
    @classmethod
    def validate_app_id(cls, v):
        """Reject a blank AppID before any request is made."""
        if not v or not v.strip():
            raise ValueError("Wolfram|Alpha app_id must not be empty")
        return v.strip()

    @classmethod
    def from_yaml_and_env(
        cls, config_path: str | Path = DEFAULT_CONFIG_PATH, env: str = "local", env_dir: str | Path = "config"
    ) -> "ClientConfig":
        """Load configuration from the YAML file and environment files.

        ``WOLFRAM_APPID`` in the environment wins over any ``app_id`` in YAML.
        """
        if env not in ENVIRONMENTS:
            raise ValueError(f"Invalid environment: {env}")

        # Load environment-specific .env file
        env_file = Path(env_dir) / f".env.{env}"
        if env_file.exists():
            load_dotenv(env_file, override=True)
        else:
            # Fallback to root .env if exists
            load_dotenv(override=True)

        env_config: dict[str, Any] = {}
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f) or {}
            env_config = yaml_config.get(env) or {}

        app_id = os.getenv("WOLFRAM_APPID") or env_config.get("app_id")
        if not app_id:
            raise ValueError(f"No Wolfram|Alpha AppID: set WOLFRAM_APPID or app_id under '{env}' in {config_path}")

        overrides = {key: env_config[key] for key in cls.model_fields if key in env_config and key != "app_id"}
        if os.getenv("WOLFRAM_HTTP_TIMEOUT"):
            overrides["http_timeout"] = float(os.getenv("WOLFRAM_HTTP_TIMEOUT"))

        return cls(app_id=app_id, **overrides)
