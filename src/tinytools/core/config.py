# tinytools/src/tinytools/core/config.py

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = Field(default="WARNING")

    # datediff / dateadd
    use_utc: bool = Field(default=True)
    date_format: str = Field(default="%Y-%m-%d")

    # estimate
    estimate_iterations: int = Field(default=3)
    estimate_warmup: int = Field(default=1)

    # dirsize
    dirsize_threads: int = Field(default=4)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "TINYTOOLS_",
        "extra": "ignore"
    }


# Instantiate settings
settings = Settings()
