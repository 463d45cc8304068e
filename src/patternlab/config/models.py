# src/patternlab/config/models.py

from pathlib import Path
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator


class CoffeeMenu(BaseModel):
    base_cost: int = Field(5, ge=0)      # plain coffee
    milk_cost: int = Field(2, ge=0)      # added by MilkDecorator
    currency: str = "$"

class ObserversConfig(BaseModel):
    console: bool = True                 # echo every event to stdout
    events_file: Optional[Path] = None   # JSON lines sink, disabled when unset

class LoggingConfig(BaseModel):
    log_dir: Optional[Path] = None       # defaults to ~/.patternlab/logs
    verbose: bool = False

class LabConfig(BaseModel):
    error_policy: Literal["continue", "raise", "collect"] = "continue"
    observer_count: int = Field(2, ge=0)
    coffee: CoffeeMenu = Field(default_factory=CoffeeMenu)
    observers: ObserversConfig = Field(default_factory=ObserversConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("error_policy", mode="before")
    @classmethod
    def _lower_policy(cls, v):
        return v.lower() if isinstance(v, str) else v
