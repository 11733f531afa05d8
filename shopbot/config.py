from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

DEFAULT_INPUT_FILE = "data/catalogue.json"
DEFAULT_BOT_NAME = "shopbot"
DEFAULT_PAGE_SIZE = 3

# settings field -> environment variable
_ENV_VARS = {
    "input_file": "INPUT_FILE",
    "bot_name": "BOT_NAME",
    "page_size": "PAGE_SIZE",
}


class Settings(BaseModel):
    input_file: str = DEFAULT_INPUT_FILE
    bot_name: str = DEFAULT_BOT_NAME
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    debug_trace: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Read settings from INPUT_FILE, BOT_NAME, PAGE_SIZE and DEBUG_TRACE.
        Unset or blank variables keep their defaults.
        """
        env = os.environ if environ is None else environ

        values = {}
        for field_name, var in _ENV_VARS.items():
            raw = (env.get(var) or "").strip()
            if raw:
                values[field_name] = raw
        values["debug_trace"] = (env.get("DEBUG_TRACE") or "").strip() == "1"

        try:
            return cls.model_validate(values)
        except ValidationError as e:
            names = sorted({_ENV_VARS.get(str(err["loc"][0]), str(err["loc"][0])) for err in e.errors()})
            raise ValueError(f"Invalid environment configuration for {', '.join(names)}: {e}") from e
