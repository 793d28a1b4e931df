"""
Runtime settings.

Settings are passed explicitly to the runners; nothing here reads the
environment.
"""

import tempfile
from typing import Optional

from pydantic import BaseModel, ConfigDict

DEFAULT_MAX_ATTEMPTS = 10


class GraphulaSettings(BaseModel):
    """
    Settings shared by the runners.

    Insert attempts are a property of each node builder (max_attempts
    argument), not of a run, so they are not a setting here. Unknown
    fields are rejected.

    Fields:
        dump_dir: Directory for failure dumps (None = system temp dir)
        dump_prefix: File name prefix of temp failure dumps
        dump_suffix: File name suffix of temp failure dumps
        encoding: Encoding of dump and replay files
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    dump_dir: Optional[str] = None
    dump_prefix: str = "fail-"
    dump_suffix: str = ".graphula"
    encoding: str = "utf-8"

    def resolved_dump_dir(self) -> str:
        return self.dump_dir or tempfile.gettempdir()
