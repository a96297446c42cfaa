"""Field types shared by the catalog schemas."""

from typing import Annotated

from pydantic import StringConstraints

# Names are trimmed before the length check so "   " is rejected like ""
RequiredName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
