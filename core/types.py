from typing import Annotated

from pydantic import Field, StringConstraints

# presence check for required text columns
RequiredStr = Annotated[str, StringConstraints(min_length=1)]

Progress = Annotated[int, Field(ge=0, le=100)]
