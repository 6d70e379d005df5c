from typing import Annotated

from pydantic import BaseModel, Field

# Range of a BIGINT column; anything outside cannot be stored or looked up.
BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

BigInt = Annotated[int, Field(ge=BIGINT_MIN, le=BIGINT_MAX)]
Int32 = Annotated[int, Field(ge=INT_MIN, le=INT_MAX)]


class GenericMessage(BaseModel):
    message: str
