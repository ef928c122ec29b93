"""Item record - the stored unit of the items blob."""

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr


class Item(BaseModel):
    """Single catalog item as stored in the data file.

    Unknown fields are kept so that rewriting the file does not drop them.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: StrictInt
    name: StrictStr
    category: StrictStr
    price: StrictInt | StrictFloat | None = None
