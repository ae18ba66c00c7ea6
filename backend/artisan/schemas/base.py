"""Schema Base: camelCase wire format shared by every request/response model.

Invariants:
    - JSON field names are camelCase (nextImport, fairId, remainingQuantity)
    - Requests accept camelCase or snake_case (populate_by_name)
    - Responses built straight from ORM rows (from_attributes)
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
