from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema that reads snake_case or camelCase and writes camelCase"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MutationResponse(CamelModel):
    """Acknowledgement returned by ledger transactions"""
    success: bool = True
    id: Optional[str] = None
