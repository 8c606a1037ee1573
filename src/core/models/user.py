from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel

from core.utils.names import concat_name


class UserSummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    email: str
    first_name: str | None = None
    last_name: str | None = None

    @computed_field(alias="displayName")
    @property
    def display_name(self) -> str | None:
        return concat_name(self.first_name, self.last_name)
