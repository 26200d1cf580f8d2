from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SBase(BaseModel):
    """Базовый класс для всех Pydantic-схем в проекте.

    Снаружи поля приходят и уходят в camelCase (firstName, passwordConf),
    внутри используются обычные имена атрибутов.
    """
    model_config = ConfigDict(
        from_attributes=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )
