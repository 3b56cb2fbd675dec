from pydantic import BaseModel, ConfigDict


class SerdeBase(BaseModel):
    # Responses are built straight from SQLModel rows
    model_config = ConfigDict(from_attributes=True)
