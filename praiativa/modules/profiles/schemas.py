from pydantic import BaseModel, ConfigDict

class ProfileOut(BaseModel):
    nome: str
    contato: str
    model_config = ConfigDict(from_attributes=True)
