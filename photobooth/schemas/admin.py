from pydantic import BaseModel

class Admin(BaseModel):
    id: int
    email: str

    class Config:
        from_attributes = True
