from pydantic import BaseModel


class ConvertRequest(BaseModel):
    html: str
    filename: str = "resume.pdf"
