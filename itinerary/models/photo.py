from pydantic import BaseModel


class PhotoUpload(BaseModel):
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


class PhotoUrl(BaseModel):
    url: str


class PhotoList(BaseModel):
    photos: list[str]
