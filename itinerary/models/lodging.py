from pydantic import BaseModel


class Lodging(BaseModel):
    link: str
    address: str


class LodgingResponse(Lodging):
    map_link: str


class TripLodging(BaseModel):
    barcelona: LodgingResponse
    ibiza: LodgingResponse
