from pydantic import BaseModel

_orm = {"from_attributes": True}


class QAPictureResponse(BaseModel):
    picture_id: int
    theme: str
    picture_url: str | None = None

    model_config = _orm


class QAActivityResponse(BaseModel):
    activity_id: int
    activity_key: str
    activity_name: str

    model_config = _orm


class QATravelingResponse(BaseModel):
    trip_id: int
    trip_name: str

    model_config = _orm


class QADistanceResponse(BaseModel):
    distance_id: int
    distance_name: str

    model_config = _orm


class QAValueResponse(BaseModel):
    value_id: int
    value_name: str

    model_config = _orm


class QAEmotionalResponse(BaseModel):
    emotional_id: int
    emotional_name: str

    model_config = _orm


class ProvinceResponse(BaseModel):
    province_id: int
    province_name: str
    province_name_en: str | None = None
    region_id: int

    model_config = _orm
