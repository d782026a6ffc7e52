from pydantic import BaseModel, ConfigDict, Field


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Curved monitor 24 inches"])
    price: float = Field(..., gt=0, examples=[300])
    availability: bool = True


class ProductUpdate(ProductCreate):
    availability: bool = Field(..., examples=[True])


class ProductOut(BaseModel):
    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Curved monitor 24 inches"])
    price: float = Field(..., examples=[300])
    availability: bool = Field(..., examples=[True])

    model_config = ConfigDict(from_attributes=True)


class ProductResponse(BaseModel):
    data: ProductOut


class ProductListResponse(BaseModel):
    data: list[ProductOut]


class MessageResponse(BaseModel):
    data: str = Field(..., examples=["Product deleted"])


class ErrorResponse(BaseModel):
    error: str = Field(..., examples=["Product not found"])


class FieldError(BaseModel):
    field: str
    message: str
    location: str = "body"


class ValidationErrorResponse(BaseModel):
    errors: list[FieldError]
