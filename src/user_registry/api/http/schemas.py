from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Body of confirmation and error responses."""

    message: str
