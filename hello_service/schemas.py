from pydantic import BaseModel

GREETING_MESSAGE = "Hello World from Rust! 🦀"
HEALTH_BODY = "OK"


class GreetingResponse(BaseModel):
    message: str
    hostname: str
    timestamp: str
