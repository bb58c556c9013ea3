"""Request context passed explicitly from routes to use cases."""

from pydantic import BaseModel, ConfigDict

from lens.domain.model.identity import Identity


class AuthContext(BaseModel):
    """The authenticated caller of one request."""

    model_config = ConfigDict(frozen=True)

    identity: Identity
    session_token: str
