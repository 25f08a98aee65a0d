"""Auth use case results."""

import attrs


@attrs.define(frozen=True)
class LoginResult:
    access_token: str = attrs.field(repr=False)
    refresh_token: str = attrs.field(repr=False)
    email: str
    name: str


@attrs.define(frozen=True)
class TokenPair:
    """Returned by refresh rotation. expires_in is the access-token lifetime in seconds."""

    access_token: str = attrs.field(repr=False)
    refresh_token: str = attrs.field(repr=False)
    expires_in: int
    token_type: str = 'Bearer'
