"""Every failure leaves the API in the same {success, data, error{code, message}} envelope."""

from typing import AsyncGenerator

from fastapi import FastAPI
import httpx
from pydantic import BaseModel, Field
import pytest

from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.exception.exceptions import (
    AlreadyCancelledError,
    DuplicateEmailError,
    NotFoundError,
)


class _Body(BaseModel):
    email: str
    time_id: int = Field(gt=0)


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get('/duplicate')
    async def duplicate() -> None:
        raise DuplicateEmailError()

    @app.get('/cancelled')
    async def cancelled() -> None:
        raise AlreadyCancelledError()

    @app.get('/missing')
    async def missing() -> None:
        raise NotFoundError('Class not found')

    @app.get('/value')
    async def value() -> None:
        raise ValueError('bad value')

    @app.get('/boom')
    async def boom() -> None:
        raise RuntimeError('secret internals')

    @app.post('/validate')
    async def validate(body: _Body) -> dict:
        return body.model_dump()

    return app


@pytest.fixture
async def client() -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=_build_app(), raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url='http://test') as c:
        yield c


@pytest.mark.unit
class TestErrorEnvelope:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'path,status_code,code,message',
        [
            ('/duplicate', 409, 'AUTH001', 'Email already registered'),
            ('/cancelled', 400, 'RESV003', 'Reservation is already cancelled'),
            ('/missing', 404, 'COMMON004', 'Class not found'),
            ('/value', 400, 'COMMON001', 'bad value'),
        ],
    )
    async def test_domain_errors_map_to_code_and_status(
        self, client: httpx.AsyncClient, path: str, status_code: int, code: str, message: str
    ) -> None:
        response = await client.get(path)

        assert response.status_code == status_code
        assert response.json() == {
            'success': False,
            'data': None,
            'error': {'code': code, 'message': message},
        }

    @pytest.mark.asyncio
    async def test_validation_error_is_400_with_field_names(self, client: httpx.AsyncClient) -> None:
        response = await client.post('/validate', json={'time_id': 0})

        assert response.status_code == 400
        error = response.json()['error']
        assert error['code'] == 'COMMON001'
        assert 'email' in error['message']
        assert 'time_id' in error['message']

    @pytest.mark.asyncio
    async def test_unknown_route_uses_envelope(self, client: httpx.AsyncClient) -> None:
        response = await client.get('/nowhere')

        assert response.status_code == 404
        assert response.json()['error']['code'] == 'COMMON004'

    @pytest.mark.asyncio
    async def test_wrong_method_uses_envelope(self, client: httpx.AsyncClient) -> None:
        response = await client.get('/validate')

        assert response.status_code == 405
        assert response.json()['error']['code'] == 'COMMON005'

    @pytest.mark.asyncio
    async def test_unhandled_error_hides_details(self, client: httpx.AsyncClient) -> None:
        response = await client.get('/boom')

        assert response.status_code == 500
        body = response.json()
        assert body['success'] is False
        assert body['error'] == {'code': 'COMMON999', 'message': 'Internal server error'}
        assert 'secret internals' not in response.text
