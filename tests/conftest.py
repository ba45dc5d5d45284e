# backend/tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests para la tienda.

- Variables de entorno de prueba ANTES de importar la app (settings cacheados)
- SQLite en memoria (aiosqlite + StaticPool) con soporte de SAVEPOINT, que
  usa OrderService.create_order
- Catálogo y pedidos de prueba
- Mercado Pago simulado con httpx.MockTransport (sin red)
- App FastAPI con overrides de sesión / cliente / settings y cliente httpx
  con ciclo de vida (asgi-lifespan)
"""

import os
import sys
import pathlib
from collections.abc import AsyncIterator
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# 0) Variables mínimas de entorno (antes de cualquier import de app.*)
# -----------------------------------------------------------------------------
os.environ["PYTHON_ENV"] = "test"
os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("MERCADOPAGO_ACCESS_TOKEN", "TEST-0000000000000000-000000-test")
os.environ.setdefault("APP_BASE_URL", "https://tienda.test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

# -----------------------------------------------------------------------------
# 1) Asegura .../backend en sys.path
# -----------------------------------------------------------------------------
BACKEND_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

import httpx
import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.shared.config import MercadoPagoSettings, reset_payments_settings
from app.shared.database import Base
from app.modules.orders.models import Order, Product  # noqa: F401  (registra tablas)
from app.modules.orders.enums import PaymentMethod, ShippingZone
from app.modules.orders.schemas import CreateOrderInput, OrderItemInput, ShippingAddress
from app.modules.orders.services import OrderService
from app.modules.payments.providers import MercadoPagoClient

TEST_WEBHOOK_SECRET = "test-webhook-secret"


# -----------------------------------------------------------------------------
# 2) Base de datos
# -----------------------------------------------------------------------------
@pytest.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # pysqlite/aiosqlite no emiten BEGIN por sí mismos: sin esto los
    # SAVEPOINT de begin_nested() no se comportan como en Postgres.
    @event.listens_for(eng.sync_engine, "connect")
    def _do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(eng.sync_engine, "begin")
    def _do_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield eng
    finally:
        await eng.dispose()


@pytest.fixture
async def db_session(engine) -> AsyncIterator[AsyncSession]:
    maker = async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
    async with maker() as session:
        yield session


# -----------------------------------------------------------------------------
# 3) Catálogo y pedidos
# -----------------------------------------------------------------------------
@pytest.fixture
def make_product(db_session):
    counter = {"n": 0}

    async def _make(
        *,
        name: str = "Mate de calabaza",
        price: int = 1_500_000,
        is_active: bool = True,
        image_url: Optional[str] = "https://cdn.tienda.test/mate.jpg",
    ) -> Product:
        counter["n"] += 1
        product = Product(
            name=name,
            sku=f"SKU-{counter['n']:04d}",
            image_url=image_url,
            price=price,
            is_active=is_active,
        )
        db_session.add(product)
        await db_session.commit()
        return product

    return _make


def _shipping_address(zone: ShippingZone = ShippingZone.AMBA, **overrides: Any) -> ShippingAddress:
    data: Dict[str, Any] = {
        "full_name": "Juana Pérez",
        "phone": "+54 11 5555-1234",
        "street": "Av. Corrientes",
        "number": "1234",
        "city": "CABA",
        "province": "Buenos Aires",
        "postal_code": "1043",
        "zone": zone,
    }
    data.update(overrides)
    return ShippingAddress(**data)


def _shipping_payload(**overrides: Any) -> Dict[str, Any]:
    """Datos de envío en camelCase, como los manda el frontend."""
    data: Dict[str, Any] = {
        "fullName": "Juana Pérez",
        "phone": "+54 11 5555-1234",
        "street": "Av. Corrientes",
        "number": "1234",
        "city": "CABA",
        "province": "Buenos Aires",
        "postalCode": "1043",
        "zone": "amba",
    }
    data.update(overrides)
    return data


def _build_order_input(
    product: Product,
    *,
    quantity: int = 1,
    shipping_cost: int = 0,
    discount: int = 0,
    user_id: Optional[str] = None,
    guest_email: Optional[str] = "comprador@gmail.com",
    zone: ShippingZone = ShippingZone.PICKUP,
) -> CreateOrderInput:
    item = OrderItemInput(
        product_id=product.id,
        product_name=product.name,
        product_sku=product.sku,
        product_image=product.image_url,
        unit_price=product.price,
        quantity=quantity,
    )
    subtotal = item.total
    return CreateOrderInput(
        user_id=user_id,
        guest_email=guest_email,
        items=[item],
        subtotal=subtotal,
        shipping_cost=shipping_cost,
        discount=discount,
        total=subtotal + shipping_cost - discount,
        payment_method=PaymentMethod.MERCADOPAGO,
        shipping=_shipping_address(zone),
    )


def _fixed_numbers(*numbers: str):
    """Generador de números de pedido predecible para tests."""
    pending: List[str] = list(numbers)

    async def _next(session) -> str:
        return pending.pop(0) if len(pending) > 1 else pending[0]

    return _next


@pytest.fixture
def shipping_payload():
    return _shipping_payload


@pytest.fixture
def build_order_input():
    return _build_order_input


@pytest.fixture
def fixed_numbers():
    return _fixed_numbers


@pytest.fixture
def make_order(db_session, make_product):
    async def _make(
        *,
        order_number: Optional[str] = None,
        product: Optional[Product] = None,
        **kwargs: Any,
    ) -> Order:
        product = product or await make_product()
        service = OrderService(number_generator=_fixed_numbers(order_number) if order_number else None)
        return await service.create_order(db_session, _build_order_input(product, **kwargs))

    return _make


# -----------------------------------------------------------------------------
# 4) Mercado Pago simulado
# -----------------------------------------------------------------------------
class FakeMercadoPago:
    """API de Mercado Pago en memoria (pagos y preferencias)."""

    def __init__(self) -> None:
        self.payments: Dict[str, Dict[str, Any]] = {}
        self.requests: List[httpx.Request] = []
        self.preference_status = 201
        self.payment_error_status: Optional[int] = None
        self.raise_timeout = False

    def add_payment(
        self,
        payment_id: str,
        *,
        status: str,
        external_reference: Optional[str],
        transaction_amount: float = 15000.0,
    ) -> None:
        self.payments[payment_id] = {
            "id": int(payment_id),
            "status": status,
            "status_detail": "accredited" if status == "approved" else status,
            "transaction_amount": transaction_amount,
            "external_reference": external_reference,
            "payment_method_id": "visa",
            "payment_type_id": "credit_card",
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_timeout:
            raise httpx.ReadTimeout("timeout simulado", request=request)

        path = request.url.path
        if request.method == "POST" and path == "/checkout/preferences":
            if self.preference_status >= 400:
                return httpx.Response(self.preference_status, json={"message": "error"})
            return httpx.Response(
                self.preference_status,
                json={
                    "id": "123456789-abcd-pref",
                    "init_point": "https://www.mercadopago.com.ar/checkout/v1/redirect?pref_id=123456789-abcd-pref",
                    "sandbox_init_point": "https://sandbox.mercadopago.com.ar/checkout/v1/redirect?pref_id=123456789-abcd-pref",
                },
            )

        if request.method == "GET" and path.startswith("/v1/payments/"):
            if self.payment_error_status is not None:
                return httpx.Response(self.payment_error_status, json={"message": "error"})
            payment_id = path.rsplit("/", 1)[-1]
            payment = self.payments.get(payment_id)
            if payment is None:
                return httpx.Response(404, json={"message": "Payment not found"})
            return httpx.Response(200, json=payment)

        return httpx.Response(404, json={"message": "not found"})

    @property
    def preference_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/checkout/preferences"]


@pytest.fixture
def mp_api() -> FakeMercadoPago:
    return FakeMercadoPago()


@pytest.fixture
async def mp_client(mp_api) -> AsyncIterator[MercadoPagoClient]:
    client = MercadoPagoClient(
        "TEST-token",
        base_url="https://api.mercadopago.test",
        transport=httpx.MockTransport(mp_api.handler),
        retry_backoff=0,
    )
    try:
        yield client
    finally:
        await client.aclose()


@pytest.fixture
def mp_settings() -> MercadoPagoSettings:
    return MercadoPagoSettings(
        MERCADOPAGO_ACCESS_TOKEN="TEST-token",
        MERCADOPAGO_WEBHOOK_SECRET=TEST_WEBHOOK_SECRET,
        APP_BASE_URL="https://tienda.test",
    )


@pytest.fixture
def signed_headers():
    """Headers x-signature / x-request-id válidos para el secreto de prueba."""
    from app.modules.payments.services.webhooks.signature_verification import (
        build_signature_manifest,
        compute_signature,
    )

    def _sign(data_id: str, *, request_id: str = "req-test-0001", ts: str = "1742212800") -> Dict[str, str]:
        digest = compute_signature(build_signature_manifest(data_id, request_id, ts), TEST_WEBHOOK_SECRET)
        return {"x-signature": f"ts={ts},v1={digest}", "x-request-id": request_id}

    return _sign


@pytest.fixture(autouse=True)
def _reset_payments_settings():
    reset_payments_settings()
    yield
    reset_payments_settings()


# -----------------------------------------------------------------------------
# 5) App FastAPI y cliente httpx (httpx>=0.28, con ciclo de vida)
# -----------------------------------------------------------------------------
@pytest.fixture
def app(db_session, mp_client, mp_settings):
    """
    Carga la aplicación principal **después** de setear env vars y
    reemplaza sesión, cliente de Mercado Pago y settings de pagos.
    """
    from app.main import app as fastapi_app
    from app.shared.database.database import get_async_session
    from app.modules.payments.dependencies import get_mercadopago_client, get_mercadopago_settings

    async def _session_override():
        yield db_session

    fastapi_app.dependency_overrides[get_async_session] = _session_override
    fastapi_app.dependency_overrides[get_mercadopago_client] = lambda: mp_client
    fastapi_app.dependency_overrides[get_mercadopago_settings] = lambda: mp_settings
    try:
        yield fastapi_app
    finally:
        fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app) -> AsyncIterator[AsyncClient]:
    """
    Cliente HTTP asíncrono contra la app con ASGITransport y gestión de
    startup/shutdown mediante asgi-lifespan.
    """
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
