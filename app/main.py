"""API FastAPI de pedidos de entrega.

Fluxo:
- Cada rota de escrita recebe `{"data": {...}}` e passa pelo pipeline de checks.
- O primeiro check que falha vira resposta `{"error": mensagem}` com o status do erro.
- Se `ORDERS_DATA_PATH` apontar para um JSON, o Store começa com esses pedidos.
"""

import logging

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .errors import OrderError
from .models import OrderEnvelope
from .orders import OrderService
from .store import OrderStore, load_orders

logger = logging.getLogger("uvicorn.error")


def _build_service() -> OrderService:
    settings = get_settings()
    if settings.orders_data_path and settings.orders_data_path.exists():
        store = load_orders(settings.orders_data_path)
        logger.info("Seed carregado de %s: %s pedidos", settings.orders_data_path, len(store))
    else:
        store = OrderStore()
    return OrderService(store)


def get_service(request: Request) -> OrderService:
    return request.app.state.orders


def create_app(service: OrderService | None = None) -> FastAPI:
    """Monta a aplicação; testes injetam um `OrderService` próprio."""
    settings = get_settings()
    logger.setLevel(settings.log_level)

    app = FastAPI(title=settings.app_title, version="0.1.0")
    app.state.orders = service or _build_service()
    logger.info("Store iniciado com %s pedidos", len(app.state.orders.store))

    @app.exception_handler(OrderError)
    async def order_error_handler(request: Request, exc: OrderError) -> JSONResponse:
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
        return JSONResponse(
            {"error": exc.detail}, status_code=exc.status_code, headers=exc.headers
        )

    @app.exception_handler(RequestValidationError)
    async def body_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # corpo que não é um objeto JSON no formato {"data": {...}}
        logger.warning("Corpo inválido em %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            {"error": "Request body must be a JSON object with a data property"},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Erro inesperado em %s %s", request.method, request.url.path)
        return JSONResponse(
            {"error": "Internal Server Error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.get("/healthz")
    def healthcheck() -> dict:
        """Endpoint de liveness simples."""
        return {"status": "ok"}

    @app.get("/orders")
    def list_orders(orders: OrderService = Depends(get_service)) -> dict:
        return {"data": [o.model_dump() for o in orders.list()]}

    @app.post("/orders", status_code=status.HTTP_201_CREATED)
    def create_order(envelope: OrderEnvelope, orders: OrderService = Depends(get_service)) -> dict:
        """Cria pedido; status é sempre `pending` e o id é gerado aqui."""
        return {"data": orders.create(envelope.data).model_dump()}

    @app.get("/orders/{orderId}")
    def read_order(orderId: str, orders: OrderService = Depends(get_service)) -> dict:
        return {"data": orders.read(orderId).model_dump()}

    @app.put("/orders/{orderId}")
    def update_order(
        orderId: str,
        envelope: OrderEnvelope,
        orders: OrderService = Depends(get_service),
    ) -> dict:
        return {"data": orders.update(orderId, envelope.data).model_dump()}

    @app.delete("/orders/{orderId}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_order(orderId: str, orders: OrderService = Depends(get_service)) -> Response:
        orders.delete(orderId)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app


app = create_app()
